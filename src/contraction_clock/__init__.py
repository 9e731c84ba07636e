"""
Contraction Clock: labor contraction timer and 5-1-1 rule tracker.

The pure core lives in ``timeline`` (amplitude curve, segment layout,
viewport panning) and ``analysis`` (rule evaluation, statistics);
``tracker.ContractionTracker`` ties them to a session.
"""

from contraction_clock.tracker import ContractionTracker

__all__ = ["ContractionTracker"]
