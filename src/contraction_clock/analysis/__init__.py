"""Rule evaluation and session statistics."""

from contraction_clock.analysis.rule import RuleEvaluator
from contraction_clock.analysis.rules import AVAILABLE_RULES, get_rule
from contraction_clock.analysis.stats import build_log, calculate_session_stats

__all__ = [
    "AVAILABLE_RULES",
    "RuleEvaluator",
    "build_log",
    "calculate_session_stats",
    "get_rule",
]
