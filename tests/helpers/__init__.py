"""
Test helper utilities for contraction_clock testing.

This module provides reusable utilities for generating synthetic
contraction histories.
"""
