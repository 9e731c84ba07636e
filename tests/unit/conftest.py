import pytest

# Modules covering the pure layout and rule algorithms
CORE_ALGORITHM_MODULES = {
    "test_amplitude_curve.py",
    "test_segment_builder.py",
    "test_rule_evaluator.py",
    "test_viewport.py",
}


def pytest_collection_modifyitems(items):
    """Mark unit tests, and the core algorithm tests as business logic."""
    for item in items:
        if item.path.parent.name != "unit":
            continue
        item.add_marker(pytest.mark.unit)
        if item.path.name in CORE_ALGORITHM_MODULES:
            item.add_marker(pytest.mark.business_logic)
