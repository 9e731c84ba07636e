"""Predefined contraction timing rule configurations."""

from contraction_clock.constants import DEFAULT_RULE_NAME
from contraction_clock.constants import RuleConstants as RC
from contraction_clock.models.rule import RuleConfig

__all__ = [
    "RuleConfig",
    "FIVE_ONE_ONE",
    "FOUR_ONE_ONE",
    "AVAILABLE_RULES",
    "DEFAULT_RULE_NAME",
    "get_rule",
]

# ============================================================================
# 5-1-1 Rule
# ============================================================================

FIVE_ONE_ONE = RuleConfig(
    name="511",
    title="5-1-1 Rule",
    description="Contractions ≤5 min apart, lasting ≥1 min, for ≥1 hour",
    max_interval_ms=RC.MAX_INTERVAL_MS,  # 5 minutes, start to start
    min_duration_ms=RC.MIN_DURATION_MS,  # 1 minute
    min_sustain_ms=RC.MIN_SUSTAIN_MS,  # 1 hour
)

# ============================================================================
# 4-1-1 Rule
# ============================================================================

FOUR_ONE_ONE = RuleConfig(
    name="411",
    title="4-1-1 Rule",
    description="Contractions ≤4 min apart, lasting ≥1 min, for ≥1 hour",
    max_interval_ms=RC.FOUR_ONE_ONE_MAX_INTERVAL_MS,
    min_duration_ms=RC.MIN_DURATION_MS,
    min_sustain_ms=RC.MIN_SUSTAIN_MS,
)

# ============================================================================
# Rule Registry
# ============================================================================

AVAILABLE_RULES: dict[str, RuleConfig] = {
    "511": FIVE_ONE_ONE,
    "411": FOUR_ONE_ONE,
}


def get_rule(name: str | None) -> RuleConfig:
    """
    Look up a rule by name.

    Args:
        name: Registry name, or None for the default rule

    Returns:
        RuleConfig

    Raises:
        ValueError: If the name is not registered
    """
    if name is None:
        name = DEFAULT_RULE_NAME
    try:
        return AVAILABLE_RULES[name]
    except KeyError:
        available = ", ".join(sorted(AVAILABLE_RULES))
        raise ValueError(f"Unknown rule '{name}'. Available: {available}") from None
