"""Priority weighting applied on top of keyword evidence."""

MIN_PRIORITY = 1
MAX_PRIORITY = 10

# Each priority step adds 10% to the keyword score, so the spread is 1.0 to 1.9.
PRIORITY_STEP = 0.1


def priority_multiplier(priority: int) -> float:
    """Map a 1-10 priority onto a 1.0-1.9 multiplier (out-of-range values are clamped)."""
    clamped = max(MIN_PRIORITY, min(MAX_PRIORITY, int(priority)))
    return 1 + (clamped - MIN_PRIORITY) * PRIORITY_STEP
