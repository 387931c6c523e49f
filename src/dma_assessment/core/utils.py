"""Numeric helpers shared by the scoring and benchmark modules."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's built-in round() uses banker's rounding (round(2.5) == 2);
    scores must round 2.5 to 3 and -2.5 to -2.

    Args:
        value: Value to round.

    Returns:
        Nearest integer.
    """
    return math.floor(value + 0.5)


def clamp(value: float, min_val: float = 0.0, max_val: float = 100.0) -> float:
    """Clamp a value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def weighted_mean(values: list[float], weights: list[float]) -> float:
    """Weighted arithmetic mean; 0.0 when the weights sum to zero.

    Raises:
        ValueError: If lengths differ.
    """
    if len(values) != len(weights):
        raise ValueError("Values and weights must have the same length")
    total_weight = sum(weights)
    if total_weight == 0:
        return 0.0
    return sum(v * w for v, w in zip(values, weights)) / total_weight
