"""Derived problem metrics."""

import math

DIFFICULTY_CLIP_THRESHOLD = 400.0


def _round_half_away(value: float) -> float:
    return float(math.floor(abs(value) + 0.5)) * (1.0 if value >= 0 else -1.0)


def clip_difficulty(difficulty: float | None) -> float | None:
    """
    Convert an estimated (logistic scale) difficulty into its displayed value.

    Values at or above 400 are rounded as-is. Lower values are compressed with
    ``400 / exp(1 - d / 400)`` so the low end of the curve is not linearly
    comparable with the high end; the result stays strictly below 400.

    Returns None when there is no estimate.
    """
    if difficulty is None:
        return None

    if difficulty >= DIFFICULTY_CLIP_THRESHOLD:
        return _round_half_away(difficulty)

    clipped = _round_half_away(
        DIFFICULTY_CLIP_THRESHOLD / math.exp(1.0 - difficulty / DIFFICULTY_CLIP_THRESHOLD)
    )
    return min(clipped, DIFFICULTY_CLIP_THRESHOLD - 1)


def success_rate(solved: int | None, submitted: int | None) -> float | None:
    """Percentage of accepted submissions, or None when it is undefined."""
    if solved is None or submitted is None or submitted <= 0:
        return None
    return solved / submitted * 100
