"""Short-term trend classification."""

from __future__ import annotations

from typing import Final, Sequence

from ...models.aggregates import TrendDirection

MIN_TREND_VALUES: Final[int] = 6
TREND_TOLERANCE: Final[float] = 0.1


def classify_trend(values: Sequence[float]) -> TrendDirection:
    """Compare the most recent third of ``values`` against the earliest third.

    ``values`` are ordered oldest first. Fewer than six values is too little
    to tell a trend from noise and yields ``UNKNOWN``. A zero baseline counts
    as no change.
    """

    if len(values) < MIN_TREND_VALUES:
        return TrendDirection.UNKNOWN
    size = len(values) // 3
    earlier = sum(values[:size]) / size
    recent = sum(values[-size:]) / size
    if earlier <= 0:
        return TrendDirection.STABLE
    if recent > earlier * (1 + TREND_TOLERANCE):
        return TrendDirection.INCREASING
    if recent < earlier * (1 - TREND_TOLERANCE):
        return TrendDirection.DECREASING
    return TrendDirection.STABLE
