"""Pearson correlation between paired daily metrics."""

from __future__ import annotations

import math
from typing import Callable, Final, Iterable, List, Optional, Sequence, Tuple

from ...models.daily_log import DailyRecord

MIN_PAIRS: Final[int] = 3

MetricFn = Callable[[DailyRecord], Optional[float]]


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> Optional[float]:
    """Return Pearson's r for ``xs`` and ``ys``.

    ``None`` when the series differ in length, hold fewer than three pairs or
    either one has zero variance.
    """

    if len(xs) != len(ys) or len(xs) < MIN_PAIRS:
        return None
    n = len(xs)
    x_mean = sum(xs) / n
    y_mean = sum(ys) / n
    numerator = sum((x - x_mean) * (y - y_mean) for x, y in zip(xs, ys))
    ss_x = sum((x - x_mean) ** 2 for x in xs)
    ss_y = sum((y - y_mean) ** 2 for y in ys)
    if ss_x <= 0 or ss_y <= 0:
        return None
    r = numerator / math.sqrt(ss_x * ss_y)
    if math.isnan(r):
        return None
    return min(max(r, -1.0), 1.0)


def paired_values(
    records: Iterable[DailyRecord], x_fn: MetricFn, y_fn: MetricFn
) -> Tuple[List[float], List[float]]:
    """Values of both metrics on the days where both were recorded."""

    xs: List[float] = []
    ys: List[float] = []
    for record in records:
        x, y = x_fn(record), y_fn(record)
        if x is None or y is None:
            continue
        xs.append(x)
        ys.append(y)
    return xs, ys


def correlate(
    records: Iterable[DailyRecord], x_fn: MetricFn, y_fn: MetricFn
) -> Optional[float]:
    return pearson_correlation(*paired_values(records, x_fn, y_fn))
