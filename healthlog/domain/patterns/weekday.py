"""Day-of-week grouping helpers."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional

from ...models.daily_log import DailyRecord


def average_by_weekday(
    records: Iterable[DailyRecord],
    value_fn: Callable[[DailyRecord], Optional[float]],
) -> Dict[int, float]:
    """Mean of ``value_fn`` per ISO weekday (1=Monday..7=Sunday).

    Weekdays with no observation are omitted. A ``None`` value means the
    metric was not recorded that day and is skipped.
    """

    grouped: Dict[int, List[float]] = defaultdict(list)
    for record in records:
        value = value_fn(record)
        if value is not None:
            grouped[record.weekday].append(value)
    return {day: sum(values) / len(values) for day, values in sorted(grouped.items())}
