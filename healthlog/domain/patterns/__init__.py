"""Day-of-week patterns, correlations and trends."""

from .builder import build_patterns
from .correlation import pearson_correlation
from .trend import classify_trend
from .weekday import average_by_weekday

__all__ = [
    "average_by_weekday",
    "build_patterns",
    "classify_trend",
    "pearson_correlation",
]
