"""Analytics dashboard computations."""

from .dashboard import average_completion, build_analytics_summary

__all__ = ["average_completion", "build_analytics_summary"]
