from .metrics_aggregator import MetricsAggregator

__all__ = ["MetricsAggregator"]
