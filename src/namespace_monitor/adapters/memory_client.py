"""
In-Memory Metrics Client.

A fake metrics API for development and testing. Serves a fixed set of
metric series with the same paging and name-only filter semantics as
the CloudWatch listing call, and fixed statistic values.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from namespace_monitor.domain.entities import (
    MatchedMetric,
    MetricsPage,
    MetricStatistic,
    RawMetric,
)
from namespace_monitor.domain.value_objects import DimensionFilter, DimensionValue


class InMemoryMetricsClient:
    """Fake metrics API backed by in-memory series."""

    def __init__(
        self,
        metrics: Sequence[RawMetric],
        values: Optional[Dict[RawMetric, float]] = None,
        page_size: int = 500,
        unit: str = "None",
    ) -> None:
        """
        Initialize the fake API.

        Args:
            metrics: Series the listing call enumerates
            values: Latest value per series; series without an entry
                report no datapoints
            page_size: Series per listing page
            unit: Unit reported with every value
        """
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._metrics = list(metrics)
        self._values = dict(values or {})
        self._page_size = page_size
        self._unit = unit
        self.list_calls = 0
        self.statistics_calls = 0

    def list_metrics(
        self,
        namespace: str,
        dimension_filters: Sequence[DimensionFilter],
        next_token: Optional[str] = None,
    ) -> MetricsPage:
        """Return one page of series matching namespace and filters."""
        self.list_calls += 1
        selected = [
            m
            for m in self._metrics
            if m.namespace == namespace and self._passes_filters(m, dimension_filters)
        ]

        start = int(next_token) if next_token else 0
        end = start + self._page_size
        token = str(end) if end < len(selected) else None
        return MetricsPage(metrics=selected[start:end], next_token=token)

    def get_metric_statistics(
        self,
        metric: MatchedMetric,
        start_time: datetime,
        end_time: datetime,
        period_seconds: int,
    ) -> MetricStatistic:
        """Return the configured value of the series, stamped at end_time."""
        self.statistics_calls += 1
        value = self._values.get(metric.raw)
        if value is None:
            return MetricStatistic(metric=metric)
        return MetricStatistic(
            metric=metric, value=value, unit=self._unit, timestamp=end_time
        )

    @staticmethod
    def _passes_filters(
        metric: RawMetric,
        dimension_filters: Sequence[DimensionFilter],
    ) -> bool:
        for dimension_filter in dimension_filters:
            value = metric.dimension_value(dimension_filter.name)
            if value is None:
                return False
            if dimension_filter.value is not None and value != dimension_filter.value:
                return False
        return True


def make_metric(namespace: str, name: str, **dimensions: str) -> RawMetric:
    """Shorthand for building a RawMetric, dimensions in keyword order."""
    return RawMetric(
        name=name,
        namespace=namespace,
        dimensions=tuple(DimensionValue(name=k, value=v) for k, v in dimensions.items()),
    )
