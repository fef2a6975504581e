"""
Statistic Type Resolver.

Maps a metric name to the statistic configured for it. Names the operator
did not configure resolve to UnconfiguredMetricError, which callers treat
as "do not report" rather than as a failure: the API usually enumerates
far more metrics than are tracked.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from namespace_monitor.domain.entities import IncludeMetric, StatisticType


class UnconfiguredMetricError(LookupError):
    """Raised when a metric name has no configured include metric."""

    def __init__(self, metric_name: str) -> None:
        super().__init__(f"metric {metric_name!r} is not configured")
        self.metric_name = metric_name


class StatisticTypeResolver:
    """Exact-name lookup of configured include metrics."""

    def __init__(self, include_metrics: Sequence[IncludeMetric]) -> None:
        """
        Index include metrics by name.

        Names are unique after config validation; should duplicates slip
        through, the first configured entry wins.
        """
        self._by_name: Dict[str, IncludeMetric] = {}
        for include_metric in include_metrics:
            self._by_name.setdefault(include_metric.name, include_metric)

    def find_include_metric(self, metric_name: str) -> Optional[IncludeMetric]:
        return self._by_name.get(metric_name)

    def resolve(self, metric_name: str) -> StatisticType:
        """
        Statistic type configured for the metric name.

        Raises:
            UnconfiguredMetricError: If no include metric has this name
        """
        include_metric = self._by_name.get(metric_name)
        if include_metric is None:
            raise UnconfiguredMetricError(metric_name)
        return include_metric.stat_type

    def __len__(self) -> int:
        return len(self._by_name)


def resolve_statistic_type(
    metric_name: str,
    include_metrics: Sequence[IncludeMetric],
) -> StatisticType:
    """One-off lookup without building a resolver first."""
    return StatisticTypeResolver(include_metrics).resolve(metric_name)
