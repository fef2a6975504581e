"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for the Namespace Monitor.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - StatisticType: Closed enumeration of statistic kinds
    - RawMetric: Metric series as enumerated by the remote API
    - MatchedMetric: RawMetric annotated with its IncludeMetric
    - UploadMetric: Path-named record handed to the uploader
    - CollectionResult: Complete result of one collection pass

Value Objects:
    - DimensionValue: One (name, value) pair of a raw metric
    - DimensionFilter: Name-only filter sent to the listing API
    - TimeRange: Statistics window in minutes before now

Entities (per poll cycle):
    - MetricsPage: One page of a listing call
    - MetricStatistic: One fetched sample for a matched metric
    - NamespaceMetricStatistics: All samples of one poll cycle

Design Principles:
    - Immutable (frozen models)
    - No infrastructure dependencies
"""

from namespace_monitor.domain.entities import (
    AggregationType,
    CollectionResult,
    Dimension,
    IncludeMetric,
    MatchedMetric,
    MetricsPage,
    MetricStatistic,
    NamespaceMetricStatistics,
    RawMetric,
    StatisticType,
    UploadMetric,
)
from namespace_monitor.domain.value_objects import (
    DimensionFilter,
    DimensionValue,
    TimeRange,
)

__all__ = [
    "AggregationType",
    "CollectionResult",
    "Dimension",
    "IncludeMetric",
    "MatchedMetric",
    "RawMetric",
    "StatisticType",
    "UploadMetric",
    "MetricsPage",
    "MetricStatistic",
    "NamespaceMetricStatistics",
    "DimensionFilter",
    "DimensionValue",
    "TimeRange",
]
