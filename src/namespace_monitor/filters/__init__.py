"""
Filters Package - Metric Selection.

Components:
    - build_dimension_filters: Name-only filters for the listing API
    - MultiDimensionPredicate: Dimension pattern matching per metric
    - StatisticTypeResolver: Include metric lookup by metric name

Design Principles:
    - Each component is independently testable
    - Configuration injected via constructor
    - Stateless after construction
    - Clear rejection reasons for debug logging
"""

from namespace_monitor.filters.dimension_filters import build_dimension_filters
from namespace_monitor.filters.dimension_predicate import (
    WILDCARD_PATTERNS,
    DimensionMatcher,
    MultiDimensionPredicate,
)
from namespace_monitor.filters.statistic_resolver import (
    StatisticTypeResolver,
    UnconfiguredMetricError,
    resolve_statistic_type,
)

__all__ = [
    "build_dimension_filters",
    "WILDCARD_PATTERNS",
    "DimensionMatcher",
    "MultiDimensionPredicate",
    "StatisticTypeResolver",
    "UnconfiguredMetricError",
    "resolve_statistic_type",
]
