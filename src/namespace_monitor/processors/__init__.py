"""
Processors Package - Namespace Selection and Upload Transformation.

Components:
    - NamespaceMetricsProcessor: Lists, filters and classifies series
    - MetricStatsTransformer: Builds path-named upload records
"""

from namespace_monitor.processors.metric_transformer import (
    PATH_DELIMITER,
    MetricStatsTransformer,
)
from namespace_monitor.processors.namespace_processor import (
    MetricsListerProtocol,
    NamespaceMetricsProcessor,
    RequestCounterProtocol,
)

__all__ = [
    "PATH_DELIMITER",
    "MetricStatsTransformer",
    "MetricsListerProtocol",
    "NamespaceMetricsProcessor",
    "RequestCounterProtocol",
]
