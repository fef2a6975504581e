"""
Namespace Monitor - Cloud Metrics Selection and Transformation Pipeline.

Polls a single monitoring namespace of a cloud metrics API, keeps only
the metric series whose dimension values match the configured patterns,
classifies each series by its configured statistic and turns the fetched
values into path-addressed records for a monitoring backend.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (RawMetric, MatchedMetric, UploadMetric, etc.)
    - filters: Dimension filters, dimension predicate, statistic resolver
    - processors: NamespaceMetricsProcessor and MetricStatsTransformer
    - pipeline: One complete collection pass
    - adapters: Metrics API clients and the request counter
    - config: Configuration models and loaders

Example:
    >>> from namespace_monitor.config.loader import load_config
    >>> config = load_config("config/default.yaml")
    >>> processor = NamespaceMetricsProcessor.from_config(config)
    >>> matched = processor.collect_candidates(client, "production", counter)

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Namespace Monitor.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import namespace_monitor
        >>> namespace_monitor.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("namespace_monitor").setLevel(level)
