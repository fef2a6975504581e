"""
Namespace Metrics Processor.

Selects and classifies the metric series of one namespace:

    1. Build name-only dimension filters from configuration
    2. Page through the listing API with those filters
    3. Keep series satisfying the dimension predicate
    4. Keep series whose metric name has a configured statistic

and, once statistics have been fetched, hands them to the transformer.

Design Notes:
    - Immutable after construction (predicate, resolver, display names)
    - The request counter is injected per call, never owned
    - Calls on one instance are serialized by an instance lock
    - API failures propagate; a pass never returns a partial listing
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import List, Optional, Protocol, Sequence, Tuple

from namespace_monitor.config.models import NamespaceConfig
from namespace_monitor.domain.entities import (
    Dimension,
    IncludeMetric,
    MatchedMetric,
    MetricsPage,
    NamespaceMetricStatistics,
    RawMetric,
    StatisticType,
    UploadMetric,
)
from namespace_monitor.domain.value_objects import DimensionFilter, DisplayNameDict
from namespace_monitor.filters.dimension_filters import build_dimension_filters
from namespace_monitor.filters.dimension_predicate import MultiDimensionPredicate
from namespace_monitor.filters.statistic_resolver import StatisticTypeResolver
from namespace_monitor.processors.metric_transformer import MetricStatsTransformer

logger = logging.getLogger(__name__)


class MetricsListerProtocol(Protocol):
    """Protocol for the listing side of the metrics API."""

    def list_metrics(
        self,
        namespace: str,
        dimension_filters: Sequence[DimensionFilter],
        next_token: Optional[str] = None,
    ) -> MetricsPage:
        ...


class RequestCounterProtocol(Protocol):
    """Protocol for the shared API request counter."""

    def increment(self, amount: int = 1, operation: Optional[str] = None) -> None:
        ...


class NamespaceMetricsProcessor:
    """
    Collects, classifies and transforms the metrics of one namespace.

    collect_candidates and classify share one instance lock, so a classify
    call waits for an in-flight listing pass on the same processor.
    Distinct processors never block each other.
    """

    def __init__(
        self,
        include_metrics: Sequence[IncludeMetric],
        dimensions: Sequence[Dimension],
        namespace: str,
        metric_prefix: Optional[str] = None,
    ) -> None:
        """
        Initialize processor with its configuration.

        Args:
            include_metrics: Metric names and their statistic types
            dimensions: Dimension constraints, in path order
            namespace: Namespace polled
            metric_prefix: Optional leading segments for upload paths
        """
        self._include_metrics: Tuple[IncludeMetric, ...] = tuple(include_metrics)
        self._dimensions: Tuple[Dimension, ...] = tuple(dimensions)
        self._namespace = namespace

        self._dimension_filters = build_dimension_filters(self._dimensions)
        self._predicate = MultiDimensionPredicate(self._dimensions)
        self._resolver = StatisticTypeResolver(self._include_metrics)
        self._display_names: DisplayNameDict = {
            d.name: d.display_name for d in self._dimensions
        }
        self._transformer = MetricStatsTransformer(self._display_names, metric_prefix)
        self._lock = RLock()

        logger.info(
            f"Initialized processor for namespace {namespace} with "
            f"{len(self._include_metrics)} include metrics and "
            f"{len(self._dimensions)} dimensions"
        )
        logger.debug(f"Include metrics: {[m.name for m in self._include_metrics]}")
        logger.debug(
            f"Dimensions: {[f'{d.name} ({d.display_name})' for d in self._dimensions]}"
        )

    @classmethod
    def from_config(cls, config: NamespaceConfig) -> "NamespaceMetricsProcessor":
        return cls(
            include_metrics=config.include_metrics,
            dimensions=config.dimensions,
            namespace=config.namespace,
            metric_prefix=config.metric_prefix,
        )

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def display_names(self) -> DisplayNameDict:
        return dict(self._display_names)

    def collect_candidates(
        self,
        client: MetricsListerProtocol,
        account_name: str,
        request_counter: RequestCounterProtocol,
    ) -> List[MatchedMetric]:
        """
        List, filter and classify the namespace's metric series.

        Args:
            client: Metrics API
            account_name: Account label, used for logging only
            request_counter: Incremented once per listing request

        Returns:
            Series passing the dimension predicate that have a
            configured statistic, in listing order

        Raises:
            Whatever the client raises; no partial result is returned
        """
        with self._lock:
            logger.info(
                f"Starting metric collection for account {account_name} "
                f"in namespace {self._namespace}"
            )
            logger.debug(
                f"Dimension filters: {[f.name for f in self._dimension_filters]}"
            )

            raw_metrics = self._list_all(client, request_counter)

            matched: List[MatchedMetric] = []
            for raw_metric in raw_metrics:
                candidate = self._match(raw_metric)
                if candidate is not None:
                    matched.append(candidate)

            logger.info(
                f"Collected {len(matched)} of {len(raw_metrics)} listed metrics "
                f"for account {account_name} in namespace {self._namespace}"
            )
            for metric in matched:
                logger.debug(f"Collected metric: {metric}")
            return matched

    def classify(self, metric: MatchedMetric) -> StatisticType:
        """
        Statistic type configured for an already collected metric.

        Raises:
            UnconfiguredMetricError: If the metric name is not configured
        """
        with self._lock:
            return self._resolver.resolve(metric.name)

    def create_metrics_for_upload(
        self,
        statistics: NamespaceMetricStatistics,
    ) -> List[UploadMetric]:
        """Transform one cycle's fetched statistics into upload records."""
        upload_metrics = self._transformer.transform(statistics)
        logger.info(
            f"Created {len(upload_metrics)} upload metrics for namespace "
            f"{statistics.namespace}"
        )
        for metric in upload_metrics:
            logger.debug(
                f"Upload metric: {metric.metric_path} = {metric.value} "
                f"({metric.aggregation_type.value})"
            )
        return upload_metrics

    def _list_all(
        self,
        client: MetricsListerProtocol,
        request_counter: RequestCounterProtocol,
    ) -> List[RawMetric]:
        """Follow next tokens until the listing is exhausted."""
        metrics: List[RawMetric] = []
        next_token: Optional[str] = None
        while True:
            request_counter.increment(1, operation="list_metrics")
            page = client.list_metrics(
                self._namespace, self._dimension_filters, next_token
            )
            metrics.extend(page.metrics)
            next_token = page.next_token
            if not next_token:
                return metrics

    def _match(self, raw_metric: RawMetric) -> Optional[MatchedMetric]:
        passed, reason = self._predicate.check(raw_metric)
        if not passed:
            logger.debug(f"{raw_metric} rejected: {reason}")
            return None

        include_metric = self._resolver.find_include_metric(raw_metric.name)
        if include_metric is None:
            logger.debug(f"{raw_metric} rejected: metric not configured")
            return None

        return MatchedMetric(raw=raw_metric, include_metric=include_metric)
