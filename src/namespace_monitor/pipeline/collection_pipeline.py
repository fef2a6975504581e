"""
Collection Pipeline - One Complete Poll Pass.

The MetricsCollectionPipeline runs a single pass for one account:
collect candidates, fetch their statistics, build upload records.
Scheduling passes is left to the host.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from namespace_monitor.config.models import NamespaceConfig
from namespace_monitor.domain.entities import (
    CollectionResult,
    MatchedMetric,
    MetricsPage,
    MetricStatistic,
    NamespaceMetricStatistics,
)
from namespace_monitor.domain.value_objects import DimensionFilter
from namespace_monitor.processors.metric_transformer import PATH_DELIMITER
from namespace_monitor.processors.namespace_processor import (
    NamespaceMetricsProcessor,
    RequestCounterProtocol,
)

logger = logging.getLogger(__name__)


class MetricsClientProtocol(Protocol):
    """Protocol for metrics API clients."""

    def list_metrics(
        self,
        namespace: str,
        dimension_filters: Sequence[DimensionFilter],
        next_token: Optional[str] = None,
    ) -> MetricsPage:
        ...

    def get_metric_statistics(
        self,
        metric: MatchedMetric,
        start_time: datetime,
        end_time: datetime,
        period_seconds: int,
    ) -> MetricStatistic:
        ...


class MetricsCollectionPipeline:
    """Runs collection passes for one namespace processor."""

    def __init__(
        self,
        processor: NamespaceMetricsProcessor,
        client: MetricsClientProtocol,
        config: NamespaceConfig,
        request_counter: RequestCounterProtocol,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            processor: Processor for the configured namespace
            client: Metrics API
            config: Configuration (statistics window and period)
            request_counter: Shared API request counter
        """
        self.processor = processor
        self.client = client
        self.config = config
        self.request_counter = request_counter

    def run(
        self,
        account_name: str,
        now: Optional[datetime] = None,
    ) -> CollectionResult:
        """
        Execute one collection pass.

        Args:
            account_name: Account label for logs and the result
            now: Reference time for the statistics window (default: UTC now)

        Returns:
            CollectionResult with matched metrics, statistics and upload records

        Raises:
            Whatever the client raises; a failed pass returns nothing
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        now = now or datetime.now(timezone.utc)
        logger.info(
            f"[{correlation_id[:8]}] Collection pass for {account_name} "
            f"in {self.processor.namespace}"
        )

        # 1. Select series
        matched = self.processor.collect_candidates(
            self.client, account_name, self.request_counter
        )

        # 2. Fetch statistics
        statistics = self._fetch_statistics(matched, now)

        # 3. Build upload records
        upload_metrics = self.processor.create_metrics_for_upload(statistics)

        total_duration = time.perf_counter() - start_time
        logger.info(
            f"[{correlation_id[:8]}] Pass finished: {len(matched)} matched, "
            f"{len(upload_metrics)} upload metrics ({total_duration:.3f}s)"
        )

        return CollectionResult(
            account_name=account_name,
            namespace=self.processor.namespace,
            matched_metrics=matched,
            statistics=statistics,
            upload_metrics=upload_metrics,
            metadata=self._build_metadata(correlation_id, total_duration, now),
        )

    def _fetch_statistics(
        self,
        matched: List[MatchedMetric],
        now: datetime,
    ) -> NamespaceMetricStatistics:
        """Fetch the configured statistic of every matched metric."""
        metrics_config = self.config.metrics_config
        time_range = metrics_config.metrics_time_range
        start = now - timedelta(minutes=time_range.start_time_in_mins_before_now)
        end = now - timedelta(minutes=time_range.end_time_in_mins_before_now)

        metric_statistics: List[MetricStatistic] = []
        for metric in matched:
            self.request_counter.increment(1, operation="get_metric_statistics")
            statistic = self.client.get_metric_statistics(
                metric, start, end, metrics_config.period_seconds
            )
            metric_statistics.append(statistic)

        return NamespaceMetricStatistics(
            namespace=self.processor.namespace,
            metric_statistics=metric_statistics,
        )

    def _build_metadata(
        self,
        correlation_id: str,
        duration: float,
        now: datetime,
    ) -> Dict[str, Any]:
        """Build result metadata."""
        return {
            "correlation_id": correlation_id,
            "timestamp": now.isoformat(),
            "duration_seconds": duration,
        }


def collect_all_accounts(
    config: NamespaceConfig,
    client_factory: Callable[[str], MetricsClientProtocol],
    request_counter: RequestCounterProtocol,
    now: Optional[datetime] = None,
) -> List[CollectionResult]:
    """
    Run one pass per configured (account, region).

    Each pair gets its own processor whose upload paths start with
    ``[metric_prefix|]account|region`` so series of different accounts
    never share a path.

    Args:
        config: Loaded configuration
        client_factory: Builds a metrics client for a region
        request_counter: Shared by every pass
        now: Reference time for all statistics windows
    """
    results: List[CollectionResult] = []
    for account in config.accounts:
        for region in account.regions:
            prefix = PATH_DELIMITER.join(
                p for p in (config.metric_prefix, account.display_account_name, region) if p
            )
            processor = NamespaceMetricsProcessor(
                include_metrics=config.include_metrics,
                dimensions=config.dimensions,
                namespace=config.namespace,
                metric_prefix=prefix,
            )
            pipeline = MetricsCollectionPipeline(
                processor, client_factory(region), config, request_counter
            )
            results.append(pipeline.run(account.display_account_name, now))
    return results
