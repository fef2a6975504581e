"""
CloudWatch Metrics Client.

boto3-backed implementation of the metrics API used by the processor:
    - list_metrics: one ListMetrics request per call (one page)
    - get_metric_statistics: one GetMetricStatistics request per metric,
      reporting the latest datapoint in the window

Credentials, retries and timeouts are left to boto3/botocore defaults.
API failures are raised as MetricsClientError.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from namespace_monitor.domain.entities import (
    MatchedMetric,
    MetricsPage,
    MetricStatistic,
    RawMetric,
)
from namespace_monitor.domain.value_objects import DimensionFilter, DimensionValue

logger = logging.getLogger(__name__)


class MetricsClientError(Exception):
    """Raised when a call to the remote metrics API fails."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation


def create_cloudwatch_client(region: str, **client_kwargs: Any) -> Any:
    """Build a boto3 CloudWatch client for a region."""
    return boto3.client("cloudwatch", region_name=region, **client_kwargs)


class CloudWatchMetricsClient:
    """Metrics API backed by AWS CloudWatch."""

    def __init__(self, cloudwatch: Any) -> None:
        """
        Initialize with a boto3 CloudWatch client.

        Args:
            cloudwatch: Client from boto3.client("cloudwatch") or
                create_cloudwatch_client()
        """
        self._cloudwatch = cloudwatch

    @classmethod
    def for_region(cls, region: str, **client_kwargs: Any) -> "CloudWatchMetricsClient":
        return cls(create_cloudwatch_client(region, **client_kwargs))

    def list_metrics(
        self,
        namespace: str,
        dimension_filters: Sequence[DimensionFilter],
        next_token: Optional[str] = None,
    ) -> MetricsPage:
        """
        Fetch one page of ListMetrics.

        Raises:
            MetricsClientError: If the request fails
        """
        request: Dict[str, Any] = {"Namespace": namespace}
        if dimension_filters:
            request["Dimensions"] = [f.to_api() for f in dimension_filters]
        if next_token:
            request["NextToken"] = next_token

        try:
            response = self._cloudwatch.list_metrics(**request)
        except (BotoCoreError, ClientError) as e:
            raise MetricsClientError("ListMetrics", str(e)) from e

        metrics = [self._to_raw_metric(item) for item in response.get("Metrics", [])]
        return MetricsPage(metrics=metrics, next_token=response.get("NextToken"))

    def get_metric_statistics(
        self,
        metric: MatchedMetric,
        start_time: datetime,
        end_time: datetime,
        period_seconds: int,
    ) -> MetricStatistic:
        """
        Fetch the configured statistic of one metric over the window.

        Returns:
            MetricStatistic with the latest datapoint, or with value None
            when the window holds no datapoints

        Raises:
            MetricsClientError: If the request fails
        """
        statistic = metric.statistic_type.type_name
        try:
            response = self._cloudwatch.get_metric_statistics(
                Namespace=metric.raw.namespace,
                MetricName=metric.raw.name,
                Dimensions=[
                    {"Name": d.name, "Value": d.value} for d in metric.raw.dimensions
                ],
                StartTime=start_time,
                EndTime=end_time,
                Period=period_seconds,
                Statistics=[statistic],
            )
        except (BotoCoreError, ClientError) as e:
            raise MetricsClientError("GetMetricStatistics", str(e)) from e

        datapoints: List[Dict[str, Any]] = response.get("Datapoints", [])
        if not datapoints:
            logger.debug(f"No datapoints for {metric} between {start_time} and {end_time}")
            return MetricStatistic(metric=metric)

        latest = max(datapoints, key=lambda d: d["Timestamp"])
        return MetricStatistic(
            metric=metric,
            value=latest.get(statistic),
            unit=latest.get("Unit"),
            timestamp=latest["Timestamp"],
        )

    @staticmethod
    def _to_raw_metric(item: Dict[str, Any]) -> RawMetric:
        return RawMetric(
            name=item["MetricName"],
            namespace=item.get("Namespace", ""),
            dimensions=tuple(
                DimensionValue.from_api(d) for d in item.get("Dimensions", [])
            ),
        )
