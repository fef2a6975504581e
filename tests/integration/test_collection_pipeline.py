"""
Integration Tests for MetricsCollectionPipeline.

Tests cover:
    - Full pass: listing, filtering, statistics, upload records
    - Request accounting across listing and statistics calls
    - Multi-account collection from a YAML configuration
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List

import pytest

from namespace_monitor.adapters.memory_client import InMemoryMetricsClient, make_metric
from namespace_monitor.adapters.request_counter import InMemoryRequestCounter
from namespace_monitor.config.loader import load_config
from namespace_monitor.config.models import NamespaceConfig
from namespace_monitor.domain.entities import AggregationType, RawMetric
from namespace_monitor.domain.value_objects import TimeRange
from namespace_monitor.pipeline.collection_pipeline import (
    MetricsCollectionPipeline,
    collect_all_accounts,
)
from namespace_monitor.processors.namespace_processor import NamespaceMetricsProcessor

NOW = datetime(2024, 12, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def pipeline(
    processor: NamespaceMetricsProcessor,
    memory_client: InMemoryMetricsClient,
    namespace_config: NamespaceConfig,
    request_counter: InMemoryRequestCounter,
) -> MetricsCollectionPipeline:
    """Create a fully wired pipeline for testing."""
    return MetricsCollectionPipeline(
        processor=processor,
        client=memory_client,
        config=namespace_config,
        request_counter=request_counter,
    )


class TestMetricsCollectionPipeline:
    """Integration tests for MetricsCollectionPipeline."""

    def test_happy_path(self, pipeline: MetricsCollectionPipeline) -> None:
        """
        SCENARIO: Listing with two matching series that both have values
        EXPECTED: Two matched metrics, two upload records with display names
        """
        # Act
        result = pipeline.run("test-account", now=NOW)

        # Assert
        assert result.account_name == "test-account"
        assert result.namespace == "AWS/EC2"
        assert len(result.matched_metrics) == 2
        assert result.missing_datapoints == 0
        assert {(m.metric_path, m.value) for m in result.upload_metrics} == {
            ("AWS/EC2|Autoscaling Group Name|asg-1|testMetric", 42.5),
            ("AWS/EC2|Autoscaling Group Name|asg-2|testMetric", 7.0),
        }
        assert all(
            m.aggregation_type == AggregationType.AVERAGE for m in result.upload_metrics
        )

    def test_counts_all_requests(
        self,
        pipeline: MetricsCollectionPipeline,
        memory_client: InMemoryMetricsClient,
        request_counter: InMemoryRequestCounter,
    ) -> None:
        """
        SCENARIO: Complete pass over a two-page listing
        EXPECTED: Counter equals listing pages plus statistics calls
        """
        # Act
        pipeline.run("test-account", now=NOW)

        # Assert
        assert request_counter.by_operation() == {
            "list_metrics": memory_client.list_calls,
            "get_metric_statistics": memory_client.statistics_calls,
        }
        assert request_counter.value == 4

    def test_statistics_window(self, pipeline: MetricsCollectionPipeline) -> None:
        """
        SCENARIO: Default window of five minutes before now
        EXPECTED: Samples stamped at the window end, metadata carries now
        """
        # Act
        result = pipeline.run("test-account", now=NOW)

        # Assert
        assert all(s.timestamp == NOW for s in result.statistics.metric_statistics)
        assert result.metadata["timestamp"] == NOW.isoformat()
        assert "correlation_id" in result.metadata
        assert result.metadata["duration_seconds"] >= 0

    def test_window_passed_to_client(
        self,
        processor: NamespaceMetricsProcessor,
        namespace_config: NamespaceConfig,
        request_counter: InMemoryRequestCounter,
        raw_metrics: List[RawMetric],
    ) -> None:
        """
        SCENARIO: Configured window of 10 to 2 minutes, period 120 seconds
        EXPECTED: Client asked for exactly that window and period
        """
        # Arrange
        config = namespace_config.model_copy(
            update={
                "metrics_config": namespace_config.metrics_config.model_copy(
                    update={
                        "metrics_time_range": TimeRange(
                            start_time_in_mins_before_now=10,
                            end_time_in_mins_before_now=2,
                        ),
                        "period_seconds": 120,
                    }
                )
            }
        )
        calls = []

        class RecordingClient(InMemoryMetricsClient):
            def get_metric_statistics(self, metric, start_time, end_time, period_seconds):
                calls.append((start_time, end_time, period_seconds))
                return super().get_metric_statistics(
                    metric, start_time, end_time, period_seconds
                )

        client = RecordingClient(raw_metrics[:1])
        pipeline = MetricsCollectionPipeline(processor, client, config, request_counter)

        # Act
        pipeline.run("test-account", now=NOW)

        # Assert
        assert calls == [(NOW - timedelta(minutes=10), NOW - timedelta(minutes=2), 120)]

    def test_missing_datapoints_not_uploaded(
        self,
        processor: NamespaceMetricsProcessor,
        namespace_config: NamespaceConfig,
        request_counter: InMemoryRequestCounter,
    ) -> None:
        """
        SCENARIO: One matched series has no datapoints in the window
        EXPECTED: Still matched and fetched, but not uploaded
        """
        # Arrange
        with_value = make_metric("AWS/EC2", "testMetric", AutoScalingGroupName="asg-1")
        without_value = make_metric("AWS/EC2", "testMetric", AutoScalingGroupName="asg-3")
        client = InMemoryMetricsClient(
            [with_value, without_value], values={with_value: 1.0}
        )
        pipeline = MetricsCollectionPipeline(
            processor, client, namespace_config, request_counter
        )

        # Act
        result = pipeline.run("test-account", now=NOW)

        # Assert
        assert len(result.matched_metrics) == 2
        assert result.missing_datapoints == 1
        assert len(result.upload_metrics) == 1

    def test_listing_failure_propagates(
        self,
        processor: NamespaceMetricsProcessor,
        namespace_config: NamespaceConfig,
        request_counter: InMemoryRequestCounter,
    ) -> None:
        """
        SCENARIO: Listing API fails
        EXPECTED: Pass raises, no statistics requested
        """

        class BrokenClient(InMemoryMetricsClient):
            def list_metrics(self, namespace, dimension_filters, next_token=None):
                raise ConnectionError("listing unavailable")

        client = BrokenClient([])
        pipeline = MetricsCollectionPipeline(
            processor, client, namespace_config, request_counter
        )

        with pytest.raises(ConnectionError):
            pipeline.run("test-account", now=NOW)
        assert client.statistics_calls == 0


class TestCollectAllAccounts:
    """Integration tests for multi-account collection from YAML."""

    def test_one_pass_per_account_region(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Sample config with one account in two regions
        EXPECTED: Two results whose paths carry prefix, account and region
        """
        # Arrange
        config = load_config(sample_config_path)

        series = [
            make_metric(
                "AWS/EC2",
                "CPUUtilization",
                AutoScalingGroupName="prod-web",
                InstanceType="m5.large",
            ),
            make_metric(
                "AWS/EC2",
                "NetworkIn",
                AutoScalingGroupName="dev-web",
                InstanceType="m5.large",
            ),
            make_metric("AWS/EC2", "CPUUtilization", AutoScalingGroupName="prod-db"),
        ]
        clients: Dict[str, InMemoryMetricsClient] = {}

        def client_factory(region: str) -> InMemoryMetricsClient:
            clients[region] = InMemoryMetricsClient(series, values={series[0]: 55.0})
            return clients[region]

        counter = InMemoryRequestCounter()

        # Act
        results = collect_all_accounts(config, client_factory, counter, now=NOW)

        # Assert
        assert [r.account_name for r in results] == ["production", "production"]
        paths = [m.metric_path for r in results for m in r.upload_metrics]
        assert paths == [
            "Custom Metrics|AWS|production|us-east-1|AWS/EC2|Autoscaling Group Name"
            "|prod-web|InstanceType|m5.large|CPUUtilization",
            "Custom Metrics|AWS|production|eu-west-1|AWS/EC2|Autoscaling Group Name"
            "|prod-web|InstanceType|m5.large|CPUUtilization",
        ]
        assert set(clients) == {"us-east-1", "eu-west-1"}
        assert counter.value == 4  # one listing + one statistic per region
