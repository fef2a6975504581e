"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from namespace_monitor.adapters.memory_client import InMemoryMetricsClient, make_metric
from namespace_monitor.adapters.request_counter import InMemoryRequestCounter
from namespace_monitor.config.models import MetricsConfig, NamespaceConfig
from namespace_monitor.domain.entities import (
    Dimension,
    IncludeMetric,
    RawMetric,
    StatisticType,
)
from namespace_monitor.processors.namespace_processor import NamespaceMetricsProcessor

NAMESPACE = "AWS/EC2"


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def asg_dimension() -> Dimension:
    """Autoscaling group dimension accepting any value."""
    return Dimension(
        name="AutoScalingGroupName",
        display_name="Autoscaling Group Name",
        values={".*"},
    )


@pytest.fixture
def include_metric() -> IncludeMetric:
    """Include metric reported as average."""
    return IncludeMetric(name="testMetric", stat_type="ave")


@pytest.fixture
def processor(
    asg_dimension: Dimension,
    include_metric: IncludeMetric,
) -> NamespaceMetricsProcessor:
    """Processor for AWS/EC2 with one dimension and one include metric."""
    return NamespaceMetricsProcessor([include_metric], [asg_dimension], NAMESPACE)


@pytest.fixture
def request_counter() -> InMemoryRequestCounter:
    """Fresh request counter."""
    return InMemoryRequestCounter()


@pytest.fixture
def raw_metrics() -> List[RawMetric]:
    """Listing as the API would return it for AWS/EC2."""
    return [
        make_metric(NAMESPACE, "testMetric", AutoScalingGroupName="asg-1"),
        make_metric(NAMESPACE, "testMetric", AutoScalingGroupName="asg-2"),
        make_metric(NAMESPACE, "testMetric", InstanceId="i-0abc"),
        make_metric(NAMESPACE, "unknownMetric", AutoScalingGroupName="asg-1"),
        make_metric("AWS/ELB", "testMetric", AutoScalingGroupName="asg-9"),
    ]


@pytest.fixture
def memory_client(raw_metrics: List[RawMetric]) -> InMemoryMetricsClient:
    """Fake API serving raw_metrics with values for the asg-1/asg-2 series."""
    return InMemoryMetricsClient(
        raw_metrics,
        values={raw_metrics[0]: 42.5, raw_metrics[1]: 7.0},
        page_size=2,
        unit="Percent",
    )


@pytest.fixture
def namespace_config(
    asg_dimension: Dimension,
    include_metric: IncludeMetric,
) -> NamespaceConfig:
    """Configuration equivalent to the processor fixture."""
    return NamespaceConfig(
        namespace=NAMESPACE,
        dimensions=[asg_dimension],
        metrics_config=MetricsConfig(include_metrics=[include_metric]),
    )


@pytest.fixture
def stat_types() -> List[StatisticType]:
    """All statistic types."""
    return list(StatisticType)
