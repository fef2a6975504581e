"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the collaborators the processor and the
collection pipeline depend on. Following the Hexagonal Architecture
(Ports & Adapters) pattern.

Metrics API clients:
    - CloudWatchMetricsClient: AWS CloudWatch via boto3
    - InMemoryMetricsClient: Fake data for development/testing

Counters:
    - InMemoryRequestCounter: Thread-safe count of remote API calls

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from namespace_monitor.adapters.cloudwatch_client import (
    CloudWatchMetricsClient,
    MetricsClientError,
    create_cloudwatch_client,
)
from namespace_monitor.adapters.memory_client import InMemoryMetricsClient, make_metric
from namespace_monitor.adapters.request_counter import InMemoryRequestCounter

__all__ = [
    "CloudWatchMetricsClient",
    "MetricsClientError",
    "create_cloudwatch_client",
    "InMemoryMetricsClient",
    "make_metric",
    "InMemoryRequestCounter",
]
