"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from namespace_monitor.domain.entities import Dimension, IncludeMetric
from namespace_monitor.domain.value_objects import TimeRange


class MetricsConfig(BaseModel):
    """Which metrics to report and over which window."""

    include_metrics: List[IncludeMetric] = Field(default_factory=list)
    metrics_time_range: TimeRange = Field(default_factory=TimeRange)
    period_seconds: int = Field(default=60, ge=1)


class AccountConfig(BaseModel):
    """An account polled with the same namespace configuration."""

    display_account_name: str = Field(..., min_length=1)
    regions: List[str] = Field(default_factory=lambda: ["us-east-1"])


class NamespaceConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    namespace: str = Field(..., min_length=1)
    metric_prefix: Optional[str] = None
    dimensions: List[Dimension] = Field(default_factory=list)
    metrics_config: MetricsConfig = Field(default_factory=MetricsConfig)
    accounts: List[AccountConfig] = Field(default_factory=list)

    @property
    def include_metrics(self) -> List[IncludeMetric]:
        return self.metrics_config.include_metrics

    def display_names(self) -> Dict[str, str]:
        """Dimension name -> display name."""
        return {d.name: d.display_name for d in self.dimensions}
