"""
Core Domain Entities.

This module defines the fundamental entities of the Namespace Monitor domain.
These entities represent the core concepts that the business logic operates on.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from namespace_monitor.domain.value_objects import DimensionValue


class StatisticType(str, Enum):
    """Aggregation kind applied to raw samples by the metrics API."""

    AVE = "ave"
    MAX = "max"
    MIN = "min"
    SUM = "sum"
    SAMPLE_COUNT = "samplecount"

    @property
    def type_name(self) -> str:
        """Statistic name as the metrics API spells it."""
        return _TYPE_NAMES[self]

    @property
    def aggregation_type(self) -> "AggregationType":
        """Aggregation kind reported to the monitoring backend."""
        return _AGGREGATION_TYPES[self]

    @classmethod
    def parse(cls, raw: Any) -> "StatisticType":
        """
        Parse a configured statistic.

        Accepts the short code (``ave``) or the API type name
        (``Average``), case-insensitively.

        Raises:
            ValueError: If the value names no known statistic
        """
        if isinstance(raw, cls):
            return raw
        text = str(raw).strip().lower()
        for stat_type in cls:
            if text in (stat_type.value, stat_type.type_name.lower()):
                return stat_type
        allowed = ", ".join(s.value for s in cls)
        raise ValueError(f"unknown statistic type {raw!r}, expected one of: {allowed}")


class AggregationType(str, Enum):
    """How the monitoring backend aggregates uploaded values."""

    AVERAGE = "AVERAGE"
    SUM = "SUM"
    OBSERVATION = "OBSERVATION"


_TYPE_NAMES = {
    StatisticType.AVE: "Average",
    StatisticType.MAX: "Maximum",
    StatisticType.MIN: "Minimum",
    StatisticType.SUM: "Sum",
    StatisticType.SAMPLE_COUNT: "SampleCount",
}

_AGGREGATION_TYPES = {
    StatisticType.AVE: AggregationType.AVERAGE,
    StatisticType.SUM: AggregationType.SUM,
    StatisticType.SAMPLE_COUNT: AggregationType.SUM,
    StatisticType.MIN: AggregationType.OBSERVATION,
    StatisticType.MAX: AggregationType.OBSERVATION,
}


class Dimension(BaseModel):
    """Configured selection criterion on one dimension."""

    name: str = Field(..., min_length=1, description="API dimension key")
    display_name: str = Field(..., min_length=1, description="Path segment on upload")
    values: FrozenSet[str] = Field(
        ..., min_length=1, description="Literal or regex value patterns"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _default_display_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("display_name"):
            data = dict(data)
            data["display_name"] = data.get("name")
        return data


class IncludeMetric(BaseModel):
    """Configured metric name and the statistic reported for it."""

    name: str = Field(..., min_length=1)
    stat_type: StatisticType = Field(default=StatisticType.AVE)

    model_config = {"frozen": True}

    @field_validator("stat_type", mode="before")
    @classmethod
    def _parse_stat_type(cls, value: Any) -> StatisticType:
        return StatisticType.parse(value)


class RawMetric(BaseModel):
    """Metric series descriptor as enumerated by the listing API."""

    name: str
    namespace: str = ""
    dimensions: Tuple[DimensionValue, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    def dimension_value(self, name: str) -> Optional[str]:
        """Value of the named dimension, or None if the metric lacks it."""
        for dimension in self.dimensions:
            if dimension.name == name:
                return dimension.value
        return None

    def __str__(self) -> str:
        pairs = ", ".join(f"{d.name}={d.value}" for d in self.dimensions)
        return f"{self.name}[{pairs}]"


class MatchedMetric(BaseModel):
    """A RawMetric that passed dimension filtering and has a statistic."""

    raw: RawMetric
    include_metric: IncludeMetric

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return self.raw.name

    @property
    def statistic_type(self) -> StatisticType:
        return self.include_metric.stat_type

    def __str__(self) -> str:
        return f"{self.raw} ({self.statistic_type.type_name})"


class MetricsPage(BaseModel):
    """One page of a listing call."""

    metrics: List[RawMetric] = Field(default_factory=list)
    next_token: Optional[str] = None

    model_config = {"frozen": True}


class MetricStatistic(BaseModel):
    """Latest fetched sample for one matched metric."""

    metric: MatchedMetric
    value: Optional[float] = Field(
        default=None, description="None when the window had no datapoints"
    )
    unit: Optional[str] = None
    timestamp: Optional[datetime] = None

    model_config = {"frozen": True}


class NamespaceMetricStatistics(BaseModel):
    """All samples fetched for one namespace in one poll cycle."""

    namespace: str
    metric_statistics: List[MetricStatistic] = Field(default_factory=list)

    model_config = {"frozen": True}


class UploadMetric(BaseModel):
    """Path-named record handed to the uploader."""

    metric_path: str
    value: float
    aggregation_type: AggregationType

    model_config = {"frozen": True}


class CollectionResult(BaseModel):
    """Complete result of one collection pass."""

    account_name: str
    namespace: str
    matched_metrics: List[MatchedMetric] = Field(default_factory=list)
    statistics: NamespaceMetricStatistics
    upload_metrics: List[UploadMetric] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def missing_datapoints(self) -> int:
        """Matched metrics whose window held no datapoints."""
        return sum(1 for s in self.statistics.metric_statistics if s.value is None)
