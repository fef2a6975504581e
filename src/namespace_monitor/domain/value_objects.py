"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe characteristics of entities
but have no conceptual identity.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Dimension name -> display name used as path segment
DisplayNameDict = Dict[str, str]


class DimensionValue(BaseModel):
    """One (dimension name, dimension value) pair of an enumerated metric."""

    name: str
    value: str

    model_config = {"frozen": True}

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "DimensionValue":
        """Build from a CloudWatch ``{"Name": ..., "Value": ...}`` dict."""
        return cls(name=item["Name"], value=item["Value"])


class DimensionFilter(BaseModel):
    """
    Filter descriptor for the listing API.

    The builder only ever creates name-only filters; ``value`` exists so
    the descriptor can express the full API shape.
    """

    name: str = Field(..., min_length=1)
    value: Optional[str] = None

    model_config = {"frozen": True}

    def to_api(self) -> Dict[str, str]:
        """Convert to the CloudWatch request shape."""
        if self.value is None:
            return {"Name": self.name}
        return {"Name": self.name, "Value": self.value}


class TimeRange(BaseModel):
    """Window, in minutes before now, for which statistics are fetched."""

    start_time_in_mins_before_now: int = Field(default=5, ge=1)
    end_time_in_mins_before_now: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @property
    def is_valid(self) -> bool:
        return self.start_time_in_mins_before_now > self.end_time_in_mins_before_now
