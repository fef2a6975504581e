"""
Dimension Filter Builder.

Turns configured dimensions into name-only filters for the listing API,
so the API only enumerates series that carry every configured dimension.
"""

from __future__ import annotations

from typing import List, Sequence

from namespace_monitor.domain.entities import Dimension
from namespace_monitor.domain.value_objects import DimensionFilter


def build_dimension_filters(dimensions: Sequence[Dimension]) -> List[DimensionFilter]:
    """
    One name-only filter per configured dimension, in configuration order.

    An empty list means the API enumerates every dimension combination
    of the namespace.
    """
    return [DimensionFilter(name=dimension.name) for dimension in dimensions]
