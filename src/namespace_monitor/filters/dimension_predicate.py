"""
Multi-Dimension Predicate.

Decides whether an enumerated metric's dimension values satisfy the
configured dimension patterns:
    - AND across configured dimensions (every one must be present)
    - OR within a dimension (any one pattern may match)

Pattern semantics:
    - "*" and ".*" match any value
    - Anything else is a regular expression matched against the whole
      value, case-sensitively. A plain literal is an exact match.

Patterns are compiled once when the predicate is built.
"""

from __future__ import annotations

import re
from typing import List, Optional, Pattern, Sequence, Tuple

from namespace_monitor.domain.entities import Dimension, RawMetric

WILDCARD_PATTERNS = frozenset({"*", ".*"})


class DimensionMatcher:
    """Precompiled patterns of one configured dimension."""

    def __init__(self, dimension: Dimension) -> None:
        """
        Compile the dimension's value patterns.

        Raises:
            re.error: If a non-wildcard pattern is not a valid regex
        """
        self.name = dimension.name
        self.matches_any = any(p in WILDCARD_PATTERNS for p in dimension.values)
        # sorted so that compiled order (and logs) do not depend on set order
        self._patterns: List[Pattern[str]] = [
            re.compile(p) for p in sorted(dimension.values) if p not in WILDCARD_PATTERNS
        ]

    def matches(self, value: str) -> bool:
        if self.matches_any:
            return True
        return any(pattern.fullmatch(value) for pattern in self._patterns)


class MultiDimensionPredicate:
    """Predicate over RawMetric built from the configured dimensions."""

    def __init__(self, dimensions: Sequence[Dimension]) -> None:
        self._matchers: Tuple[DimensionMatcher, ...] = tuple(
            DimensionMatcher(d) for d in dimensions
        )

    def __call__(self, metric: RawMetric) -> bool:
        return self.matches(metric)

    def matches(self, metric: RawMetric) -> bool:
        """True if the metric satisfies every configured dimension."""
        passed, _ = self.check(metric)
        return passed

    def rejection_reason(self, metric: RawMetric) -> Optional[str]:
        """Why the metric is rejected, or None if it passes."""
        passed, reason = self.check(metric)
        return None if passed else reason

    def check(self, metric: RawMetric) -> Tuple[bool, str]:
        """Check a metric, returning (passes, rejection_reason)."""
        for matcher in self._matchers:
            value = metric.dimension_value(matcher.name)
            if value is None:
                return False, f"missing dimension {matcher.name}"
            if not matcher.matches(value):
                return False, f"{matcher.name}={value} matches no configured pattern"
        return True, ""
