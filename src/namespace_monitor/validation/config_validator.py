"""
Config Validator - Cross-Field Checks on a Loaded Configuration.

Pydantic validates each field on load; this validator catches problems
that span fields before any API call is made:
    - Duplicate include metric names
    - Duplicate dimension names or display names
    - Dimension value patterns that are not valid regular expressions
    - Statistics window that ends before it starts

Design Notes:
    - Fail-fast principle
    - All problems reported at once
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import TYPE_CHECKING, Dict, List, Optional

from namespace_monitor.filters.dimension_predicate import WILDCARD_PATTERNS

if TYPE_CHECKING:
    from namespace_monitor.config.models import NamespaceConfig

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or [message]


class ConfigValidator:
    """Validates a NamespaceConfig before a processor is built from it."""

    def validate(self, config: NamespaceConfig) -> None:
        """
        Validate a configuration.

        Args:
            config: The loaded configuration

        Raises:
            ConfigValidationError: If validation fails
        """
        errors: List[str] = []
        errors.extend(self._validate_include_metrics(config))
        errors.extend(self._validate_dimensions(config))
        errors.extend(self._validate_time_range(config))

        if errors:
            error_message = "; ".join(errors)
            logger.error(f"Config validation failed: {error_message}")
            raise ConfigValidationError(error_message, errors)

        logger.debug(f"Config validated: namespace={config.namespace}")

    def _validate_include_metrics(self, config: NamespaceConfig) -> List[str]:
        counts = Counter(m.name for m in config.include_metrics)
        return [
            f"metrics_config.include_metrics: '{name}' configured {count} times"
            for name, count in counts.items()
            if count > 1
        ]

    def _validate_dimensions(self, config: NamespaceConfig) -> List[str]:
        errors: List[str] = []

        counts = Counter(d.name for d in config.dimensions)
        for name, count in counts.items():
            if count > 1:
                errors.append(f"dimensions: '{name}' configured {count} times")

        errors.extend(self._validate_display_names(config))

        for dimension in config.dimensions:
            for pattern in sorted(dimension.values):
                if pattern in WILDCARD_PATTERNS:
                    continue
                try:
                    re.compile(pattern)
                except re.error as e:
                    errors.append(
                        f"dimensions.{dimension.name}: invalid pattern {pattern!r} ({e})"
                    )

        return errors

    def _validate_display_names(self, config: NamespaceConfig) -> List[str]:
        """Each display name must identify exactly one dimension."""
        errors: List[str] = []
        owners: Dict[str, str] = {}
        for dimension in config.dimensions:
            owner = owners.setdefault(dimension.display_name, dimension.name)
            if owner != dimension.name:
                errors.append(
                    f"dimensions.{dimension.name}: display_name '{dimension.display_name}' "
                    f"already used by '{owner}'"
                )

        names = {d.name for d in config.dimensions}
        for dimension in config.dimensions:
            if dimension.display_name != dimension.name and dimension.display_name in names:
                errors.append(
                    f"dimensions.{dimension.name}: display_name '{dimension.display_name}' "
                    "is the key of another dimension"
                )
        return errors

    def _validate_time_range(self, config: NamespaceConfig) -> List[str]:
        time_range = config.metrics_config.metrics_time_range
        if not time_range.is_valid:
            return [
                "metrics_config.metrics_time_range: start_time_in_mins_before_now "
                f"({time_range.start_time_in_mins_before_now}) must be greater than "
                f"end_time_in_mins_before_now ({time_range.end_time_in_mins_before_now})"
            ]
        return []
