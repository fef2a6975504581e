"""
Validation Package - Configuration Validation.

    - ConfigValidator: Cross-field checks before a processor is built

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
"""

from namespace_monitor.validation.config_validator import (
    ConfigValidationError,
    ConfigValidator,
)

__all__ = [
    "ConfigValidator",
    "ConfigValidationError",
]
