"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Namespace Monitor:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - NamespaceConfig: Root configuration object
    - MetricsConfig: Include metrics, statistics window and period
    - AccountConfig: Accounts and regions polled

Dimensions and include metrics are domain types
(namespace_monitor.domain.entities) validated in place.
"""

from namespace_monitor.config.loader import ConfigLoader, load_config, merge_config_dicts
from namespace_monitor.config.models import (
    AccountConfig,
    MetricsConfig,
    NamespaceConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "merge_config_dicts",
    "AccountConfig",
    "MetricsConfig",
    "NamespaceConfig",
]
