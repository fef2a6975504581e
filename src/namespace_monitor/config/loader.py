"""
Configuration Loader - YAML Files to a Validated NamespaceConfig.

Loading happens in three steps:
    1. Read the YAML document (and an optional profile overlay)
    2. Build the pydantic model (field-level validation)
    3. Run the ConfigValidator (cross-field validation)

so a configuration returned from here is safe to build a processor from.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from namespace_monitor.config.models import NamespaceConfig
from namespace_monitor.validation.config_validator import ConfigValidator

logger = logging.getLogger(__name__)

DEFAULT_PROFILES_DIR = Path("config") / "profiles"


def merge_config_dicts(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge a profile overlay into a base configuration.

    Nested mappings merge key by key; any other overlay value, lists
    included, replaces the base value. Neither input is modified.
    """
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_config_dicts(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Reads, merges and validates Namespace Monitor configuration."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        profiles_dir: Union[str, Path] = DEFAULT_PROFILES_DIR,
        validator: Optional[ConfigValidator] = None,
    ) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory relative paths are resolved against
            profiles_dir: Profile directory, relative to base_path
            validator: Cross-field validator (default: ConfigValidator())
        """
        self._base_path = Path(base_path) if base_path else Path(".")
        self._profiles_dir = self._base_path / profiles_dir
        self._validator = validator or ConfigValidator()

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
        validate: bool = True,
    ) -> NamespaceConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: YAML file, absolute or relative to base_path
            profile: Name of a profile in profiles_dir to overlay
            validate: Run cross-field validation

        Raises:
            FileNotFoundError: If the file or the profile does not exist
            ValueError: If a document is not a YAML mapping
            pydantic.ValidationError: If a field is invalid
            ConfigValidationError: If cross-field validation fails
        """
        path = self._resolve(config_path)
        config_dict = self._read_mapping(path)

        if profile:
            profile_path = self._profiles_dir / f"{profile}.yaml"
            if not profile_path.is_file():
                raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
            config_dict = merge_config_dicts(config_dict, self._read_mapping(profile_path))
            logger.debug(f"Applied profile {profile} from {profile_path}")

        config = self._build(config_dict, validate)
        logger.info(
            f"Loaded config from {path}"
            f"{f' (profile {profile})' if profile else ''}: "
            f"namespace={config.namespace}, {len(config.dimensions)} dimensions, "
            f"{len(config.include_metrics)} include metrics, "
            f"{len(config.accounts)} accounts"
        )
        return config

    def load_from_dict(
        self,
        config_dict: Dict[str, Any],
        validate: bool = True,
    ) -> NamespaceConfig:
        """Build configuration from an already parsed mapping."""
        return self._build(config_dict, validate)

    def _build(self, config_dict: Dict[str, Any], validate: bool) -> NamespaceConfig:
        config = NamespaceConfig.model_validate(config_dict)
        if validate:
            self._validator.validate(config)
        return config

    def _resolve(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    @staticmethod
    def _read_mapping(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ValueError(
                f"{path}: expected a YAML mapping, got {type(document).__name__}"
            )
        return document


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
    validate: bool = True,
) -> NamespaceConfig:
    """
    Convenience function to load and validate configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths
        validate: Run cross-field validation
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile, validate)
