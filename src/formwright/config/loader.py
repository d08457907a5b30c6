"""Config loader for YAML configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from formwright.config.models import FormwrightConfig
from formwright.core.errors import ConfigError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loader for formwright configuration files.

    Supports both single YAML files and directories containing multiple YAML files.
    When loading from a directory, all .yaml/.yml files are merged in alphabetical order.
    """

    @staticmethod
    def load(path: str | Path) -> FormwrightConfig:
        """Load and validate configuration from YAML file or directory.

        Args:
            path: Path to YAML configuration file or directory containing YAML files.

        Returns:
            Validated FormwrightConfig object.

        Raises:
            ConfigError: If file/directory not found or invalid format.
            InvalidPatternSetError: If a template declares no pattern.
            InvalidRangeError: If a numeric range has min greater than max.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            if path.is_dir():
                data = ConfigLoader._load_directory(path)
            else:
                data = ConfigLoader._load_file(path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML: {e}") from e

        try:
            config = FormwrightConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        logger.info(f"Loaded {len(config.forms)} form(s) from {path}")
        return config

    @staticmethod
    def _load_file(path: Path) -> dict[str, Any]:
        """Load a single YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Top level of {path} must be a mapping")
        return data

    @staticmethod
    def _load_directory(directory: Path) -> dict[str, Any]:
        """Load and merge all YAML files from a directory.

        Files are loaded in alphabetical order. Later files override earlier ones
        for top-level keys, but nested dicts (forms, fields, templates) are merged.
        """
        merged: dict[str, Any] = {}
        yaml_files = sorted(directory.glob("*.yaml")) + sorted(directory.glob("*.yml"))

        if not yaml_files:
            raise ConfigError(f"No YAML files found in directory: {directory}")

        for yaml_file in yaml_files:
            file_data = ConfigLoader._load_file(yaml_file)
            merged = ConfigLoader._deep_merge(merged, file_data)

        return merged

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries.

        For dict values, recursively merge. For other types, override replaces base.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
