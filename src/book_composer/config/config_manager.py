"""Configuration Manager implementation for the book composer.

This module loads, validates and persists the editor configuration: the
names chunk size, the history bound, the split policy and default settings.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..models.enums import SplitPolicy
from ..models.settings import Settings, merge_settings
from .models import ConfigurationError, EditorConfiguration, ValidationResult

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "editor.json"


class ConfigurationManager:
    """
    Manager for editor configuration.

    Handles loading, validation and access to the EditorConfiguration.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional directory path for configuration files.
        """
        self._config_dir = Path(config_dir) if config_dir else None
        self._configuration = EditorConfiguration()
        self._is_loaded = False

    @property
    def configuration(self) -> EditorConfiguration:
        """Get the current editor configuration."""
        return self._configuration

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    def load_configuration(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> ValidationResult:
        """
        Load and validate the editor configuration.

        Args:
            source: JSON file path or dictionary. A dictionary may hold the
                settings directly or under an ``"editor"`` key.

        Returns:
            ValidationResult with any warnings.

        Raises:
            ConfigurationError: If validation fails.
        """
        raw_data = self._parse_source(source)
        if isinstance(raw_data, dict) and isinstance(raw_data.get("editor"), dict):
            raw_data = raw_data["editor"]

        result, configuration = self._validate_configuration(raw_data)
        if not result.is_valid:
            raise ConfigurationError(
                "Editor configuration validation failed",
                validation_result=result
            )

        self._configuration = configuration
        self._is_loaded = True
        logger.info(
            f"Loaded editor configuration (chunk size {configuration.names_chunk_size}, "
            f"history limit {configuration.history_limit}, policy {configuration.split_policy.value})"
        )
        return result

    def _validate_configuration(
        self,
        data: Any
    ) -> tuple[ValidationResult, Optional[EditorConfiguration]]:
        """Validate a configuration dictionary."""
        result = ValidationResult(is_valid=True)
        prefix = "Editor configuration"

        if not isinstance(data, dict):
            result.add_error(f"{prefix}: expected a dictionary")
            return result, None

        defaults = EditorConfiguration()

        for int_field in ["names_chunk_size", "history_limit"]:
            if int_field in data:
                value = data[int_field]
                if isinstance(value, bool) or not isinstance(value, int):
                    result.add_error(f"{prefix}: '{int_field}' must be an integer")
                elif value < 1:
                    result.add_error(f"{prefix}: '{int_field}' must be at least 1")

        split_policy = defaults.split_policy
        if "split_policy" in data:
            valid_policies = [p.value for p in SplitPolicy]
            if data["split_policy"] not in valid_policies:
                result.add_error(
                    f"{prefix}: 'split_policy' must be one of {valid_policies}"
                )
            else:
                split_policy = SplitPolicy(data["split_policy"])

        default_settings = data.get("default_settings", {})
        if not isinstance(default_settings, dict):
            result.add_error(f"{prefix}: 'default_settings' must be a dictionary")

        known = {
            "names_chunk_size", "history_limit", "split_policy",
            "default_settings", "version", "metadata",
        }
        unknown = sorted(set(data) - known)
        if unknown:
            result.add_warning(f"{prefix}: ignoring unknown keys {unknown}")

        if not result.is_valid:
            return result, None

        configuration = EditorConfiguration(
            names_chunk_size=data.get("names_chunk_size", defaults.names_chunk_size),
            history_limit=data.get("history_limit", defaults.history_limit),
            split_policy=split_policy,
            default_settings=default_settings,
            version=data.get("version", defaults.version),
            metadata=data.get("metadata", {}),
        )
        return result, configuration

    def build_default_settings(self) -> Settings:
        """Built-in settings with the configured ``default_settings`` merged over them."""
        return merge_settings(Settings(), self._configuration.default_settings)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Any:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                try:
                    return json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigurationError(f"Invalid JSON in {path}: {e}")

        return source

    def load_from_directory(self, config_dir: Union[str, Path]) -> ValidationResult:
        """
        Load ``editor.json`` from a directory if it exists.

        Args:
            config_dir: Directory containing configuration files.

        Returns:
            ValidationResult for the loaded configuration.
        """
        config_dir = Path(config_dir)
        result = ValidationResult(is_valid=True)

        config_file = config_dir / CONFIG_FILENAME
        if config_file.exists():
            try:
                result = result.merge(self.load_configuration(config_file))
            except ConfigurationError as e:
                result.add_error(f"Editor configuration loading failed: {e.message}")
                if e.validation_result:
                    result = result.merge(e.validation_result)

        self._config_dir = config_dir
        return result

    def save_to_directory(
        self,
        config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """
        Save current configuration to a directory.

        Args:
            config_dir: Directory to save to. Uses current config_dir if None.
        """
        config_dir = Path(config_dir) if config_dir else self._config_dir
        if not config_dir:
            raise ConfigurationError("No configuration directory specified")

        config_dir.mkdir(parents=True, exist_ok=True)
        with open(config_dir / CONFIG_FILENAME, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._configuration = EditorConfiguration()
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as a dictionary."""
        return {
            "version": self._configuration.version,
            "names_chunk_size": self._configuration.names_chunk_size,
            "history_limit": self._configuration.history_limit,
            "split_policy": self._configuration.split_policy.value,
            "default_settings": self._configuration.default_settings,
            "metadata": self._configuration.metadata,
        }
