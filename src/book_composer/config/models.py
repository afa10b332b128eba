"""Data models for configuration management."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.enums import SplitPolicy


DEFAULT_NAMES_CHUNK_SIZE = 6
DEFAULT_HISTORY_LIMIT = 20


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


@dataclass
class EditorConfiguration:
    """
    Editor-wide tunables.

    ``names_chunk_size`` bounds how many names one composite item holds after
    loading. ``split_policy`` selects how a directional transfer partitions a
    field-bearing item. ``default_settings`` is a settings patch applied over
    the built-in defaults before any document is loaded.
    """
    names_chunk_size: int = DEFAULT_NAMES_CHUNK_SIZE
    history_limit: int = DEFAULT_HISTORY_LIMIT
    split_policy: SplitPolicy = SplitPolicy.FIELD
    default_settings: Dict[str, Any] = field(default_factory=dict)
    version: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)
