"""Configuration management for the book composer."""

from .config_manager import ConfigurationManager
from .models import (
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_NAMES_CHUNK_SIZE,
    ConfigurationError,
    EditorConfiguration,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "DEFAULT_HISTORY_LIMIT",
    "DEFAULT_NAMES_CHUNK_SIZE",
    "ConfigurationError",
    "EditorConfiguration",
    "ValidationResult",
]
