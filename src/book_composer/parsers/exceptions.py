"""Custom exceptions for document loading."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class DocumentLoadError(Exception):
    """
    Raised when persisted document text cannot be decoded at all.

    Structurally odd but well-formed input never raises; the loader falls
    back to defaults instead. This error only covers text that is not JSON.

    Attributes:
        message: Human-readable error description.
        source: Where the text came from, if known.
        details: Additional error details.
    """
    message: str
    source: Optional[str] = None
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.source:
            parts.append(f"Source: {self.source}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "source": self.source,
            "details": self.details,
        }
