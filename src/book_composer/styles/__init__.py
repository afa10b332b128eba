"""Style resolution for the book composer."""

from .resolver import BUILTIN_STYLE_DEFAULTS, StyleResolver, resolve_style

__all__ = [
    "BUILTIN_STYLE_DEFAULTS",
    "StyleResolver",
    "resolve_style",
]
