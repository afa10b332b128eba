"""Abstract interfaces for the book composer's outer surfaces."""

from .render import IPageRenderer
from .export import IDocumentExporter

__all__ = [
    "IPageRenderer",
    "IDocumentExporter",
]
