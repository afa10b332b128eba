"""Document exporter interface for the book composer."""

from abc import ABC, abstractmethod
from typing import Any

from ..models.document import Document


class IDocumentExporter(ABC):
    """
    Abstract interface for exporting a finished document.

    Exporters receive a deep-copied snapshot and may keep or mutate it freely.
    """

    @abstractmethod
    def export(self, snapshot: Document) -> Any:
        """
        Export a document snapshot.

        Args:
            snapshot: Detached copy of the document.

        Returns:
            Implementation-defined export artifact (bytes, a path, ...).
        """
        pass
