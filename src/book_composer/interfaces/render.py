"""Page renderer interface for the book composer."""

from abc import ABC, abstractmethod
from typing import Any

from ..models.document import Page
from ..models.settings import Settings
from ..styles.resolver import StyleResolver


class IPageRenderer(ABC):
    """
    Abstract interface for page rendering.

    Implementations draw one page from a detached document snapshot. They
    read style values through the supplied resolver so item overrides,
    global styles and built-in defaults apply in the same order everywhere.
    """

    @abstractmethod
    def render_page(self, page: Page, settings: Settings, resolver: StyleResolver) -> Any:
        """
        Render a single page.

        Args:
            page: The page to draw.
            settings: Session settings (page size, margins, backgrounds).
            resolver: Style lookup bound to ``settings``.

        Returns:
            Implementation-defined rendered output.
        """
        pass
