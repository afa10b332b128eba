"""Style cascade: per-item override, then global default, then built-in."""

import logging
from typing import Any, Dict, Union

from ..models.document import Item
from ..models.enums import Alignment, StyleKey
from ..models.settings import Settings

logger = logging.getLogger(__name__)


BUILTIN_STYLE_DEFAULTS: Dict[StyleKey, Any] = {
    StyleKey.ARABIC_SIZE: 1.0,
    StyleKey.URDU_SIZE: 1.0,
    StyleKey.ENGLISH_SIZE: 1.0,
    StyleKey.HEADING_SIZE: 1.0,
    StyleKey.ARABIC_ALIGN: Alignment.RIGHT.value,
    StyleKey.URDU_ALIGN: Alignment.RIGHT.value,
    StyleKey.ENGLISH_ALIGN: Alignment.LEFT.value,
    StyleKey.HEADING_ALIGN: Alignment.CENTER.value,
    StyleKey.ARABIC_FONT: "Scheherazade New",
    StyleKey.URDU_FONT: "Noto Nastaliq Urdu",
    StyleKey.ENGLISH_FONT: "Inter",
    StyleKey.ARABIC_LINE_HEIGHT: 1.5,
    StyleKey.URDU_LINE_HEIGHT: 1.5,
    StyleKey.ENGLISH_LINE_HEIGHT: 1.5,
    StyleKey.HEADING_LINE_HEIGHT: 1.5,
    StyleKey.ARABIC_COLOR: "#000000",
    StyleKey.URDU_COLOR: "#000000",
    StyleKey.ENGLISH_COLOR: "#000000",
    StyleKey.HEADING_COLOR: "#000000",
    StyleKey.IMAGE_WIDTH: 100,
    StyleKey.HEADING_LEVEL: 1,
    StyleKey.TABLE_BORDER: False,
    StyleKey.TABLE_STRIPED: False,
    StyleKey.BACKGROUND_COLOR: "transparent",
    StyleKey.BORDER_COLOR: "#000000",
    StyleKey.BORDER_WIDTH: 0,
    StyleKey.BORDER_RADIUS: 0,
    StyleKey.PADDING: 0,
}


def resolve_style(item: Item, settings: Settings, key: Union[StyleKey, str]) -> Any:
    """
    Resolve the effective value of a style key for an item.

    The cascade has exactly two lookup levels before the built-in constant:
    ``item.styles`` and ``settings.global_styles``. A None value at either
    level counts as unset.

    Args:
        item: The item being rendered.
        settings: Current document settings.
        key: A StyleKey or its string value.

    Returns:
        The effective value. Always non-None for keys in the StyleKey
        vocabulary; keys outside it return None when neither level sets them.
    """
    name = key.value if isinstance(key, StyleKey) else key

    value = item.styles.get(name)
    if value is not None:
        return value

    value = settings.global_styles.get(name)
    if value is not None:
        return value

    try:
        return BUILTIN_STYLE_DEFAULTS[StyleKey(name)]
    except ValueError:
        logger.debug(f"Unknown style key '{name}' has no built-in default")
        return None


class StyleResolver:
    """Resolver bound to one settings record, handed to renderers."""

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def resolve(self, item: Item, key: Union[StyleKey, str]) -> Any:
        return resolve_style(item, self._settings, key)

    def resolve_all(self, item: Item) -> Dict[str, Any]:
        """Effective value of every vocabulary key for ``item``."""
        return {key.value: resolve_style(item, self._settings, key) for key in StyleKey}

    def __call__(self, item: Item, key: Union[StyleKey, str]) -> Any:
        return self.resolve(item, key)
