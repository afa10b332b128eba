"""Unit tests for the style cascade."""

from book_composer.models import Item, Settings, StyleKey
from book_composer.styles import BUILTIN_STYLE_DEFAULTS, StyleResolver, resolve_style


class TestResolveStyle:
    """Item override, then global style, then built-in default."""

    def test_item_override_wins(self):
        item = Item(id="x", type="dua", styles={"arabicSize": 1.8})
        settings = Settings(global_styles={"arabicSize": 1.2})
        assert resolve_style(item, settings, StyleKey.ARABIC_SIZE) == 1.8

    def test_global_style_when_no_override(self):
        item = Item(id="x", type="dua")
        settings = Settings(global_styles={"arabicSize": 1.2})
        assert resolve_style(item, settings, "arabicSize") == 1.2

    def test_builtin_when_neither_level_sets_key(self):
        item = Item(id="x", type="dua")
        settings = Settings(global_styles={})
        assert resolve_style(item, settings, StyleKey.ARABIC_COLOR) == "#000000"

    def test_none_counts_as_unset(self):
        item = Item(id="x", type="dua", styles={"urduAlign": None})
        settings = Settings(global_styles={"urduAlign": None})
        assert resolve_style(item, settings, "urduAlign") == "right"

    def test_every_vocabulary_key_resolves(self):
        item = Item(id="x", type="text")
        settings = Settings(global_styles={})
        for key in StyleKey:
            assert resolve_style(item, settings, key) is not None
        assert set(BUILTIN_STYLE_DEFAULTS) == set(StyleKey)

    def test_unknown_key_without_levels_is_none(self):
        item = Item(id="x", type="text")
        assert resolve_style(item, Settings(), "shadowBlur") is None

    def test_unknown_key_uses_levels(self):
        item = Item(id="x", type="text", styles={"shadowBlur": 4})
        assert resolve_style(item, Settings(), "shadowBlur") == 4


class TestStyleResolver:
    """Tests for the settings-bound resolver handed to renderers."""

    def test_resolve_all_covers_vocabulary(self):
        resolver = StyleResolver(Settings())
        values = resolver.resolve_all(Item(id="x", type="text", styles={"headingSize": 2.0}))
        assert len(values) == len(StyleKey)
        assert values["headingSize"] == 2.0
        assert values["urduFont"] == "Noto Nastaliq Urdu"

    def test_callable(self):
        resolver = StyleResolver(Settings())
        assert resolver(Item(id="x", type="text"), "englishAlign") == "left"
