"""Session-wide settings record: page geometry, margins and global styles."""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


DEFAULT_GLOBAL_STYLES: Dict[str, Any] = {
    "arabicSize": 1.2,
    "urduSize": 1.0,
    "englishSize": 0.9,
    "headingSize": 1.2,
    "arabicAlign": "right",
    "urduAlign": "right",
    "englishAlign": "left",
    "headingAlign": "center",
    "arabicFont": "Scheherazade New",
    "urduFont": "Noto Nastaliq Urdu",
    "englishFont": "Inter",
    "arabicLineHeight": 1.6,
    "urduLineHeight": 1.6,
    "englishLineHeight": 1.4,
    "headingLineHeight": 1.4,
}

# Top-level keys understood by Settings; anything else is carried in ``extra``.
_KNOWN_KEYS = (
    "pageSize",
    "margins",
    "globalStyles",
    "sectionTitleOffset",
    "pageBackgroundImage",
    "headingBackgroundImage",
    "showOutlines",
)


def _number(value: Any, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value


@dataclass
class PageSize:
    """Opaque page geometry in millimetres."""
    width: float = 210
    height: float = 297
    name: str = "A4"

    def to_dict(self) -> Dict[str, Any]:
        return {"width": self.width, "height": self.height, "name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> "PageSize":
        if not isinstance(data, Mapping):
            return cls()
        default = cls()
        return cls(
            width=_number(data.get("width"), default.width),
            height=_number(data.get("height"), default.height),
            name=str(data.get("name", default.name)),
        )


@dataclass
class Margins:
    """Page margins in pixels."""
    top: float = 40
    bottom: float = 60
    left: float = 50
    right: float = 50

    def to_dict(self) -> Dict[str, Any]:
        return {"top": self.top, "bottom": self.bottom, "left": self.left, "right": self.right}

    @classmethod
    def from_dict(cls, data: Any) -> "Margins":
        if not isinstance(data, Mapping):
            return cls()
        default = cls()
        return cls(
            top=_number(data.get("top"), default.top),
            bottom=_number(data.get("bottom"), default.bottom),
            left=_number(data.get("left"), default.left),
            right=_number(data.get("right"), default.right),
        )


@dataclass
class Settings:
    """
    Document settings.

    Created once per loaded document and patched in place afterwards.
    ``global_styles`` is the second level of the style cascade.
    """
    page_size: PageSize = field(default_factory=PageSize)
    margins: Margins = field(default_factory=Margins)
    global_styles: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_GLOBAL_STYLES))
    section_title_offset: float = 0
    page_background_image: str = ""
    heading_background_image: str = ""
    show_outlines: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "pageSize": self.page_size.to_dict(),
            "margins": self.margins.to_dict(),
            "globalStyles": dict(self.global_styles),
            "sectionTitleOffset": self.section_title_offset,
            "pageBackgroundImage": self.page_background_image,
            "headingBackgroundImage": self.heading_background_image,
            "showOutlines": self.show_outlines,
        }
        data.update(copy.deepcopy(self.extra))
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Settings":
        """Build settings from a JSON-like mapping, defaulting anything odd."""
        if not isinstance(data, Mapping):
            return cls()
        default = cls()
        global_styles = data.get("globalStyles")
        return cls(
            page_size=PageSize.from_dict(data.get("pageSize")),
            margins=Margins.from_dict(data.get("margins")),
            global_styles=dict(global_styles) if isinstance(global_styles, Mapping) else default.global_styles,
            section_title_offset=_number(data.get("sectionTitleOffset"), default.section_title_offset),
            page_background_image=data.get("pageBackgroundImage") or "",
            heading_background_image=data.get("headingBackgroundImage") or "",
            show_outlines=bool(data.get("showOutlines", default.show_outlines)),
            extra={k: copy.deepcopy(v) for k, v in data.items() if k not in _KNOWN_KEYS},
        )


def merge_settings(base: Optional[Settings], patch: Any) -> Settings:
    """
    Merge a settings patch over ``base``.

    Top-level keys replace the base value wholesale, except ``globalStyles``
    which is merged key by key. A patch that is not a mapping leaves the base
    unchanged.
    """
    base = base or Settings()
    if not isinstance(patch, Mapping):
        return copy.deepcopy(base)

    merged = base.to_dict()
    for key, value in patch.items():
        if key == "globalStyles":
            if isinstance(value, Mapping):
                merged["globalStyles"] = {**merged["globalStyles"], **value}
        else:
            merged[key] = copy.deepcopy(value)
    return Settings.from_dict(merged)
