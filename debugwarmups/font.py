"""Styled fonts: family, style, size and colour."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from enum import Enum, auto

from .color import Color


class FontFamily(Enum):
    SERIF = auto()
    SANS_SERIF = auto()
    MONOSPACE = auto()
    UNICODE_SERIF = auto()
    UNICODE_SANS_SERIF = auto()
    UNICODE_MONOSPACE = auto()


class FontStyle(Enum):
    NORMAL = auto()
    BOLD = auto()
    ITALIC = auto()
    BOLD_ITALIC = auto()


def _platform_family_names() -> dict[FontFamily, str]:
    if sys.platform == "darwin":
        return {
            FontFamily.SERIF: "Didot",
            FontFamily.SANS_SERIF: "Helvetica",
            FontFamily.MONOSPACE: "Monaco",
            FontFamily.UNICODE_SERIF: "Times",
            FontFamily.UNICODE_SANS_SERIF: "Lucida Grande",
            FontFamily.UNICODE_MONOSPACE: "Lucida Grande",
        }
    windows = sys.platform == "win32"
    return {
        FontFamily.SERIF: "Serif",
        FontFamily.SANS_SERIF: "Sans Serif",
        FontFamily.MONOSPACE: "Monospace",
        FontFamily.UNICODE_SERIF: "Times New Roman" if windows else "Serif",
        FontFamily.UNICODE_SANS_SERIF: "Lucida Sans Unicode" if windows else "Sans Serif",
        FontFamily.UNICODE_MONOSPACE: "Lucida Sans Unicode" if windows else "Monospace",
    }


_FAMILY_NAMES = _platform_family_names()

_STYLE_NAMES = {
    FontStyle.BOLD: "BOLD",
    FontStyle.BOLD_ITALIC: "BOLDITALIC",
    FontStyle.ITALIC: "ITALIC",
    FontStyle.NORMAL: "<normal>",
}


def family_name(family: FontFamily) -> str:
    """The platform font name used for a family."""
    try:
        return _FAMILY_NAMES[family]
    except KeyError:
        raise ValueError("Unknown font family.") from None


def style_name(style: FontStyle) -> str:
    """The library name of a font style."""
    try:
        return _STYLE_NAMES[style]
    except KeyError:
        raise ValueError("Unknown font style.") from None


@dataclass(frozen=True)
class Font:
    """An immutable styled font."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = Color.BLACK

    def with_family(self, family: FontFamily) -> Font:
        return dataclasses.replace(self, family=family)

    def with_style(self, style: FontStyle) -> Font:
        return dataclasses.replace(self, style=style)

    def with_size(self, size: int) -> Font:
        return dataclasses.replace(self, size=size)

    def with_color(self, color: Color) -> Font:
        return dataclasses.replace(self, color=color)

    def library_string(self) -> str:
        """Font description such as 'Serif-BOLD-24'."""
        parts = [family_name(self.family)]
        if self.style is not FontStyle.NORMAL:
            parts.append(style_name(self.style))
        parts.append(str(self.size))
        return "-".join(parts)