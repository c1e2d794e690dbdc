"""
Named color palette (X11 / CSS names).

This table is plain data layered on top of ``Color``; nothing in the core
package depends on it.
"""
from typing import Dict, Optional

from ..colors.color import Color

# RGBA hex values, 0xRRGGBBAA
_PALETTE_HEX: Dict[str, int] = {
    "ALICE_BLUE": 0xf0f8ffff,
    "ANTIQUE_WHITE": 0xfaebd7ff,
    "AQUA": 0x00ffffff,
    "AQUAMARINE": 0x7fffd4ff,
    "AZURE": 0xf0ffffff,
    "BEIGE": 0xf5f5dcff,
    "BLACK": 0x000000ff,
    "BLUE": 0x0000ffff,
    "BLUE_VIOLET": 0x8a2be2ff,
    "BROWN": 0xa52a2aff,
    "CORAL": 0xff7f50ff,
    "CORNFLOWER_BLUE": 0x6495edff,
    "CRIMSON": 0xdc143cff,
    "CYAN": 0x00ffffff,
    "DARK_BLUE": 0x00008bff,
    "DARK_CYAN": 0x008b8bff,
    "DARK_GREEN": 0x006400ff,
    "DARK_ORANGE": 0xff8c00ff,
    "DARK_RED": 0x8b0000ff,
    "GOLD": 0xffd700ff,
    "GRAY": 0xbebebeff,
    "GREEN": 0x00ff00ff,
    "HOT_PINK": 0xff69b4ff,
    "INDIGO": 0x4b0082ff,
    "IVORY": 0xfffff0ff,
    "LAVENDER": 0xe6e6faff,
    "LIME_GREEN": 0x32cd32ff,
    "MAGENTA": 0xff00ffff,
    "MAROON": 0xb03060ff,
    "NAVY_BLUE": 0x000080ff,
    "OLIVE": 0x808000ff,
    "ORANGE": 0xffa500ff,
    "ORCHID": 0xda70d6ff,
    "PINK": 0xffc0cbff,
    "PURPLE": 0xa020f0ff,
    "REBECCA_PURPLE": 0x663399ff,
    "RED": 0xff0000ff,
    "SALMON": 0xfa8072ff,
    "SILVER": 0xc0c0c0ff,
    "SKY_BLUE": 0x87ceebff,
    "TEAL": 0x008080ff,
    "TOMATO": 0xff6347ff,
    "TRANSPARENT": 0xffffff00,
    "TURQUOISE": 0x40e0d0ff,
    "VIOLET": 0xee82eeff,
    "WEB_GRAY": 0x808080ff,
    "WEB_GREEN": 0x008000ff,
    "WEB_MAROON": 0x800000ff,
    "WEB_PURPLE": 0x800080ff,
    "WHITE": 0xffffffff,
    "YELLOW": 0xffff00ff,
}

NAMED_COLORS: Dict[str, Color] = {name: Color.from_hex(value) for name, value in _PALETTE_HEX.items()}


def _normalize_name(name: str) -> str:
    return name.strip().upper().replace(" ", "_").replace("-", "_")


def named_color(name: str, default: Optional[Color] = None) -> Optional[Color]:
    """
    Look up a palette color by name.

    Matching ignores case and treats spaces, dashes and underscores alike,
    so ``"dark cyan"``, ``"Dark-Cyan"`` and ``"DARK_CYAN"`` are the same entry.
    Unknown names return ``default``.
    """
    key = _normalize_name(name)
    if key in NAMED_COLORS:
        return NAMED_COLORS[key]
    # Accept names written without separators, e.g. "darkcyan"
    for candidate, color in NAMED_COLORS.items():
        if candidate.replace("_", "") == key.replace("_", ""):
            return color
    return default


__all__ = ["NAMED_COLORS", "named_color"]
