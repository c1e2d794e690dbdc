"""
HTML hexadecimal color strings.

Accepted forms, with an optional leading ``#``:

    RGB        one digit per channel, value / 15
    RGBA       one digit per channel, value / 15
    RRGGBB     two digits per channel, value / 255
    RRGGBBAA   two digits per channel, value / 255

Missing alpha is 1.0.
"""
from __future__ import annotations
import logging
from typing import Optional

from ..types.color_types import ChannelTuple
from ..utils.num_utils import quantize

logger = logging.getLogger(__name__)

HTML_LENGTHS = (3, 4, 6, 8)
_HEX_DIGITS = "0123456789abcdef"


class InvalidHTMLColorError(ValueError):
    """Raised by strict HTML parsing when a string is not a valid hex color."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"Invalid HTML color {text!r}: expected 3, 4, 6 or 8 hex digits, optionally prefixed by '#'"
        )


def hex_digit_value(char: str) -> int:
    """Return the value of a single hex digit (case-insensitive), or -1."""
    if len(char) != 1 or not char.isascii():
        return -1
    return _HEX_DIGITS.find(char.lower())


def _strip_hash(text: str) -> str:
    return text[1:] if text.startswith("#") else text


def is_valid_html(text: str) -> bool:
    """
    Check whether ``text`` is a 3, 4, 6 or 8 digit hex color,
    optionally prefixed by ``#``.

    >>> is_valid_html("#55aaFF")
    True
    >>> is_valid_html("#AABBC")
    False
    """
    digits = _strip_hash(text)
    if len(digits) not in HTML_LENGTHS:
        return False
    return all(hex_digit_value(char) != -1 for char in digits)


def parse_html(text: str, strict: bool = False) -> Optional[ChannelTuple]:
    """
    Parse an HTML hex color into unit (r, g, b, a) channels.

    Args:
        text: Hex color string.
        strict: Raise ``InvalidHTMLColorError`` instead of returning None.

    Returns:
        The channels, or None when ``text`` is invalid and ``strict`` is False.
    """
    if not is_valid_html(text):
        if strict:
            raise InvalidHTMLColorError(text)
        logger.debug("Invalid HTML color %r, falling back to empty color", text)
        return None

    digits = [hex_digit_value(char) for char in _strip_hash(text)]
    if len(digits) < 5:
        channels = [d / 15 for d in digits]
    else:
        channels = [(digits[i] * 16 + digits[i + 1]) / 255 for i in range(0, len(digits), 2)]

    if len(channels) == 3:
        channels.append(1.0)
    return channels[0], channels[1], channels[2], channels[3]


def channel_to_hex(value: float) -> str:
    """Encode a unit channel as two lowercase hex digits, clamped to 00..ff."""
    v = quantize(value, 255)
    digits = []
    for _ in range(2):
        nibble = v & 0xF
        digits.append(_HEX_DIGITS[nibble])
        v >>= 4
    return "".join(reversed(digits))


def format_html(channels: ChannelTuple, with_alpha: bool = True) -> str:
    """Encode (r, g, b, a) as ``rrggbb[aa]`` without a ``#`` prefix."""
    used = channels if with_alpha else channels[:3]
    return "".join(channel_to_hex(c) for c in used)
