"""
usefulcolor Conversions
=======================

Encodings a ``Color`` can be built from and serialized to. Every function
here works on plain floats and ints, never on ``Color`` itself.

Gamma:
    srgb_to_linear(c), linear_to_srgb(c)
        Piecewise sRGB transfer function, one channel at a time

HSV:
    hsv_to_unit_rgb(h, s, v)
        Six-sector HSV to RGB, hue wraps every 1.0
    unit_rgb_to_hsv(r, g, b)
        Hue, saturation and value of an RGB triple

Packed integers:
    pack_channels(channels, order, bits), unpack_channels(value, order, bits)
        RGBA / ARGB / ABGR at 32 bits (8 per channel) or 64 bits (16 per channel)
    decode_rgbe9995(bits), encode_rgbe9995(r, g, b)
        Shared-exponent HDR format

HTML:
    is_valid_html(text), parse_html(text, strict=False), format_html(channels, with_alpha=True)
"""

from .gamma import srgb_to_linear, linear_to_srgb
from .hsv import hsv_to_unit_rgb, unit_rgb_to_hsv
from .packed import pack_channels, unpack_channels, decode_rgbe9995, encode_rgbe9995
from .html import (
    InvalidHTMLColorError,
    hex_digit_value,
    is_valid_html,
    parse_html,
    channel_to_hex,
    format_html,
)
from ..types.format_type import PackedOrder

__all__ = [
    # Gamma
    'srgb_to_linear',
    'linear_to_srgb',
    # HSV
    'hsv_to_unit_rgb',
    'unit_rgb_to_hsv',
    # Packed
    'pack_channels',
    'unpack_channels',
    'decode_rgbe9995',
    'encode_rgbe9995',
    'PackedOrder',
    # HTML
    'InvalidHTMLColorError',
    'hex_digit_value',
    'is_valid_html',
    'parse_html',
    'channel_to_hex',
    'format_html',
]
