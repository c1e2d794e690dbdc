"""usefulcolor: an RGBA color value type with engine-compatible conversions."""

from .colors import Color, LUMINANCE_WEIGHTS
from .conversions import (
    InvalidHTMLColorError,
    is_valid_html,
    srgb_to_linear,
    linear_to_srgb,
    hsv_to_unit_rgb,
    unit_rgb_to_hsv,
    pack_channels,
    unpack_channels,
    decode_rgbe9995,
    encode_rgbe9995,
)
from .types.format_type import PackedOrder
from .utils.num_utils import CMP_EPSILON, is_equal_approx

__version__ = "0.1.0"

__all__ = [
    'Color',
    'LUMINANCE_WEIGHTS',
    'InvalidHTMLColorError',
    'PackedOrder',
    'CMP_EPSILON',
    'is_equal_approx',
    'is_valid_html',
    'srgb_to_linear',
    'linear_to_srgb',
    'hsv_to_unit_rgb',
    'unit_rgb_to_hsv',
    'pack_channels',
    'unpack_channels',
    'decode_rgbe9995',
    'encode_rgbe9995',
]
