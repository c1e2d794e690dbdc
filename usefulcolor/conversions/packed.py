from __future__ import annotations
import math
from typing import Sequence, Tuple, Union

from ..types.color_types import ChannelTuple
from ..types.format_type import PackedOrder, packed_order_indices, channel_bits, max_channel_value
from ..utils.num_utils import quantize

RGBE_EXPONENT_BIAS = 15
RGBE_MANTISSA_BITS = 9
RGBE_MANTISSA_MASK = 0x1FF
RGBE_MAX_VALUE = 65408.0  # (511 / 512) * 2 ** (31 - 15)


def _channel_layout(order: Union[PackedOrder, str], bits: int) -> Tuple[Tuple[int, ...], int, int]:
    if bits not in channel_bits:
        raise ValueError(f"Unsupported packed width: {bits} (expected one of {sorted(channel_bits)})")
    width = channel_bits[bits]
    return packed_order_indices[PackedOrder(order)], width, max_channel_value[width]


def pack_channels(channels: Sequence[float], order: Union[PackedOrder, str] = PackedOrder.RGBA, bits: int = 32) -> int:
    """
    Pack four unit channels (r, g, b, a) into an integer.

    Args:
        channels: r, g, b, a values, nominally in [0, 1]. Each one is clamped
            before quantization.
        order: Channel order, most significant first.
        bits: 32 (8 bits per channel, unsigned result) or
            64 (16 bits per channel, signed two's complement result).

    Returns:
        The packed integer.
    """
    indices, width, maximum = _channel_layout(order, bits)
    packed = 0
    for index in indices:
        packed = (packed << width) | quantize(channels[index], maximum)
    if bits == 64 and packed >= 1 << 63:
        packed -= 1 << 64
    return packed


def unpack_channels(value: int, order: Union[PackedOrder, str] = PackedOrder.RGBA, bits: int = 32) -> ChannelTuple:
    """
    Inverse of ``pack_channels``. Only the low ``bits`` bits of ``value`` are
    read; negative (signed 64-bit) inputs are masked per channel.
    """
    indices, width, maximum = _channel_layout(order, bits)
    mask = (1 << width) - 1
    channels = [0.0, 0.0, 0.0, 0.0]
    for index in reversed(indices):
        channels[index] = (value & mask) / maximum
        value >>= width
    return channels[0], channels[1], channels[2], channels[3]


def decode_rgbe9995(rgbe: int) -> Tuple[float, float, float]:
    """Decode 9-bit mantissas sharing a 5-bit exponent into r, g, b."""
    r = rgbe & RGBE_MANTISSA_MASK
    g = (rgbe >> 9) & RGBE_MANTISSA_MASK
    b = (rgbe >> 18) & RGBE_MANTISSA_MASK
    e = (rgbe >> 27) & 0x1F
    m = 2.0 ** (e - RGBE_EXPONENT_BIAS - RGBE_MANTISSA_BITS)
    return r * m, g * m, b * m


def encode_rgbe9995(r: float, g: float, b: float) -> int:
    """Encode r, g, b into RGBE9995. Channels are clamped to [0, RGBE_MAX_VALUE]."""
    bias = RGBE_EXPONENT_BIAS
    n = RGBE_MANTISSA_BITS

    c_red = max(0.0, min(RGBE_MAX_VALUE, r))
    c_green = max(0.0, min(RGBE_MAX_VALUE, g))
    c_blue = max(0.0, min(RGBE_MAX_VALUE, b))
    c_max = max(c_red, c_green, c_blue)

    floor_log = math.floor(math.log2(c_max)) if c_max > 0 else -bias - 1
    exp_p = max(-bias - 1, floor_log) + 1 + bias
    s_max = math.floor(c_max / 2.0 ** (exp_p - bias - n) + 0.5)

    exp_s = exp_p if 0 <= s_max < 2 ** n else exp_p + 1
    scale = 2.0 ** (exp_s - bias - n)

    s_red = math.floor(c_red / scale + 0.5)
    s_green = math.floor(c_green / scale + 0.5)
    s_blue = math.floor(c_blue / scale + 0.5)

    return (
        (s_red & RGBE_MANTISSA_MASK)
        | ((s_green & RGBE_MANTISSA_MASK) << 9)
        | ((s_blue & RGBE_MANTISSA_MASK) << 18)
        | ((exp_s & 0x1F) << 27)
    )
