# No dependencies
from enum import Enum


class PackedOrder(str, Enum):
    """Channel order inside a packed integer, named from most to least significant."""
    RGBA = "rgba"
    ARGB = "argb"
    ABGR = "abgr"


# Index of (r, g, b, a) for each packed slot, most significant first
packed_order_indices = {
    PackedOrder.RGBA: (0, 1, 2, 3),
    PackedOrder.ARGB: (3, 0, 1, 2),
    PackedOrder.ABGR: (3, 2, 1, 0),
}

# Integer width -> bits per channel
channel_bits = {
    32: 8,
    64: 16,
}

max_channel_value = {
    8: 255,
    16: 65535,
}
