from .color_types import ChannelNames, ChannelTuple, Scalar, R, G, B, A
from .format_type import PackedOrder, packed_order_indices, channel_bits, max_channel_value

__all__ = [
    'ChannelNames',
    'ChannelTuple',
    'Scalar',
    'R', 'G', 'B', 'A',
    'PackedOrder',
    'packed_order_indices',
    'channel_bits',
    'max_channel_value',
]
