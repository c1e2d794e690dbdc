from __future__ import annotations
from typing import Tuple, Union

Scalar = Union[int, float]
ChannelTuple = Tuple[float, float, float, float]
ChannelNames = ("r", "g", "b", "a")

# Channel indices
R, G, B, A = range(4)
