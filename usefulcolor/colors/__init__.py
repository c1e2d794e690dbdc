"""
usefulcolor Color Class
=======================

``Color`` is an immutable RGBA value with float32 channels.

Features
--------
- Construction from floats, 8-bit channels, packed 32/64-bit integers,
  RGBE9995, HSV and HTML hex strings
- Blending, interpolation, lightening/darkening, inversion, luminance
- sRGB <-> linear conversion
- Componentwise arithmetic with colors and scalars (float32, IEEE semantics)
- Serialization to packed integers and HTML hex strings

Usage
-----
>>> from usefulcolor.colors import Color
>>>
>>> red = Color.from_html("#f00")
>>> half = red.lerp(Color(0, 0, 1), 0.5)
>>> half.to_html(with_alpha=False)
'7f007f'
>>> (red * 0.5).a
0.5
"""

from .color import Color, LUMINANCE_WEIGHTS
from . import arithmetic
from .arithmetic import add, sub, mul, div, neg, addf, subf, mulf, divf

__all__ = [
    'Color',
    'LUMINANCE_WEIGHTS',
    'arithmetic',
    'add', 'sub', 'mul', 'div', 'neg',
    'addf', 'subf', 'mulf', 'divf',
]
