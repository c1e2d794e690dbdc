from __future__ import annotations
from typing import ClassVar, Iterator, Optional, Tuple, Union

import numpy as np

from ..conversions import (
    decode_rgbe9995,
    encode_rgbe9995,
    format_html,
    hsv_to_unit_rgb,
    is_valid_html,
    linear_to_srgb,
    pack_channels,
    parse_html,
    srgb_to_linear,
    unit_rgb_to_hsv,
    unpack_channels,
)
from ..types.color_types import ChannelNames, ChannelTuple, Scalar, R, G, B, A
from ..types.format_type import PackedOrder
from ..utils.num_utils import is_equal_approx, lerpf, to_float32

# ITU-R BT.709 relative luminance weights
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


class Color:
    """
    RGBA color with float32 channels.

    Channels are usually in [0, 1] but are never clamped on construction, so
    values above 1.0 (overbright / HDR) and below 0.0 are kept as given.
    Instances are immutable; every operation returns a new Color.

    >>> Color(0.2, 1.0, 0.7, 0.8)
    Color(r=0.2, g=1.0, b=0.7, a=0.8)
    """
    __slots__ = ('_value', '_is_frozen')

    num_channels: ClassVar[int] = 4

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Scalar = 1.0) -> None:
        self._value: ChannelTuple = (to_float32(r), to_float32(g), to_float32(b), to_float32(a))
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """
        Build a color from 8-bit channels, each divided by 255.

        Out-of-range integers are not rejected: ``from_rgba8(306, 255, 0, 102)``
        is ``Color(1.2, 1, 0, 0.4)``.
        """
        return cls(r / 255, g / 255, b / 255, a / 255)

    @classmethod
    def from_rgbe9995(cls, rgbe: int) -> Color:
        """Decode a RGBE9995 integer (9-bit mantissas, shared 5-bit exponent). Alpha is 1."""
        return cls(*decode_rgbe9995(rgbe), 1.0)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        """Build a color from hue, saturation and value, usually in [0, 1]. Hue wraps."""
        return cls(*hsv_to_unit_rgb(h, s, v), a)

    @classmethod
    def from_packed(cls, value: int, order: Union[PackedOrder, str] = PackedOrder.RGBA, bits: int = 32) -> Color:
        return cls(*unpack_channels(value, order, bits))

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """
        Decode a 32-bit ``0xRRGGBBAA`` integer.

        >>> Color.from_hex(0xff0000ff)
        Color(r=1.0, g=0.0, b=0.0, a=1.0)
        """
        return cls.from_packed(hex_value, PackedOrder.RGBA, 32)

    @classmethod
    def from_hex64(cls, hex_value: int) -> Color:
        """Decode a (signed) 64-bit ``0xRRRRGGGGBBBBAAAA`` integer."""
        return cls.from_packed(hex_value, PackedOrder.RGBA, 64)

    @classmethod
    def from_html(cls, text: str, strict: bool = False) -> Color:
        """
        Parse an HTML hex color such as ``"#0F0"``, ``"663399cc"`` or ``"#0000ff"``.

        Args:
            text: 3, 4, 6 or 8 hex digits, optionally prefixed by ``#``.
            strict: Raise ``InvalidHTMLColorError`` on invalid input instead of
                returning the empty color ``(0, 0, 0, 0)``.
        """
        channels = parse_html(text, strict=strict)
        if channels is None:
            return cls(0.0, 0.0, 0.0, 0.0)
        return cls(*channels)

    @staticmethod
    def html_is_valid(text: str) -> bool:
        return is_valid_html(text)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTuple:
        return self._value

    @property
    def r(self) -> float:
        return self._value[R]

    @property
    def g(self) -> float:
        return self._value[G]

    @property
    def b(self) -> float:
        return self._value[B]

    @property
    def a(self) -> float:
        return self._value[A]

    @property
    def h(self) -> float:
        """Hue in [0, 1)."""
        return unit_rgb_to_hsv(self.r, self.g, self.b)[0]

    @property
    def s(self) -> float:
        return unit_rgb_to_hsv(self.r, self.g, self.b)[1]

    @property
    def v(self) -> float:
        return unit_rgb_to_hsv(self.r, self.g, self.b)[2]

    def to_hsv(self) -> Tuple[float, float, float]:
        return unit_rgb_to_hsv(self.r, self.g, self.b)

    # ------------------ COLORIMETRY ------------------
    def blend(self, over: Color) -> Color:
        """
        Paint ``over`` on top of this color, alpha included.

        >>> bg = Color(0, 1, 0, 0.5)
        >>> fg = Color(1, 0, 0, 0.5)
        >>> bg.blend(fg).a
        0.75
        """
        sa = 1.0 - over.a
        res_a = self.a * sa + over.a
        if res_a == 0:
            return Color(0.0, 0.0, 0.0, 0.0)
        return Color(
            (self.r * self.a * sa + over.r * over.a) / res_a,
            (self.g * self.a * sa + over.g * over.a) / res_a,
            (self.b * self.a * sa + over.b * over.a) / res_a,
            res_a,
        )

    def clamp(self, minimum: Optional[Color] = None, maximum: Optional[Color] = None) -> Color:
        """Clamp every channel between the matching channels of ``minimum`` and ``maximum``."""
        low = minimum.value if minimum is not None else (0.0, 0.0, 0.0, 0.0)
        high = maximum.value if maximum is not None else (1.0, 1.0, 1.0, 1.0)
        return Color(*(max(lo, min(hi, c)) for c, lo, hi in zip(self._value, low, high)))

    def darkened(self, amount: float) -> Color:
        """Scale r, g, b towards black by ``amount`` (0 to 1). See also ``lightened``."""
        return Color(
            self.r * (1.0 - amount),
            self.g * (1.0 - amount),
            self.b * (1.0 - amount),
            self.a,
        )

    def lightened(self, amount: float) -> Color:
        """Move r, g, b towards white by ``amount`` (0 to 1). See also ``darkened``."""
        return Color(
            self.r + (1.0 - self.r) * amount,
            self.g + (1.0 - self.g) * amount,
            self.b + (1.0 - self.b) * amount,
            self.a,
        )

    def lerp(self, to: Color, weight: float) -> Color:
        """
        Linear interpolation towards ``to``; ``weight`` is not clamped.

        >>> red = Color(1.0, 0.0, 0.0, 1.0)
        >>> aqua = Color(0.0, 1.0, 0.8, 1.0)
        >>> red.lerp(aqua, 0.5)
        Color(r=0.5, g=0.5, b=0.4, a=1.0)
        """
        return Color(*(lerpf(c, t, weight) for c, t in zip(self._value, to.value)))

    def luminance(self) -> float:
        """
        Relative luminance in [0, 1] for colors in [0, 1].

        Assumes linear-space channels; call ``srgb_to_linear`` first on sRGB colors.
        """
        wr, wg, wb = LUMINANCE_WEIGHTS
        return wr * self.r + wg * self.g + wb * self.b

    def inverted(self) -> Color:
        return Color(1.0 - self.r, 1.0 - self.g, 1.0 - self.b, self.a)

    def linear_to_srgb(self) -> Color:
        """Convert from linear to sRGB space. Alpha is unchanged."""
        return Color(linear_to_srgb(self.r), linear_to_srgb(self.g), linear_to_srgb(self.b), self.a)

    def srgb_to_linear(self) -> Color:
        """Convert from sRGB to linear space. Alpha is unchanged."""
        return Color(srgb_to_linear(self.r), srgb_to_linear(self.g), srgb_to_linear(self.b), self.a)

    def is_equal_approx(self, to: Color) -> bool:
        return all(is_equal_approx(c, t) for c, t in zip(self._value, to.value))

    def with_alpha(self, alpha: Scalar) -> Color:
        return Color(self.r, self.g, self.b, alpha)

    # ------------------ SERIALIZATION ------------------
    def to_packed(self, order: Union[PackedOrder, str] = PackedOrder.RGBA, bits: int = 32) -> int:
        return pack_channels(self._value, order, bits)

    def to_rgba32(self) -> int:
        """
        >>> Color(1, 0.5, 0.2, 1).to_rgba32()
        4286526463
        """
        return self.to_packed(PackedOrder.RGBA, 32)

    def to_argb32(self) -> int:
        return self.to_packed(PackedOrder.ARGB, 32)

    def to_abgr32(self) -> int:
        return self.to_packed(PackedOrder.ABGR, 32)

    def to_rgba64(self) -> int:
        return self.to_packed(PackedOrder.RGBA, 64)

    def to_argb64(self) -> int:
        return self.to_packed(PackedOrder.ARGB, 64)

    def to_abgr64(self) -> int:
        return self.to_packed(PackedOrder.ABGR, 64)

    def to_rgbe9995(self) -> int:
        return encode_rgbe9995(self.r, self.g, self.b)

    def to_html(self, with_alpha: bool = True) -> str:
        """
        Lowercase hex string without ``#``.

        >>> Color(1, 1, 1, 0.5).to_html()
        'ffffff7f'
        >>> Color(1, 1, 1, 0.5).to_html(with_alpha=False)
        'ffffff'
        """
        return format_html(self._value, with_alpha)

    # ------------------ TUPLE PROTOCOL ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={np.float32(c)!s}" for name, c in zip(ChannelNames, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __str__(self) -> str:
        return "(" + ", ".join(str(np.float32(c)) for c in self._value) + ")"
