"""Basic usefulcolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from usefulcolor import Color, PackedOrder
from usefulcolor.samples import named_color


def demonstrate_construction() -> None:
    # The same red from several encodings.
    print("floats:", Color(1, 0, 0, 1))
    print("bytes:", Color.from_rgba8(255, 0, 0))
    print("hex:", Color.from_hex(0xff0000ff))
    print("html:", Color.from_html("#f00"))
    print("hsv:", Color.from_hsv(0.0, 1.0, 1.0))
    print("palette:", named_color("red"))


def demonstrate_colorimetry() -> None:
    bg = Color(0, 1, 0, 0.5)
    fg = Color(1, 0, 0, 0.5)
    print("blend:", bg.blend(fg))
    print("lerp:", Color(1, 0, 0).lerp(Color(0, 1, 0.8), 0.5))
    print("darkened / lightened:", bg.darkened(0.2), bg.lightened(0.2))
    print("luminance of sRGB gray:", Color(0.5, 0.5, 0.5).srgb_to_linear().luminance())


def demonstrate_serialization() -> None:
    c = Color(1, 0.5, 0.2, 1)
    print("rgba32:", hex(c.to_rgba32()))
    print("argb64:", c.to_packed(PackedOrder.ARGB, 64))
    print("html:", c.to_html(), c.to_html(with_alpha=False))


if __name__ == "__main__":
    demonstrate_construction()
    demonstrate_colorimetry()
    demonstrate_serialization()
