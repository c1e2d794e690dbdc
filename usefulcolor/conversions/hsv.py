import math
from typing import Tuple


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to unit RGB.

    Input:
        h    any real, wraps every 1.0
        s, v usually in [0, 1]

    Output:
        r, g, b  (not clamped)
    """
    if s == 0.0:
        # Achromatic
        return v, v, v

    h = (h * 6.0) % 6.0
    # A NaN or infinite hue has no sector; NaN carries through f
    i = math.floor(h) if math.isfinite(h) else h
    f = h - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    # h may land on 6.0 when a tiny negative hue is wrapped
    sector = int(i) % 6 if math.isfinite(i) else 5
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Output:
        h ∈ [0, 1)   (0 for achromatic colors)
        s ∈ [0, 1]
        v = max(r, g, b)
    """
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    if delta == 0:
        h = 0.0
    else:
        if r == c_max:
            h = (g - b) / delta
        elif g == c_max:
            h = 2 + (b - r) / delta
        else:
            h = 4 + (r - g) / delta
        h /= 6.0
        if h < 0:
            h += 1.0

    s = 0.0 if c_max == 0 else delta / c_max
    return h, s, c_max
