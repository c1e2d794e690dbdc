import math
from numbers import Real

import numpy as np

CMP_EPSILON = 0.00001


def to_float32(value: Real) -> float:
    """Round a real number to float32 precision, returned as a Python float."""
    if not isinstance(value, Real):
        raise TypeError(f"Color channels must be real numbers, got {type(value).__name__}")
    # Overflow to inf and nan are valid channel values
    with np.errstate(over='ignore', invalid='ignore'):
        return float(np.float32(value))


def lerpf(start: float, stop: float, weight: float) -> float:
    return start + (stop - start) * weight


def is_equal_approx(a: float, b: float) -> bool:
    """
    Compare two floats with a tolerance relative to ``a``.

    Both the tolerance and the difference are computed in float32.
    Exact equality short-circuits first so that infinities compare equal.
    The tolerance never drops below ``CMP_EPSILON``.
    """
    a32, b32 = np.float32(a), np.float32(b)
    if a32 == b32:
        return True
    epsilon = np.float32(CMP_EPSILON)
    with np.errstate(over='ignore', invalid='ignore'):
        tolerance = max(epsilon, epsilon * abs(a32))
        return bool(abs(a32 - b32) < tolerance)


def quantize(value: float, maximum: int) -> int:
    """
    Scale a unit channel to an integer in ``[0, maximum]``.

    8-bit ties round toward zero (``0.5 * 255 -> 127``), 16-bit ties round
    up (``0.5 * 65535 -> 32768``). NaN maps to 0.
    """
    scaled = value * maximum
    if math.isnan(scaled):
        return 0
    scaled = min(max(scaled, 0.0), float(maximum))
    if maximum == 0xFF:
        return int(math.ceil(scaled - 0.5))
    return int(math.floor(scaled + 0.5))
