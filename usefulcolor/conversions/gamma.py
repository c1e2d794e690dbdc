# No dependencies

SRGB_LINEAR_THRESHOLD = 0.0031308
SRGB_ENCODED_THRESHOLD = 0.04045


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB to linear-light RGB."""
    if c <= SRGB_ENCODED_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB to nonlinear sRGB."""
    if c < SRGB_LINEAR_THRESHOLD:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055
