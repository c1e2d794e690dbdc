from .colors import NAMED_COLORS, named_color

__all__ = ["NAMED_COLORS", "named_color"]
