from numbers import Real
from typing import Callable

import numpy as np

from .color import Color

Operand = Color | Real


def _as_array(operand) -> np.ndarray:
    if isinstance(operand, Color):
        return np.array(operand.value, dtype=np.float32)
    # Scalars apply to all four channels, alpha included
    return np.full(4, operand, dtype=np.float32)


def _operate(left: Operand, right: Operand, op: Callable[[np.ndarray, np.ndarray], np.ndarray]) -> Color:
    """
    Apply ``op`` channel by channel in float32.

    Division by zero and overflow are not trapped: results follow IEEE rules
    (``x / 0 -> ±inf``, ``0 / 0 -> nan``).
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        result = op(_as_array(left), _as_array(right))
    return Color(*result.tolist())


def add(c: Color, other: Color) -> Color:
    return _operate(c, other, np.add)


def sub(c: Color, other: Color) -> Color:
    return _operate(c, other, np.subtract)


def mul(c: Color, other: Color) -> Color:
    return _operate(c, other, np.multiply)


def div(c: Color, other: Color) -> Color:
    return _operate(c, other, np.divide)


def neg(c: Color) -> Color:
    return Color(-c.r, -c.g, -c.b, -c.a)


def addf(c: Color, f: float) -> Color:
    return _operate(c, f, np.add)


def subf(c: Color, f: float) -> Color:
    return _operate(c, f, np.subtract)


def mulf(c: Color, f: float) -> Color:
    return _operate(c, f, np.multiply)


def divf(c: Color, f: float) -> Color:
    return _operate(c, f, np.divide)


def _operator(op, reflected: bool = False):
    """Create a binary operator accepting another Color or a real scalar."""
    def operation(self, other):
        if not isinstance(other, (Color, Real)):
            return NotImplemented
        if reflected:
            return _operate(other, self, op)
        return _operate(self, other, op)
    return operation


# Inject arithmetic operators into Color
Color.__add__ = _operator(np.add)
Color.__sub__ = _operator(np.subtract)
Color.__mul__ = _operator(np.multiply)
Color.__truediv__ = _operator(np.divide)
Color.__radd__ = _operator(np.add, reflected=True)
Color.__rsub__ = _operator(np.subtract, reflected=True)
Color.__rmul__ = _operator(np.multiply, reflected=True)
Color.__rtruediv__ = _operator(np.divide, reflected=True)
Color.__neg__ = neg
