import math

import numpy as np
import pytest

from usefulcolor.colors import Color
from usefulcolor.colors.arithmetic import add, sub, mul, div, neg, addf, subf, mulf, divf


def test_color_addition():
    result = Color(0.2, 0.3, 0.4, 0.5) + Color(0.5, 0.4, 0.3, 0.5)
    assert isinstance(result, Color)
    assert np.allclose(result.value, (0.7, 0.7, 0.7, 1.0))


def test_addition_does_not_clamp():
    result = Color(0.8, 0.9, 1.0, 1.0) + Color(0.5, 0.4, 0.3, 1.0)
    assert np.allclose(result.value, (1.3, 1.3, 1.3, 2.0))
    result = Color(0.6, 0.7, 0.8, 1.0) - Color(0.7, 0.7, 0.9, 0.5)
    assert np.allclose(result.value, (-0.1, 0.0, -0.1, 0.5))


def test_float32_arithmetic():
    result = Color(0.1, 0, 0, 0) + Color(0.2, 0, 0, 0)
    assert result.r == float(np.float32(0.1) + np.float32(0.2))


def test_color_multiplication_and_division():
    a = Color(0.5, 0.25, 1.0, 0.5)
    b = Color(0.5, 2.0, 0.5, 1.0)
    assert a * b == Color(0.25, 0.5, 0.5, 0.5)
    assert a / b == Color(1.0, 0.125, 2.0, 0.5)


def test_scalar_operations_include_alpha():
    c = Color(0.2, 0.4, 0.6, 0.8)
    assert np.allclose((c * 0.5).value, (0.1, 0.2, 0.3, 0.4))
    assert np.allclose((c + 0.1).value, (0.3, 0.5, 0.7, 0.9))
    assert np.allclose((c - 0.1).value, (0.1, 0.3, 0.5, 0.7))
    assert np.allclose((c / 2).value, (0.1, 0.2, 0.3, 0.4))


def test_reflected_scalar_operations():
    c = Color(0.2, 0.4, 0.5, 1.0)
    assert 2 * c == c * 2
    assert 0.5 + c == c + 0.5
    assert np.allclose((1 - c).value, (0.8, 0.6, 0.5, 0.0))
    assert (1 / c) == Color(5.0, 2.5, 2.0, 1.0)


def test_negation():
    c = Color(0.2, -0.4, 0.0, 1.0)
    assert -c == Color(-0.2, 0.4, 0.0, -1.0)
    assert neg(c) == -c


def test_division_by_zero_is_not_trapped():
    result = Color(1, 1, 1, 1) / Color(0, 1, 1, 1)
    assert math.isinf(result.r) and result.r > 0
    assert result.g == 1.0

    result = Color(0.5, -0.5, 0, 1) / 0
    assert math.isinf(result.r) and result.r > 0
    assert math.isinf(result.g) and result.g < 0
    assert math.isnan(result.b)


def test_function_forms():
    a = Color(0.5, 0.25, 1.0, 0.5)
    b = Color(0.5, 2.0, 0.5, 1.0)
    assert add(a, b) == a + b
    assert sub(a, b) == a - b
    assert mul(a, b) == a * b
    assert div(a, b) == a / b
    assert addf(a, 0.5) == a + 0.5
    assert subf(a, 0.5) == a - 0.5
    assert mulf(a, 2.0) == Color(1.0, 0.5, 2.0, 1.0)
    assert divf(a, 2.0) == Color(0.25, 0.125, 0.5, 0.25)


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Color(1, 1, 1, 1) + "red"
    with pytest.raises(TypeError):
        (1.0, 1.0, 1.0, 1.0) * Color(1, 1, 1, 1)


def test_operands_are_not_mutated():
    a = Color(0.5, 0.5, 0.5, 0.5)
    before = a.value
    _ = a + a * 3 - 1
    assert a.value == before
