from .num_utils import CMP_EPSILON, to_float32, lerpf, is_equal_approx, quantize

__all__ = ['CMP_EPSILON', 'to_float32', 'lerpf', 'is_equal_approx', 'quantize']
