"""
Backend-dispatching math helpers.

The economic primitives are evaluated on plain floats and NumPy arrays by
the shooting solver and on tensors by the HJB kernels.  These helpers pick
the matching implementation so the formulas are written only once.
"""

import numpy as np
import tensorflow as tf

from growth_models.core.types import Numeric


def log(x: Numeric) -> Numeric:
    """Natural logarithm for floats, arrays or tensors."""
    if tf.is_tensor(x):
        return tf.math.log(x)
    return np.log(x)


def power(x: Numeric, exponent: float) -> Numeric:
    """
    Elementwise ``x ** exponent``.

    Python floats are promoted to ``np.float64`` so that a negative base
    yields NaN (as an array would) instead of a complex number.
    """
    if tf.is_tensor(x):
        return tf.pow(x, tf.cast(exponent, x.dtype))
    return np.power(np.float64(x) if isinstance(x, (int, float)) else x, exponent)


def is_finite(x: Numeric) -> bool:
    """Return True when every element of *x* is finite."""
    if tf.is_tensor(x):
        return bool(tf.reduce_all(tf.math.is_finite(x)))
    return bool(np.all(np.isfinite(x)))
