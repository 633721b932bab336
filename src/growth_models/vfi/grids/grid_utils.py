"""
Linear interpolation on the capital grid.

The HJB solver only produces policy and value samples at grid points;
the policy simulator and the shooting cross-check evaluate them between
points.  Queries outside the grid take the nearest end value.
"""

import tensorflow as tf

from growth_models.core.types import TENSORFLOW_DTYPE


def linear_interp_core(
    k_grid: tf.Tensor,
    values: tf.Tensor,
    k_query: tf.Tensor,
) -> tf.Tensor:
    """
    Piecewise-linear interpolation of *values* at *k_query* (undecorated).

    Args:
        k_grid:  (N,) strictly increasing knots, N >= 2.
        values:  (N,) samples at the knots.
        k_query: (M,) evaluation points.

    Returns:
        (M,) float64 interpolated values.
    """
    k_grid = tf.cast(k_grid, TENSORFLOW_DTYPE)
    values = tf.cast(values, TENSORFLOW_DTYPE)
    k_query = tf.reshape(tf.cast(k_query, TENSORFLOW_DTYPE), [-1])

    n = tf.shape(k_grid)[0]
    k_clamped = tf.clip_by_value(k_query, k_grid[0], k_grid[-1])

    # Left knot of the segment holding each query; the last knot maps to
    # the final segment.
    left = tf.searchsorted(k_grid, k_clamped, side='right') - 1
    left = tf.clip_by_value(left, 0, n - 2)

    k_left = tf.gather(k_grid, left)
    k_right = tf.gather(k_grid, left + 1)
    v_left = tf.gather(values, left)
    v_right = tf.gather(values, left + 1)

    weight = (k_clamped - k_left) / (k_right - k_left)
    return v_left + weight * (v_right - v_left)


@tf.function
def linear_interp(
    k_grid: tf.Tensor,
    values: tf.Tensor,
    k_query: tf.Tensor,
) -> tf.Tensor:
    """
    Compiled wrapper around :func:`linear_interp_core`.

    Use this outside other ``tf.function`` scopes.
    """
    return linear_interp_core(k_grid, values, k_query)
