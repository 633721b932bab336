"""Policy extraction for the HJB solver.

Contains pure functions that map the value-function derivative to the
consumption policy through the envelope condition u'(c) = V'(k).
"""

from __future__ import annotations

import tensorflow as tf

from growth_models.core.types import TENSORFLOW_DTYPE
from growth_models.econ.primitives import Primitives


def extract_consumption_policy(
    dv: tf.Tensor,
    primitives: Primitives,
) -> tf.Tensor:
    """Map V'(k) samples to consumption ``c = u'^{-1}(V'(k))``.

    Parameters
    ----------
    dv : tf.Tensor
        Upwind derivative of the value function, shape ``(n_k,)``.
    primitives : Primitives
        Model primitives providing the inverse marginal utility.

    Returns
    -------
    tf.Tensor
        Consumption at each grid point, shape ``(n_k,)``.
    """
    dv = tf.cast(dv, TENSORFLOW_DTYPE)
    return primitives.inverse_utility_derivative(dv)


def implied_drift(
    k_grid: tf.Tensor,
    consumption: tf.Tensor,
    primitives: Primitives,
) -> tf.Tensor:
    """Capital drift ``f(k) − δk − c(k)`` under a consumption policy."""
    k_grid = tf.cast(k_grid, TENSORFLOW_DTYPE)
    consumption = tf.cast(consumption, TENSORFLOW_DTYPE)
    return primitives.capital_drift(k_grid, consumption)
