"""Finite-difference kernels for the explicit upwind HJB scheme.

Contains four small kernels on 1-D capital grids:
- ``one_sided_differences`` — forward/backward slopes with boundary slots
- ``upwind_select`` — pick the slope whose one-sided drift points inward
- ``explicit_update`` — one pseudo-time step of the stationary HJB equation
- ``sup_norm_diff`` — ‖a − b‖∞

Each kernel has an undecorated ``_core`` variant for use inside other
``tf.function`` scopes and a compiled wrapper for standalone calls.
"""

from __future__ import annotations

from typing import Tuple

import tensorflow as tf


def one_sided_differences_core(
    v: tf.Tensor,
    dk: tf.Tensor,
    lower_boundary: tf.Tensor,
    upper_boundary: tf.Tensor,
) -> Tuple[tf.Tensor, tf.Tensor]:
    """Forward and backward difference quotients of *v* (undecorated).

    The forward slope has no neighbour at the last point and the backward
    slope none at the first; those slots are filled with the supplied
    boundary slopes.

    Parameters
    ----------
    v : tf.Tensor
        Value samples, shape ``(n,)``.
    dk : tf.Tensor
        Scalar grid spacing.
    lower_boundary, upper_boundary : tf.Tensor
        Scalar slopes used for ``dvb[0]`` and ``dvf[n-1]``.

    Returns
    -------
    dvf : tf.Tensor
        ``(v[i+1] − v[i]) / dk``, shape ``(n,)``.
    dvb : tf.Tensor
        ``(v[i] − v[i−1]) / dk``, shape ``(n,)``.
    """
    slope = (v[1:] - v[:-1]) / dk
    dvf = tf.concat([slope, tf.reshape(upper_boundary, [1])], axis=0)
    dvb = tf.concat([tf.reshape(lower_boundary, [1]), slope], axis=0)
    return dvf, dvb


@tf.function
def one_sided_differences(
    v: tf.Tensor,
    dk: tf.Tensor,
    lower_boundary: tf.Tensor,
    upper_boundary: tf.Tensor,
) -> Tuple[tf.Tensor, tf.Tensor]:
    """Forward and backward difference quotients (compiled).

    See :func:`one_sided_differences_core` for parameter documentation.
    """
    return one_sided_differences_core(v, dk, lower_boundary, upper_boundary)


def upwind_select_core(
    dvf: tf.Tensor,
    dvb: tf.Tensor,
    drift_forward: tf.Tensor,
    drift_backward: tf.Tensor,
    dv_zero_drift: tf.Tensor,
) -> tf.Tensor:
    """Choose the upwind derivative at every grid point (undecorated).

    Priority order:

    1. ``drift_forward > 0``  → forward slope
    2. ``drift_backward < 0`` → backward slope
    3. ``drift_forward < 0 and drift_backward > 0`` → slope implied by
       zero drift, ``u'(f(k) − δk)``
    4. otherwise → 0

    NaN drifts compare false and fall through to the later branches.
    """
    zero = tf.zeros_like(dvf)
    straddle = tf.logical_and(drift_forward < 0.0, drift_backward > 0.0)
    return tf.where(
        drift_forward > 0.0,
        dvf,
        tf.where(
            drift_backward < 0.0,
            dvb,
            tf.where(straddle, dv_zero_drift, zero),
        ),
    )


@tf.function
def upwind_select(
    dvf: tf.Tensor,
    dvb: tf.Tensor,
    drift_forward: tf.Tensor,
    drift_backward: tf.Tensor,
    dv_zero_drift: tf.Tensor,
) -> tf.Tensor:
    """Choose the upwind derivative (compiled).

    See :func:`upwind_select_core` for parameter documentation.
    """
    return upwind_select_core(
        dvf, dvb, drift_forward, drift_backward, dv_zero_drift
    )


def explicit_update_core(
    v: tf.Tensor,
    dv: tf.Tensor,
    flow_utility: tf.Tensor,
    drift: tf.Tensor,
    discount_rate: tf.Tensor,
    time_step: tf.Tensor,
) -> Tuple[tf.Tensor, tf.Tensor]:
    """One explicit pseudo-time step of ρV = u(c) + V'(k)·k̇ (undecorated).

    ``v_new = (1 − ρΔ) v + Δ [u(c) + dv · drift]``.  Where ``dv`` is zero
    the advection term is zero even if the drift is not finite.

    Returns
    -------
    v_new : tf.Tensor
        Updated value samples.
    diff : tf.Tensor
        Scalar sup-norm distance ``‖v_new − v‖∞``.
    """
    advection = tf.math.multiply_no_nan(drift, dv)
    v_new = (1.0 - discount_rate * time_step) * v + time_step * (
        flow_utility + advection
    )
    diff = sup_norm_diff_core(v_new, v)
    return v_new, diff


@tf.function
def explicit_update(
    v: tf.Tensor,
    dv: tf.Tensor,
    flow_utility: tf.Tensor,
    drift: tf.Tensor,
    discount_rate: tf.Tensor,
    time_step: tf.Tensor,
) -> Tuple[tf.Tensor, tf.Tensor]:
    """One explicit HJB step (compiled).

    See :func:`explicit_update_core` for parameter documentation.
    """
    return explicit_update_core(
        v, dv, flow_utility, drift, discount_rate, time_step
    )


def sup_norm_diff_core(a: tf.Tensor, b: tf.Tensor) -> tf.Tensor:
    """Compute the sup-norm ``‖a − b‖∞`` (undecorated)."""
    return tf.reduce_max(tf.abs(a - b))


@tf.function
def sup_norm_diff(a: tf.Tensor, b: tf.Tensor) -> tf.Tensor:
    """Compute the sup-norm ``‖a − b‖∞`` (compiled)."""
    return sup_norm_diff_core(a, b)
