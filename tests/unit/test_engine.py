"""Unit tests for vfi.engine: HJBEngine on a coarse grid."""

from __future__ import annotations

import numpy as np
import tensorflow as tf

tf.config.set_visible_devices([], 'GPU')

import pytest

from growth_models.config.economic_params import ModelParameters
from growth_models.core.errors import NumericOverflow
from growth_models.econ.primitives import Primitives
from growth_models.vfi.engine import HJBEngine


def _coarse_grid():
    return tf.constant(np.linspace(0.5, 6.0, 41), dtype=tf.float64)


@pytest.fixture(scope="module")
def engine():
    return HJBEngine(
        Primitives.from_params(ModelParameters()), _coarse_grid(),
        tol=1e-7, max_iter=100000,
    )


@pytest.fixture(scope="module")
def solved(engine):
    v_init = engine.primitives.utility(engine.k_grid)
    return engine.run(v_init)


class TestConstruction:

    @pytest.mark.parametrize("kwargs, match", [
        (dict(tol=0.0, max_iter=10), "Tolerance"),
        (dict(tol=1e-6, max_iter=0), "max_iter"),
        (dict(tol=1e-6, max_iter=10, step_fraction=0.0), "step_fraction"),
    ])
    def test_invalid_arguments(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            HJBEngine(Primitives.from_params(ModelParameters()), _coarse_grid(), **kwargs)

    def test_time_step_respects_cfl(self, engine):
        """Δ never exceeds step_fraction · dk / max|f(k) − δk|."""
        v_init = engine.primitives.utility(engine.k_grid)
        dt = engine.time_step(v_init)
        bound = engine.step_fraction * float(engine.dk) / float(
            tf.reduce_max(tf.abs(engine.net_output))
        )
        assert 0.0 < dt <= bound


class TestRun:

    def test_converges(self, solved):
        _, _, _, iterations, diff, converged, _ = solved
        assert converged
        assert 0 < iterations < 100000
        assert diff < 1e-7

    def test_outputs_finite(self, solved):
        v, dv, c, *_ = solved
        assert np.all(np.isfinite(v.numpy()))
        assert np.all(dv.numpy() > 0)
        assert np.all(c.numpy() > 0)

    def test_hjb_residual_small(self, engine, solved):
        """ρV ≈ u(c) + V'·k̇ at the fixed point."""
        v, dv, c, _, _, _, dt = solved
        v, dv, c = v.numpy(), dv.numpy(), c.numpy()
        drift = engine.net_output.numpy() - c
        advection = np.where(dv == 0.0, 0.0, dv * drift)
        residual = engine.primitives.utility(c) + advection - 0.1 * v
        assert np.max(np.abs(residual)) < 10.0 * 1e-7 / dt

    def test_value_increasing(self, solved):
        assert np.all(np.diff(solved[0].numpy()) > 0)

    def test_drift_points_to_steady_state(self, engine, solved):
        c = solved[2].numpy()
        k = engine.k_grid.numpy()
        drift = engine.net_output.numpy() - c
        k_star = engine.primitives.steady_state.capital
        assert np.all(drift[k < k_star - 1.0] > 0)
        assert np.all(drift[k > k_star + 1.0] < 0)

    def test_iteration_bound(self):
        e = HJBEngine(
            Primitives.from_params(ModelParameters()), _coarse_grid(),
            tol=1e-12, max_iter=5,
        )
        _, _, _, iterations, diff, converged, _ = e.run(
            e.primitives.utility(e.k_grid)
        )
        assert not converged
        assert iterations == 5
        assert diff > 1e-12

    def test_derivative_and_policy_consistent(self, engine, solved):
        v, dv, c, *_ = solved
        dv2, c2 = engine.derivative_and_policy(v)
        np.testing.assert_allclose(dv2.numpy(), dv.numpy())
        np.testing.assert_allclose(c2.numpy(), c.numpy())

    def test_non_finite_iterate_raises(self, monkeypatch):
        e = HJBEngine(
            Primitives.from_params(ModelParameters()), _coarse_grid(),
            tol=1e-6, max_iter=10,
        )

        def _blown_up(v, time_step):
            nan = tf.constant(np.nan, dtype=tf.float64)
            return tf.constant(3), v * nan, nan, tf.constant(True)

        monkeypatch.setattr(e, "_iterate", _blown_up)
        with pytest.raises(NumericOverflow):
            e.run(e.primitives.utility(e.k_grid))
