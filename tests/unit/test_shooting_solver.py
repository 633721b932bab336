"""Unit tests for shooting.solver: ShootingSolver and find_optimal_path."""

from __future__ import annotations

import numpy as np
import pytest

from growth_models.config.economic_params import ModelParameters
from growth_models.config.solver_config import ShootingConfig
from growth_models.core.errors import (
    ConvergenceFailure,
    InvalidBracket,
    NumericOverflow,
)
from growth_models.shooting import ShootingSolver, find_optimal_path


K0 = 1.0
BRACKET = (0.860, 0.865)
HORIZON = 5000


@pytest.fixture(scope="module")
def solver():
    return ShootingSolver(ModelParameters())


@pytest.fixture(scope="module")
def saddle_path(solver):
    return solver.find_optimal_path(K0, *BRACKET, HORIZON)


class TestBracketValidation:
    """Malformed brackets are rejected before anything is simulated."""

    @pytest.mark.parametrize("bracket", [
        (0.9, 0.8),
        (0.8, 0.8),
        (-0.1, 0.8),
        (0.0, 0.8),
    ])
    def test_invalid_bracket(self, monkeypatch, bracket):
        s = ShootingSolver(ModelParameters())

        def _fail(*args, **kwargs):
            raise AssertionError("simulation must not run")

        monkeypatch.setattr(s, "_simulate_into", _fail)
        with pytest.raises(InvalidBracket):
            s.find_optimal_path(K0, *bracket, HORIZON)

    def test_invalid_bracket_is_value_error(self, solver):
        with pytest.raises(ValueError):
            solver.find_optimal_path(K0, 0.9, 0.8, HORIZON)

    def test_bad_horizon(self, solver):
        with pytest.raises(ValueError, match="horizon_steps"):
            solver.find_optimal_path(K0, *BRACKET, 1)

    def test_bad_initial_capital(self, solver):
        with pytest.raises(ValueError, match="initial_capital"):
            solver.find_optimal_path(0.0, *BRACKET, HORIZON)

    def test_bad_max_iterations(self, solver):
        with pytest.raises(ValueError, match="max_iterations"):
            solver.find_optimal_path(K0, *BRACKET, HORIZON, max_iterations=0)


class TestSimulate:

    def test_length_and_start(self, solver):
        traj = solver.simulate(K0, 0.86, horizon_steps=100)
        assert len(traj) == 100
        assert traj.initial_state == (K0, 0.86)
        assert traj.iterations == 0

    def test_euler_step(self, solver):
        """One step of the forward Euler update."""
        p = solver.params
        dt = 0.01
        traj = solver.simulate(K0, 0.86, horizon_steps=2, step_size=dt)
        k1 = K0 + dt * (K0 ** p.capital_share - p.depreciation_rate * K0 - 0.86)
        growth = (p.capital_share * K0 ** (p.capital_share - 1.0)
                  - p.depreciation_rate - p.discount_rate) / p.risk_aversion
        c1 = 0.86 * (1.0 + dt * growth)
        assert traj.capital[1] == pytest.approx(k1, rel=1e-14)
        assert traj.consumption[1] == pytest.approx(c1, rel=1e-14)

    def test_deterministic(self, solver):
        a = solver.simulate(K0, 0.8625, horizon_steps=2000)
        b = solver.simulate(K0, 0.8625, horizon_steps=2000)
        assert np.array_equal(a.capital, b.capital)
        assert np.array_equal(a.consumption, b.consumption)

    def test_runaway_path_truncated(self, solver):
        """Excess consumption drives k negative; only the finite prefix is kept."""
        traj = solver.simulate(K0, 50.0, horizon_steps=HORIZON)
        assert 2 <= len(traj) < HORIZON
        assert np.all(np.isfinite(traj.capital))
        assert np.all(np.isfinite(traj.consumption))

    def test_zero_horizon_rejected(self, solver):
        with pytest.raises(ValueError):
            solver.simulate(K0, 0.86, horizon_steps=0)

    def test_non_positive_consumption_rejected(self, solver):
        with pytest.raises(ValueError, match="initial_consumption"):
            solver.simulate(K0, 0.0)


class TestFindOptimalPath:

    def test_reference_case_converges(self, saddle_path, solver):
        ss = solver.primitives.steady_state
        k_end, c_end = saddle_path.final_state
        assert abs(k_end - ss.capital) < 0.3
        assert abs(c_end - ss.consumption) < 0.1
        assert 1 <= saddle_path.iterations <= solver.config.max_iterations

    def test_accepted_path_is_monotone(self, saddle_path):
        assert np.all(np.diff(saddle_path.capital) >= 0)
        assert np.all(np.diff(saddle_path.consumption) >= 0)

    def test_full_horizon_kept(self, saddle_path):
        assert len(saddle_path) == HORIZON
        assert saddle_path.step_size == 0.01

    def test_initial_consumption_in_bracket(self, saddle_path):
        assert BRACKET[0] < saddle_path.initial_consumption < BRACKET[1]
        assert saddle_path.initial_state == (K0, saddle_path.initial_consumption)

    def test_repeatable(self, solver, saddle_path):
        again = solver.find_optimal_path(K0, *BRACKET, HORIZON)
        assert again.initial_consumption == saddle_path.initial_consumption
        assert np.array_equal(again.capital, saddle_path.capital)
        assert np.array_equal(again.consumption, saddle_path.consumption)

    def test_functional_form_matches(self, saddle_path):
        path = find_optimal_path(ModelParameters(), K0, *BRACKET, HORIZON)
        assert np.array_equal(path.capital, saddle_path.capital)

    def test_low_trial_raises_bracket_floor(self, solver):
        """A too-low midpoint moves the lower end up before giving up."""
        with pytest.raises(ConvergenceFailure) as exc_info:
            solver.find_optimal_path(K0, 0.5, 0.95, HORIZON, max_iterations=1)
        err = exc_info.value
        assert err.iterations == 1
        assert err.bracket == pytest.approx((0.725, 0.95))
        assert err.trajectory is not None

    def test_high_trial_lowers_bracket_ceiling(self, solver):
        with pytest.raises(ConvergenceFailure) as exc_info:
            solver.find_optimal_path(K0, 0.9, 0.95, HORIZON, max_iterations=1)
        assert exc_info.value.bracket == pytest.approx((0.9, 0.925))

    def test_config_defaults_used(self):
        config = ShootingConfig(step_size=0.02, max_iterations=1)
        s = ShootingSolver(ModelParameters(), config)
        with pytest.raises(ConvergenceFailure) as exc_info:
            s.find_optimal_path(K0, 0.5, 0.95, 2500)
        assert exc_info.value.trajectory.step_size == 0.02

    def test_immediate_overflow(self, monkeypatch):
        s = ShootingSolver(ModelParameters())

        def _blow_up(buffer, k0, c0, horizon, dt):
            buffer.reset()
            buffer.append(k0, c0)
            buffer.append(np.nan, np.inf)
            return buffer

        monkeypatch.setattr(s, "_simulate_into", _blow_up)
        with pytest.raises(NumericOverflow):
            s.find_optimal_path(K0, *BRACKET, HORIZON)
