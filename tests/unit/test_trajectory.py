"""Unit tests for shooting.trajectory: Trajectory and TrajectoryBuffer."""

from __future__ import annotations

import numpy as np
import pytest

from growth_models.shooting.trajectory import Trajectory, TrajectoryBuffer


class TestTrajectoryBuffer:

    def test_append_and_views(self):
        buf = TrajectoryBuffer(capacity=4)
        assert buf.append(1.0, 0.5)
        assert buf.append(1.1, 0.6)
        assert buf.valid_length == 2
        np.testing.assert_array_equal(buf.capital, [1.0, 1.1])
        np.testing.assert_array_equal(buf.consumption, [0.5, 0.6])
        assert not buf.truncated

    def test_grows_past_capacity(self):
        buf = TrajectoryBuffer(capacity=2)
        for i in range(9):
            assert buf.append(float(i), float(2 * i))
        assert buf.valid_length == 9
        np.testing.assert_array_equal(buf.capital, np.arange(9.0))
        np.testing.assert_array_equal(buf.consumption, 2.0 * np.arange(9.0))

    @pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
    def test_truncates_at_first_non_finite(self, bad):
        """The cursor stops before the first non-finite sample."""
        buf = TrajectoryBuffer(capacity=8)
        buf.append(1.0, 1.0)
        buf.append(2.0, 2.0)
        assert not buf.append(3.0, bad)
        assert not buf.append(4.0, 4.0)
        assert buf.truncated
        assert buf.valid_length == 2
        np.testing.assert_array_equal(buf.capital, [1.0, 2.0])

    def test_non_finite_capital_also_truncates(self):
        buf = TrajectoryBuffer()
        buf.append(1.0, 1.0)
        assert not buf.append(np.nan, 1.0)
        assert buf.valid_length == 1

    def test_reset(self):
        buf = TrajectoryBuffer(capacity=4)
        buf.append(1.0, 1.0)
        buf.append(np.nan, 1.0)
        buf.reset()
        assert buf.valid_length == 0
        assert not buf.truncated
        assert buf.append(5.0, 6.0)
        np.testing.assert_array_equal(buf.capital, [5.0])

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            TrajectoryBuffer(capacity=0)

    def test_freeze_copies_valid_prefix(self):
        buf = TrajectoryBuffer(capacity=4)
        buf.append(1.0, 0.5)
        buf.append(1.5, 0.7)
        buf.append(np.inf, 0.9)
        traj = buf.freeze(step_size=0.1, initial_consumption=0.5, iterations=3)
        assert isinstance(traj, Trajectory)
        assert len(traj) == 2
        assert traj.iterations == 3
        buf.reset()
        buf.append(9.0, 9.0)
        # The frozen copy is independent of later buffer use.
        np.testing.assert_array_equal(traj.capital, [1.0, 1.5])


class TestTrajectory:

    def _make(self):
        buf = TrajectoryBuffer()
        for k, c in [(1.0, 0.8), (1.2, 0.85), (1.3, 0.9)]:
            buf.append(k, c)
        return buf.freeze(step_size=0.5, initial_consumption=0.8)

    def test_read_only(self):
        traj = self._make()
        with pytest.raises(ValueError):
            traj.capital[0] = 2.0

    def test_time_axis(self):
        np.testing.assert_allclose(self._make().time, [0.0, 0.5, 1.0])

    def test_states(self):
        traj = self._make()
        assert traj.initial_state == (1.0, 0.8)
        assert traj.final_state == (1.3, 0.9)

    def test_to_dict(self):
        d = self._make().to_dict()
        assert set(d) == {"k", "c", "t", "step_size", "initial_consumption", "iterations"}
        assert float(d["initial_consumption"]) == 0.8
