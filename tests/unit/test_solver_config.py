"""Unit tests for solver_config: ShootingConfig, ValueIterationConfig and loader."""

from __future__ import annotations

import json

import pytest

from growth_models.config.solver_config import (
    ShootingConfig,
    ValueIterationConfig,
    load_solver_config,
)


def _write(tmp_path, data) -> str:
    path = tmp_path / "solver.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestDefaults:

    def test_shooting_defaults(self):
        c = ShootingConfig()
        assert c.step_size == 0.01
        assert c.max_iterations == 10000
        assert c.horizon_steps == 5000

    def test_vfi_defaults(self):
        c = ValueIterationConfig()
        assert c.n_capital == 250
        assert (c.k_min, c.k_max) == (0.01, 10.0)
        assert c.strict is True


class TestLoadSolverConfig:

    def test_loads_section(self, tmp_path):
        path = _write(tmp_path, {
            "shooting": {"step_size": 0.005, "horizon_steps": 100},
            "vfi": {"n_capital": 50, "tolerance": 1e-4},
        })
        shooting = load_solver_config(path, "shooting")
        vfi = load_solver_config(path, "vfi")
        assert isinstance(shooting, ShootingConfig)
        assert shooting.step_size == 0.005
        assert shooting.horizon_steps == 100
        assert shooting.max_iterations == 10000
        assert isinstance(vfi, ValueIterationConfig)
        assert vfi.n_capital == 50
        assert vfi.tolerance == 1e-4

    def test_unknown_keys_filtered(self, tmp_path):
        path = _write(tmp_path, {"vfi": {"n_capital": 30, "n_productivity": 7}})
        assert load_solver_config(path, "vfi").n_capital == 30

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_solver_config(str(tmp_path / "nope.json"), "vfi")
        assert config == ValueIterationConfig()

    def test_missing_section_uses_defaults(self, tmp_path):
        path = _write(tmp_path, {"vfi": {"n_capital": 30}})
        assert load_solver_config(path, "shooting") == ShootingConfig()

    def test_unknown_section_raises(self, tmp_path):
        path = _write(tmp_path, {})
        with pytest.raises(ValueError, match="Unknown solver section"):
            load_solver_config(path, "perturbation")

    def test_malformed_json_exits(self, tmp_path):
        path = tmp_path / "solver.json"
        path.write_text("{not json")
        with pytest.raises(SystemExit):
            load_solver_config(str(path), "vfi")
