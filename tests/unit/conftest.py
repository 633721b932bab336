"""Shared test fixtures and helper utilities for growth-model unit tests."""

from __future__ import annotations

import numpy as np
import tensorflow as tf

# Force CPU for CI: must run before any TF ops
tf.config.set_visible_devices([], 'GPU')

import pytest

from growth_models.config.economic_params import ModelParameters
from growth_models.econ.primitives import Primitives


def make_test_params(**overrides) -> ModelParameters:
    """Return the reference ModelParameters with optional overrides."""
    defaults = dict(
        capital_share=0.3,
        risk_aversion=5.0,
        depreciation_rate=0.05,
        discount_rate=0.1,
        productivity=1.0,
    )
    defaults.update(overrides)
    return ModelParameters(**defaults)


@pytest.fixture
def params() -> ModelParameters:
    return make_test_params()


@pytest.fixture
def primitives(params) -> Primitives:
    return Primitives.from_params(params)


@pytest.fixture
def small_grid() -> tf.Tensor:
    """Uniform 41-point capital grid around the reference steady state."""
    return tf.constant(np.linspace(0.5, 6.0, 41), dtype=tf.float64)
