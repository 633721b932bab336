"""Simulators for post-solve analysis.

Modules
-------
policy_simulator
    Deterministic capital simulator under the HJB policy, and the
    shooting-versus-HJB cross-check.
"""

from growth_models.vfi.simulation.policy_simulator import (
    PolicySimulator,
    compare_with_trajectory,
)

__all__ = [
    "PolicySimulator",
    "compare_with_trajectory",
]
