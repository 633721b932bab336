"""Value Function Iteration (VFI) solver for the growth model.

This package provides:

* :class:`RamseyModelVFI` — explicit upwind HJB solver on a capital grid.
* :class:`HJBEngine` — pseudo-time iterator for the stationary HJB equation.

Sub-packages
------------
kernels
    Finite-difference kernels (one-sided slopes, upwind choice, update).
simulation
    Post-solve policy simulator and cross-check against shooting paths.
grids
    Grid construction and interpolation utilities.

Modules
-------
policies
    Consumption policy from the envelope condition.
results
    Immutable result containers.
engine
    HJB pseudo-time iterator.
"""

from growth_models.vfi.engine import HJBEngine
from growth_models.vfi.ramsey import RamseyModelVFI
from growth_models.vfi.results import ValueGrid, ValueIterationResult

__all__ = [
    "HJBEngine",
    "RamseyModelVFI",
    "ValueGrid",
    "ValueIterationResult",
]
