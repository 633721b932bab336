"""Numerical kernels for the HJB value-iteration solver.

Each module contains pure numerical functions decorated with
``@tf.function``.  Corresponding ``_core`` variants (undecorated) are
provided for nesting inside other compiled scopes.

Modules
-------
hjb_kernels
    One-sided differences, upwind selection, explicit update, sup-norm.
"""

from growth_models.vfi.kernels.hjb_kernels import (
    explicit_update,
    explicit_update_core,
    one_sided_differences,
    one_sided_differences_core,
    sup_norm_diff,
    sup_norm_diff_core,
    upwind_select,
    upwind_select_core,
)

__all__ = [
    "explicit_update",
    "explicit_update_core",
    "one_sided_differences",
    "one_sided_differences_core",
    "sup_norm_diff",
    "sup_norm_diff_core",
    "upwind_select",
    "upwind_select_core",
]
