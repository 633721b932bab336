#!/usr/bin/env python3
"""Phase diagram of the Ramsey-Cass-Koopmans model.

Draws the two stationary loci, the saddle path found by bisection
shooting, a handful of diverging trial paths around it, and optionally
the HJB consumption policy loaded from a saved ``vfi_results.npz``.

Usage::

    python ramsey_phase_diagram.py [--k0 1.0] [--vfi-results results/vfi_results.npz]
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from growth_models.config.economic_params import ModelParameters, load_model_params
from growth_models.config.solver_config import load_solver_config
from growth_models.io.artifacts import load_npz_results
from growth_models.shooting import ShootingSolver, Trajectory

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
#  Constants
# ---------------------------------------------------------------------------

ECON_PARAMS_FILE: str = "hyperparam/prefixed/ramsey_params.json"
SOLVER_PARAMS_FILE: str = "hyperparam/prefixed/solver_params.json"

RESULTS_DIR: str = "./results/phase_diagram"
"""Output directory for figures."""

TRIAL_OFFSETS: List[float] = [-0.05, -0.02, 0.02, 0.05]
"""Relative perturbations of c(0) used to draw diverging trial paths."""


# ---------------------------------------------------------------------------
#  Plotting
# ---------------------------------------------------------------------------

def plot_phase_diagram(
    solver: ShootingSolver,
    saddle: Trajectory,
    trials: List[Trajectory],
    k_max: float,
    vfi_solution: Optional[dict] = None,
) -> plt.Figure:
    """Build the (k, c) phase diagram figure."""
    primitives = solver.primitives
    steady = primitives.steady_state

    k_axis = np.linspace(1e-3, k_max, 500)
    k_dot_zero = primitives.production(k_axis) - primitives.params.depreciation_rate * k_axis

    fig, ax = plt.subplots(figsize=(10, 7))
    ax.plot(k_axis, k_dot_zero, color="black", lw=1.5, label=r"$\dot k = 0$")
    ax.axvline(steady.capital, color="black", ls="--", lw=1.5, label=r"$\dot c = 0$")

    for trial in trials:
        ax.plot(trial.capital, trial.consumption, color="tab:gray", lw=0.8, alpha=0.7)

    ax.plot(saddle.capital, saddle.consumption, color="tab:red", lw=2.0, label="Saddle path (shooting)")

    if vfi_solution is not None:
        ax.plot(vfi_solution["K"], vfi_solution["C"], color="tab:blue", lw=1.5, ls=":",
                label="Consumption policy (HJB)")

    ax.scatter([steady.capital], [steady.consumption], color="tab:red", zorder=5)
    ax.annotate(
        f"$(k^*, c^*) = ({steady.capital:.3f}, {steady.consumption:.3f})$",
        (steady.capital, steady.consumption),
        textcoords="offset points", xytext=(10, -15),
    )

    ax.set_xlim(0.0, k_max)
    ax.set_ylim(0.0, 1.2 * float(np.max(k_dot_zero)))
    ax.set_xlabel("Capital $k$")
    ax.set_ylabel("Consumption $c$")
    ax.set_title("Ramsey-Cass-Koopmans phase diagram")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    return fig


# ---------------------------------------------------------------------------
#  Main
# ---------------------------------------------------------------------------

def main() -> None:
    """Solve for the saddle path and save the phase diagram."""
    plt.rcParams.update({
        "font.size": 12,
        "axes.titlesize": 13,
        "axes.labelsize": 11,
        "legend.fontsize": 10,
        "figure.dpi": 150,
        "savefig.dpi": 200,
        "savefig.bbox": "tight",
    })

    parser = argparse.ArgumentParser(description="Ramsey model phase diagram")
    parser.add_argument("--k0", type=float, default=1.0, help="Initial capital (default: 1.0)")
    parser.add_argument("--min-guess", type=float, default=0.860)
    parser.add_argument("--max-guess", type=float, default=0.865)
    parser.add_argument("--k-max", type=float, default=10.0, help="Right edge of the plot")
    parser.add_argument(
        "--vfi-results", type=str, default=None,
        help="Optional .npz written by growth_models.cli.solve_ramsey",
    )
    args = parser.parse_args()

    # --- Load configuration ---
    if os.path.exists(ECON_PARAMS_FILE):
        params = load_model_params(ECON_PARAMS_FILE)
    else:
        logger.warning(f"'{ECON_PARAMS_FILE}' not found. Using reference calibration.")
        params = ModelParameters()
    config = load_solver_config(SOLVER_PARAMS_FILE, "shooting")
    solver = ShootingSolver(params, config)

    # --- Saddle path ---
    saddle = solver.find_optimal_path(
        args.k0, args.min_guess, args.max_guess, config.horizon_steps
    )

    # --- Diverging trial paths ---
    trials = [
        solver.simulate(args.k0, saddle.initial_consumption * (1.0 + offset))
        for offset in TRIAL_OFFSETS
    ]

    vfi_solution = None
    if args.vfi_results is not None:
        vfi_solution = load_npz_results(args.vfi_results)
        logger.info(f"Loaded HJB policy from {args.vfi_results}")

    os.makedirs(RESULTS_DIR, exist_ok=True)
    fig = plot_phase_diagram(solver, saddle, trials, args.k_max, vfi_solution)
    out_path = os.path.join(RESULTS_DIR, "ramsey_phase_diagram.png")
    fig.savefig(out_path)
    logger.info(f"Saved phase diagram to {out_path}")


if __name__ == "__main__":
    main()
