"""
Command-line interface for solving the Ramsey-Cass-Koopmans model.

This script orchestrates the shooting and/or HJB value-iteration solves,
cross-checks them against each other and persists the results.

Example:
    $ python -m growth_models.cli.solve_ramsey --method shooting
    $ python -m growth_models.cli.solve_ramsey --method both --output-dir results
"""

import argparse
import dataclasses
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from growth_models.config.economic_params import ModelParameters, load_model_params
from growth_models.config.solver_config import load_solver_config
from growth_models.io.artifacts import save_trajectory, save_vfi_results
from growth_models.io.file_utils import save_json_file

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname('./')))
ECON_PARAMS_FILE = os.path.join(BASE_DIR, "hyperparam/prefixed/ramsey_params.json")
SOLVER_PARAMS_FILE = os.path.join(BASE_DIR, "hyperparam/prefixed/solver_params.json")

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)


def load_params(filename: str) -> ModelParameters:
    """Load model parameters, falling back to the reference calibration."""
    if not os.path.exists(filename):
        logger.warning(
            f"Parameter file '{filename}' not found. Using reference calibration."
        )
        return ModelParameters()
    logger.info(f"Loading parameters from {filename}...")
    return load_model_params(filename)


def run_shooting(args, params: ModelParameters, summary: Dict[str, Any]):
    """Find the saddle path from the requested initial capital."""
    from growth_models.shooting.solver import ShootingSolver

    config = load_solver_config(args.solver_config, "shooting")
    solver = ShootingSolver(params, config)
    horizon = args.horizon if args.horizon is not None else config.horizon_steps
    trajectory = solver.find_optimal_path(
        args.k0, args.min_guess, args.max_guess, horizon
    )

    save_trajectory(
        trajectory.to_dict(), os.path.join(args.output_dir, "shooting_path.npz")
    )
    k_end, c_end = trajectory.final_state
    summary["shooting"] = {
        "initial_capital": args.k0,
        "initial_consumption": trajectory.initial_consumption,
        "iterations": trajectory.iterations,
        "n_steps": len(trajectory),
        "final_capital": k_end,
        "final_consumption": c_end,
    }
    return trajectory


def run_vfi(args, params: ModelParameters, summary: Dict[str, Any]):
    """Solve the HJB equation on the configured grid."""
    from growth_models.vfi.ramsey import RamseyModelVFI

    config = load_solver_config(args.solver_config, "vfi")
    logger.info(
        f"Solving HJB with n_capital = {config.n_capital} "
        f"on [{config.k_min}, {config.k_max}]..."
    )
    result = RamseyModelVFI(params, config).solve()

    save_vfi_results(result.to_dict(), os.path.join(args.output_dir, "vfi_results.npz"))
    summary["vfi"] = {
        "converged": result.converged,
        "iterations": result.iterations,
        "final_diff": result.final_diff,
        "time_step": result.time_step,
    }
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Ramsey solver CLI."""
    parser = argparse.ArgumentParser(description="Solve the Ramsey model")
    parser.add_argument(
        '--method',
        type=str,
        default='both',
        choices=['shooting', 'vfi', 'both'],
        help="Solver(s) to run."
    )
    parser.add_argument('--params', type=str, default=ECON_PARAMS_FILE,
                        help="JSON file with model parameters.")
    parser.add_argument('--solver-config', type=str, default=SOLVER_PARAMS_FILE,
                        help="JSON file with 'shooting' and 'vfi' sections.")
    parser.add_argument('--output-dir', type=str, default='results',
                        help="Directory for .npz artifacts and summary.json.")
    parser.add_argument('--k0', type=float, default=1.0,
                        help="Initial capital for the shooting solver.")
    parser.add_argument('--min-guess', type=float, default=0.860,
                        help="Lower end of the initial-consumption bracket.")
    parser.add_argument('--max-guess', type=float, default=0.865,
                        help="Upper end of the initial-consumption bracket.")
    parser.add_argument('--horizon', type=int, default=None,
                        help="Steps used to judge monotonicity.")
    args = parser.parse_args(argv)

    try:
        from growth_models.econ import SteadyStateCalculator

        params = load_params(args.params)
        steady = SteadyStateCalculator.calculate(params)
        summary: Dict[str, Any] = {
            "params": dataclasses.asdict(params),
            "steady_state": {"k": steady.capital, "c": steady.consumption},
        }
        logger.info(f"Steady state: k*={steady.capital:.6f}, c*={steady.consumption:.6f}")

        trajectory = result = None
        if args.method in ('shooting', 'both'):
            trajectory = run_shooting(args, params, summary)
        if args.method in ('vfi', 'both'):
            result = run_vfi(args, params, summary)

        if trajectory is not None and result is not None:
            from growth_models.vfi.simulation import compare_with_trajectory

            gaps = compare_with_trajectory(result.to_dict(), trajectory)
            summary["cross_check"] = gaps
            logger.info(
                f"Shooting vs HJB policy: max |Δc| = {gaps['max_abs_gap']:.4e} "
                f"over {gaps['n_compared']} samples"
            )

        save_json_file(summary, os.path.join(args.output_dir, "summary.json"))
    except Exception as e:
        logger.error(f"Solver failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
