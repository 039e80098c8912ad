"""
SAT solvers with a unified interface.
"""

from .base import SolverBase, SolverResult, SolverStatus
from .config import SolverConfig, get_config, load_config, reset_config
from .dispatch import select_solver, solve, solve_2sat, solve_dpll, solve_stochastic
from .dpll_solver import DPLLSolver
from .implication_graph import ComponentDecomposition, ImplicationGraph
from .random_walk_solver import RandomWalkSolver
from .registry import SolverRegistry, register_solver
from .two_sat_solver import TwoSatSolver

__all__ = [
    "SolverBase",
    "SolverResult",
    "SolverStatus",
    "SolverRegistry",
    "register_solver",
    "SolverConfig",
    "get_config",
    "load_config",
    "reset_config",
    "ImplicationGraph",
    "ComponentDecomposition",
    "DPLLSolver",
    "TwoSatSolver",
    "RandomWalkSolver",
    "select_solver",
    "solve",
    "solve_2sat",
    "solve_dpll",
    "solve_stochastic",
]
