"""
Solving entry points.

``solve`` picks the 2-SAT solver for formulas whose clauses have at most two
literals and the DPLL solver otherwise. The random walk is never chosen
automatically; call ``solve_stochastic`` when an unproven answer is
acceptable.
"""

import logging

from satengine.formula import Formula

from .base import SolverResult
from .dpll_solver import DPLLSolver
from .random_walk_solver import RandomWalkSolver
from .registry import SolverRegistry
from .two_sat_solver import TwoSatSolver

logger = logging.getLogger(__name__)


def solve_2sat(formula: Formula) -> SolverResult:
    """
    Raises:
        InvalidClauseError: If a clause has more than two literals
    """
    return TwoSatSolver().solve(formula)


def solve_dpll(formula: Formula) -> SolverResult:
    return DPLLSolver().solve(formula)


def solve_stochastic(
    formula: Formula, budget: int | None = None, seed: int | None = None
) -> SolverResult:
    """
    Run the random walk with at most ``budget`` flips.

    Args:
        formula: Formula to solve
        budget: Flip budget; 100 * n^2 (from configuration) when None
        seed: Seed for reproducible runs
    """
    return RandomWalkSolver(budget=budget, seed=seed).solve(formula)


def select_solver(max_clause_width: int) -> str:
    """Name of the complete solver suited to clauses of the given width."""
    return SolverRegistry.select(max_clause_width)


def solve(formula: Formula, max_clause_width: int | None = None) -> SolverResult:
    """
    Decide satisfiability with the complete solver suited to the formula.

    Args:
        formula: Formula to solve
        max_clause_width: Widest clause in the formula; computed when None
    """
    if max_clause_width is None:
        max_clause_width = formula.max_clause_width

    if select_solver(max_clause_width) == "2sat":
        logger.debug(f"Clause width {max_clause_width}: using 2-SAT solver")
        return solve_2sat(formula)

    logger.debug(f"Clause width {max_clause_width}: using DPLL solver")
    return solve_dpll(formula)
