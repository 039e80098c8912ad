"""
satengine: CNF satisfiability with DPLL, 2-SAT and random walk solvers.
"""

from satengine.env import Bool, Environment
from satengine.formula import Clause, Formula, Literal, ReduceStatus, Reduction, Variable
from satengine.solvers import (
    SolverResult,
    SolverStatus,
    solve,
    solve_2sat,
    solve_dpll,
    solve_stochastic,
)

__version__ = "0.1.0"

__all__ = [
    "Bool",
    "Environment",
    "Variable",
    "Literal",
    "Clause",
    "Formula",
    "Reduction",
    "ReduceStatus",
    "SolverResult",
    "SolverStatus",
    "solve",
    "solve_2sat",
    "solve_dpll",
    "solve_stochastic",
]
