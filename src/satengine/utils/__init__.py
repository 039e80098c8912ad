"""
Utilities for the satengine package.
"""

from satengine.utils.cnf import (
    build_formula,
    check_solution,
    compute_satisfied_clauses,
    format_assignment,
    formula_to_dimacs,
    load_cnf_file,
    parse_dimacs,
    save_cnf_file,
    write_assignment,
)
from satengine.utils.exceptions import (
    InvalidClauseError,
    SATBaseException,
    SolverNotFoundError,
)

__all__ = [
    "build_formula",
    "check_solution",
    "compute_satisfied_clauses",
    "format_assignment",
    "formula_to_dimacs",
    "load_cnf_file",
    "parse_dimacs",
    "save_cnf_file",
    "write_assignment",
    "InvalidClauseError",
    "SATBaseException",
    "SolverNotFoundError",
]
