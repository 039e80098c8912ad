"""
CNF file handling utilities.

This module provides functions for loading and parsing CNF formulas in
DIMACS format into satengine Formula objects, serializing them back, checking
assignments, and writing solver results to disk.
"""

import logging
import os
from typing import Any, TextIO

from satengine.env import Bool, Environment
from satengine.formula import Clause, Formula, Literal, Variable

logger = logging.getLogger(__name__)


def literal_from_int(value: int) -> Literal:
    """
    Convert a DIMACS literal to a Literal.

    The variable is named by the decimal string of its index.
    """
    if value == 0:
        raise ValueError("0 is a clause terminator, not a literal")
    return Literal(Variable(str(abs(value))), value > 0)


def literal_to_int(literal: Literal) -> int:
    """Convert a Literal over a numerically named variable back to DIMACS."""
    try:
        index = int(literal.variable.name)
    except ValueError:
        raise ValueError(
            f"Variable name {literal.variable.name!r} is not a DIMACS index"
        ) from None
    return index if literal.positive else -index


def build_formula(clauses: list[list[int]]) -> Formula:
    """Build a Formula from integer clause lists."""
    return Formula(Clause(literal_from_int(v) for v in clause) for clause in clauses)


def load_cnf_file(file_path: str) -> tuple[Formula, dict[str, Any]]:
    """
    Load a CNF formula from a DIMACS file.

    Args:
        file_path: Path to the CNF file in DIMACS format

    Returns:
        Tuple of (formula, metadata)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file format is invalid
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"CNF file not found: {file_path}")

    with open(file_path) as f:
        return parse_dimacs(f)


def parse_dimacs(source: str | TextIO) -> tuple[Formula, dict[str, Any]]:
    """
    Parse a CNF formula from DIMACS format.

    Args:
        source: DIMACS content as a string or file-like object

    Returns:
        Tuple of (formula, metadata)
        - formula: Formula with one Clause per ``0``-terminated clause
        - metadata: Dictionary with num_variables, num_clauses, max_clause_width
          and comments

    Raises:
        ValueError: If the format is invalid
    """
    if isinstance(source, str):
        lines = source.strip().split("\n")
    else:
        lines = source.readlines()

    clauses: list[list[int]] = []
    metadata = {
        "comments": [],
        "num_variables": 0,
        "num_clauses": 0,
        "max_clause_width": 0,
    }

    found_problem_line = False
    current_clause: list[int] = []

    for line in lines:
        line = line.strip()

        if not line:
            continue

        if line.startswith("c"):
            metadata["comments"].append(line[1:].strip())
            continue

        # SATLIB benchmark files end with a "%" line
        if line.startswith("%"):
            break

        if line.startswith("p"):
            if found_problem_line:
                raise ValueError("Multiple problem lines in CNF file")

            parts = line.split()
            if len(parts) != 4 or parts[1] != "cnf":
                raise ValueError(f"Invalid problem line: {line}")

            try:
                metadata["num_variables"] = int(parts[2])
                metadata["num_clauses"] = int(parts[3])
            except ValueError:
                raise ValueError(f"Invalid numbers in problem line: {line}")

            found_problem_line = True
            continue

        if not found_problem_line:
            raise ValueError(f"Clause data before problem line: {line}")

        try:
            values = [int(x) for x in line.split()]
        except ValueError:
            raise ValueError(f"Invalid literal in clause line: {line}")

        for value in values:
            if value == 0:
                clauses.append(current_clause)
                current_clause = []
            else:
                if abs(value) > metadata["num_variables"]:
                    raise ValueError(
                        f"Literal {value} exceeds declared variable count "
                        f"{metadata['num_variables']}"
                    )
                current_clause.append(value)

    # A final clause may omit its terminating 0
    if current_clause:
        clauses.append(current_clause)

    if not found_problem_line:
        raise ValueError("No problem line found in CNF file")

    if len(clauses) != metadata["num_clauses"]:
        raise ValueError(
            f"Expected {metadata['num_clauses']} clauses, but found {len(clauses)}"
        )

    formula = build_formula(clauses)
    metadata["max_clause_width"] = formula.max_clause_width
    logger.debug(
        "Parsed DIMACS formula: %d variables, %d clauses, width %d",
        metadata["num_variables"],
        metadata["num_clauses"],
        metadata["max_clause_width"],
    )
    return formula, metadata


def formula_to_dimacs(
    formula: Formula,
    num_variables: int | None = None,
    comments: list[str] | None = None,
) -> str:
    """
    Convert a formula over numerically named variables to DIMACS format.

    Args:
        formula: Formula to serialize
        num_variables: Number of variables (highest index if not provided)
        comments: List of comment lines to include

    Returns:
        DIMACS format string representation
    """
    int_clauses = [[literal_to_int(lit) for lit in clause] for clause in formula]

    if num_variables is None:
        num_variables = max(
            (abs(v) for clause in int_clauses for v in clause), default=0
        )

    lines = [f"c {comment}" for comment in comments or []]
    lines.append(f"p cnf {num_variables} {len(int_clauses)}")
    for clause in int_clauses:
        lines.append(" ".join([str(v) for v in clause] + ["0"]))

    return "\n".join(lines)


def save_cnf_file(
    file_path: str,
    formula: Formula,
    num_variables: int | None = None,
    comments: list[str] | None = None,
) -> None:
    """Save a formula to a DIMACS file."""
    with open(file_path, "w") as f:
        f.write(formula_to_dimacs(formula, num_variables, comments))


def check_solution(formula: Formula, assignment: dict[Variable, bool]) -> bool:
    """
    Check if an assignment satisfies every clause of a formula.

    Variables missing from the assignment do not satisfy any literal.
    """
    env = Environment({var: Bool.of(value) for var, value in assignment.items()})
    return env.satisfies(formula)


def compute_satisfied_clauses(formula: Formula, assignment: dict[Variable, bool]) -> int:
    """Count the clauses of ``formula`` satisfied by ``assignment``."""
    env = Environment({var: Bool.of(value) for var, value in assignment.items()})
    return sum(
        1
        for clause in formula
        if any(env.eval_literal(lit) is Bool.TRUE for lit in clause)
    )


def _variable_sort_key(variable: Variable):
    # Numeric names sort numerically, others after them alphabetically
    name = variable.name
    return (0, int(name), "") if name.isdigit() else (1, 0, name)


def format_assignment(result, num_variables: int | None = None) -> list[str]:
    """
    Render a solver result as ``name:TRUE`` / ``name:FALSE`` lines.

    Unsatisfiable results render as a single ``UNSAT`` line and results with
    no answer as ``UNKNOWN``. With ``num_variables`` (a DIMACS header count),
    declared variables 1..N that occur in no clause are written as FALSE.
    """
    if result.is_unsat:
        return ["UNSAT"]
    if result.assignment is None:
        return ["UNKNOWN"]
    assignment = dict(result.assignment)
    for index in range(1, (num_variables or 0) + 1):
        assignment.setdefault(Variable(str(index)), False)
    return [
        f"{var}:{Bool.of(assignment[var])}"
        for var in sorted(assignment, key=_variable_sort_key)
    ]


def write_assignment(file_path: str, result, num_variables: int | None = None) -> None:
    """
    Write a solver result to ``file_path``, one variable per line.

    Args:
        file_path: Output file
        result: SolverResult to write
        num_variables: Declared variable count; unused variables are written FALSE
    """
    directory = os.path.dirname(os.path.abspath(file_path))
    os.makedirs(directory, exist_ok=True)
    with open(file_path, "w") as f:
        for line in format_assignment(result, num_variables):
            f.write(line + "\n")
    logger.info("Wrote result to %s", file_path)
