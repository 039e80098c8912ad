#!/usr/bin/env python
"""
Command-line interface: solve a DIMACS CNF file and optionally write the
assignment to a file.
"""

import argparse
import logging
import os
import sys
import time

from satengine.solvers import SolverRegistry, load_config
from satengine.solvers.base import SolverStatus
from satengine.utils.cnf import load_cnf_file, write_assignment
from satengine.utils.exceptions import SATBaseException
from satengine.utils.logging_utils import LoggingManager

logger = logging.getLogger(__name__)

# SAT competition exit codes
EXIT_SAT = 10
EXIT_UNSAT = 20
EXIT_UNKNOWN = 0
EXIT_ERROR = 1

STATUS_MESSAGES = {
    SolverStatus.SATISFIABLE: "satisfiable",
    SolverStatus.UNSATISFIABLE: "not satisfiable",
    SolverStatus.UNKNOWN: "no answer found",
    SolverStatus.ERROR: "error",
}


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="satengine", description="Decide satisfiability of a DIMACS CNF formula"
    )

    parser.add_argument("cnf_file", type=str, help="Input formula in DIMACS CNF format")
    parser.add_argument(
        "output",
        type=str,
        nargs="?",
        default=None,
        help="File to write the assignment to (name:TRUE/FALSE per line)",
    )

    parser.add_argument(
        "--solver",
        default=None,
        choices=["auto", "dpll", "2sat", "random_walk"],
        help="Solver to use; auto picks 2sat for clauses of width <= 2 (default: from config)",
    )
    parser.add_argument(
        "--budget",
        type=int,
        default=None,
        help="Flip budget for the random walk solver (default: budget_factor * n^2)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the random walk solver"
    )
    parser.add_argument(
        "--config", type=str, default=None, help="YAML or JSON configuration file"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for JSON-lines run logs",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    level = "DEBUG" if args.verbose else config.get("logging.level", "INFO")
    manager = LoggingManager(
        level=level,
        fmt=config.get("logging.format"),
        log_file=config.get("logging.file"),
        structured_dir=args.log_dir or config.get("output.log_dir"),
        run_name=os.path.splitext(os.path.basename(args.cnf_file))[0],
    )
    structured = manager.get_structured_logger()

    try:
        try:
            formula, metadata = load_cnf_file(args.cnf_file)
        except (OSError, ValueError) as e:
            logger.error(f"Could not read {args.cnf_file}: {e}")
            if structured:
                structured.log_exception(args.cnf_file, type(e).__name__, str(e))
            return EXIT_ERROR

        try:
            name = SolverRegistry.resolve(args.solver, metadata["max_clause_width"])
        except SATBaseException as e:
            logger.error(str(e))
            return EXIT_ERROR

        kwargs = {}
        if name == "random_walk":
            kwargs = {
                "budget": args.budget,
                "seed": args.seed,
                "num_variables": metadata["num_variables"],
            }
        solver = SolverRegistry.create(name, **kwargs)

        print("SAT solver starts!!!")
        started = time.perf_counter()
        try:
            result = solver.solve(formula)
        except SATBaseException as e:
            logger.error(str(e))
            if structured:
                structured.log_exception(args.cnf_file, type(e).__name__, str(e))
            return EXIT_ERROR
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        print(STATUS_MESSAGES[result.status])
        print(f"Time: {elapsed_ms:.3f}ms")
        logger.debug(f"Statistics: {result.statistics}")

        if structured:
            structured.log_solve(args.cnf_file, result)

        if args.output:
            write_assignment(args.output, result, metadata["num_variables"])

        if result.is_sat:
            return EXIT_SAT
        if result.is_unsat:
            return EXIT_UNSAT
        return EXIT_UNKNOWN
    finally:
        manager.close()


if __name__ == "__main__":
    sys.exit(main())
