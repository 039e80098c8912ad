"""
DPLL solver for general CNF formulas.

See http://en.wikipedia.org/wiki/DPLL_algorithm
"""

import logging
import time
from dataclasses import dataclass

from satengine.env import Bool, Environment
from satengine.formula import Formula, Literal

from .base import SolverBase, SolverResult, SolverStatus
from .registry import register_solver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Frame:
    """A pending search state: assert ``literal`` (if any) on ``formula``."""

    formula: Formula
    env: Environment
    literal: Literal | None = None


@register_solver("dpll")
class DPLLSolver(SolverBase):
    """
    Backtracking search with unit propagation.

    The solver always branches on a smallest remaining clause, so unit
    clauses are propagated before any real decision is made. The literal is
    tried TRUE first; its negation is tried only if the clause had more than
    one literal. Search states live on an explicit stack instead of the
    Python call stack.
    """

    def __init__(self, complete_assignment: bool = True):
        """
        Args:
            complete_assignment: Set variables that were never decided to
                FALSE in the returned assignment
        """
        super().__init__()
        self.complete_assignment = complete_assignment

    def solve(self, formula: Formula) -> SolverResult:
        self.reset_statistics()
        self.stats.update({"decisions": 0, "propagations": 0, "backtracks": 0})
        start_time = time.time()

        if formula.has_empty_clause:
            logger.debug("Formula contains an empty clause")
            return self._result(SolverStatus.UNSATISFIABLE, start_time)

        stack = [_Frame(formula, Environment())]
        while stack:
            frame = stack.pop()
            clauses, env = frame.formula, frame.env

            if frame.literal is not None:
                reduction = clauses.reduce(frame.literal)
                if reduction.falsified:
                    self.stats["backtracks"] += 1
                    continue
                clauses = reduction.result
                env = env.put_literal(frame.literal)

            if clauses.is_empty():
                if self.complete_assignment:
                    for variable in formula.variables():
                        if variable not in env:
                            env = env.put(variable, Bool.FALSE)
                return self._result(SolverStatus.SATISFIABLE, start_time, env)

            smallest = clauses.smallest_clause()
            literal = smallest.choose_literal()
            if len(smallest) == 1:
                # a unit clause has only one way to be satisfied
                self.stats["propagations"] += 1
            else:
                self.stats["decisions"] += 1
                stack.append(_Frame(clauses, env, literal.negate()))
            stack.append(_Frame(clauses, env, literal))

        return self._result(SolverStatus.UNSATISFIABLE, start_time)

    def _result(
        self, status: SolverStatus, start_time: float, env: Environment | None = None
    ) -> SolverResult:
        runtime = time.time() - start_time
        self.stats["runtime"] = runtime
        logger.debug(
            f"DPLL finished: {status.value} after {self.stats['decisions']} decisions"
        )
        return SolverResult(
            status=status,
            environment=env,
            runtime=runtime,
            statistics=dict(self.stats),
        )
