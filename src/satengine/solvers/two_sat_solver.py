"""
2-SAT solver based on strongly connected components of the implication graph.
"""

import logging
import time

from satengine.env import Bool, Environment
from satengine.formula import Formula
from satengine.utils.exceptions import InvalidClauseError

from .base import SolverBase, SolverResult, SolverStatus
from .implication_graph import ImplicationGraph, negation_id
from .registry import register_solver

logger = logging.getLogger(__name__)


@register_solver("2sat")
class TwoSatSolver(SolverBase):
    """
    Polynomial-time solver for formulas whose clauses have at most two literals.

    The formula is unsatisfiable exactly when some literal and its negation
    fall in the same strongly connected component. Otherwise the components
    are walked from the sinks of the condensation towards its sources, and
    every literal not yet decided is made TRUE (its negation FALSE).
    """

    max_width = ImplicationGraph.MAX_CLAUSE_WIDTH

    def validate(self, formula: Formula) -> None:
        """
        Raises:
            InvalidClauseError: If any clause is wider than ``max_width``
        """
        for clause in formula:
            if len(clause) > self.max_width:
                raise InvalidClauseError(
                    "Clause too wide for the 2-SAT solver",
                    clause=clause,
                    max_width=self.max_width,
                )

    def solve(self, formula: Formula) -> SolverResult:
        self.reset_statistics()
        self.validate(formula)
        start_time = time.time()

        if formula.has_empty_clause:
            logger.debug("Formula contains an empty clause")
            return self._result(SolverStatus.UNSATISFIABLE, start_time)

        graph = ImplicationGraph.from_formula(formula)
        decomposition = graph.strongly_connected_components()
        self.stats["vertices"] = graph.num_vertices
        self.stats["edges"] = graph.num_edges
        self.stats["components"] = len(decomposition)

        conflicts = decomposition.contradictions()
        if conflicts:
            variable = graph.variable(conflicts[0])
            logger.debug(f"{variable} and ~{variable} share a component")
            self.stats["conflict_variable"] = str(variable)
            return self._result(SolverStatus.UNSATISFIABLE, start_time)

        truth = [Bool.UNDEFINED] * graph.num_vertices
        for members in reversed(decomposition.components):
            for vertex in members:
                if truth[vertex] is Bool.UNDEFINED:
                    truth[vertex] = Bool.TRUE
                    truth[negation_id(vertex)] = Bool.FALSE

        env = Environment(
            {variable: truth[2 * i] for i, variable in enumerate(graph.variables)}
        )
        return self._result(SolverStatus.SATISFIABLE, start_time, env)

    def _result(
        self, status: SolverStatus, start_time: float, env: Environment | None = None
    ) -> SolverResult:
        runtime = time.time() - start_time
        self.stats["runtime"] = runtime
        return SolverResult(
            status=status,
            environment=env,
            runtime=runtime,
            statistics=dict(self.stats),
        )
