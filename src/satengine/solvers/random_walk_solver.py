"""
Random walk solver using the unified solver interface.
"""

import logging
import random
import time

from satengine.env import Bool, Environment
from satengine.formula import Clause, Formula

from .base import SolverBase, SolverResult, SolverStatus
from .config import get_config
from .registry import register_solver

# Set up logging
logger = logging.getLogger(__name__)


@register_solver("random_walk")
class RandomWalkSolver(SolverBase):
    """
    Incomplete local search: repeatedly flip a random variable of an
    unsatisfied clause until every clause holds or the budget runs out.

    Running out of budget yields SolverStatus.UNKNOWN. This solver never
    reports UNSATISFIABLE.
    """

    complete = False

    def __init__(
        self,
        budget: int | None = None,
        budget_factor: int | None = None,
        seed: int | None = None,
        num_variables: int | None = None,
    ):
        """
        Initialize the random walk solver.

        Args:
            budget: Maximum number of flips; defaults to budget_factor * n^2
            budget_factor: Multiplier for the default budget
            seed: Seed for the per-run random number generator
            num_variables: Declared variable count (e.g. a DIMACS header); the
                default budget uses it when it exceeds the variables in the formula
        """
        super().__init__()
        config = get_config()

        self.budget = budget
        self.budget_factor = (
            budget_factor
            if budget_factor is not None
            else config.get("solver.random_walk.budget_factor", 100)
        )
        self.seed = seed if seed is not None else config.get("solver.random_walk.seed")
        self.num_variables = num_variables

    def default_budget(self, formula: Formula) -> int:
        n = max(formula.num_variables, self.num_variables or 0)
        return self.budget_factor * n * n

    def _find_unsatisfied(self, formula: Formula, env: Environment) -> Clause | None:
        """
        Return the first clause with no TRUE literal, or None if all hold.

        Undecided variables are committed to FALSE as they are read.
        """
        for clause in formula:
            satisfied = False
            for lit in clause:
                if env.get(lit.variable) is Bool.UNDEFINED:
                    env.assign(lit.variable, Bool.FALSE)
                if env.eval_literal(lit) is Bool.TRUE:
                    satisfied = True
                    break
            if not satisfied:
                return clause
        return None

    def solve(self, formula: Formula) -> SolverResult:
        """
        Search for a satisfying assignment within the flip budget.

        Returns:
            SolverResult with SATISFIABLE and the assignment, or UNKNOWN
        """
        self.reset_statistics()
        start_time = time.time()
        budget = self.budget if self.budget is not None else self.default_budget(formula)
        self.stats.update({"flips": 0, "budget": budget, "seed": self.seed})

        if formula.has_empty_clause:
            logger.warning("Formula contains an empty clause; no assignment can satisfy it")
            return self._result(
                SolverStatus.UNKNOWN, start_time, error="Formula contains an empty clause"
            )

        rng = random.Random(self.seed)
        env = Environment()

        while True:
            clause = self._find_unsatisfied(formula, env)
            if clause is None:
                # variables never read during the scans keep their default
                for var in formula.variables():
                    if env.get(var) is Bool.UNDEFINED:
                        env.assign(var, Bool.FALSE)
                return self._result(SolverStatus.SATISFIABLE, start_time, env)

            if self.stats["flips"] >= budget:
                logger.debug(f"Random walk budget of {budget} flips exhausted")
                return self._result(
                    SolverStatus.UNKNOWN,
                    start_time,
                    error=f"No answer found within {budget} flips",
                )

            lit = rng.choice(clause.literals)
            env.assign(lit.variable, env.get(lit.variable).negate())
            self.stats["flips"] += 1

    def _result(
        self,
        status: SolverStatus,
        start_time: float,
        env: Environment | None = None,
        error: str | None = None,
    ) -> SolverResult:
        runtime = time.time() - start_time
        self.stats["runtime"] = runtime
        return SolverResult(
            status=status,
            environment=env,
            runtime=runtime,
            statistics=dict(self.stats),
            error_message=error,
        )
