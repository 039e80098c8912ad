"""
Base interface for all SAT solvers in the package.
Defines the standardized solver interface that all solver implementations must follow.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from satengine.env import Environment
from satengine.formula import Formula, Variable


class SolverStatus(Enum):
    """Enum representing the status of a solver run."""

    SATISFIABLE = "satisfiable"
    UNSATISFIABLE = "unsatisfiable"
    # Incomplete search gave up; says nothing about satisfiability
    UNKNOWN = "unknown"
    ERROR = "error"


class SolverResult:
    """
    Standardized result object returned by all solvers.
    """

    def __init__(
        self,
        status: SolverStatus = SolverStatus.UNKNOWN,
        environment: Environment | None = None,
        runtime: float = 0.0,
        statistics: dict[str, Any] | None = None,
        error_message: str | None = None,
    ):
        self.status = status
        self.environment = environment
        self.runtime = runtime
        self.statistics = statistics or {}
        self.error_message = error_message

    @property
    def assignment(self) -> dict[Variable, bool] | None:
        """Variable to truth value mapping for SAT results, None otherwise."""
        if self.status != SolverStatus.SATISFIABLE or self.environment is None:
            return None
        return self.environment.to_dict()

    @property
    def is_sat(self) -> bool:
        """Returns True if the problem is satisfiable."""
        return self.status == SolverStatus.SATISFIABLE

    @property
    def is_unsat(self) -> bool:
        """Returns True if the problem was proven unsatisfiable."""
        return self.status == SolverStatus.UNSATISFIABLE

    @property
    def is_unknown(self) -> bool:
        """Returns True if the solver gave up without an answer."""
        return self.status == SolverStatus.UNKNOWN

    def __str__(self) -> str:
        """String representation of the result."""
        status_str = str(self.status.value).upper()
        if self.status == SolverStatus.SATISFIABLE:
            return f"SAT Result: {status_str} ({len(self.assignment)} variables, {self.runtime:.4f}s)"
        elif self.status == SolverStatus.UNSATISFIABLE:
            return f"SAT Result: {status_str} (proved in {self.runtime:.4f}s)"
        elif self.status == SolverStatus.ERROR:
            return f"SAT Result: ERROR ({self.error_message})"
        else:
            return f"SAT Result: UNKNOWN ({self.error_message or 'no answer found'})"


class SolverBase(ABC):
    """
    Abstract base class for SAT solver implementations.
    All solver implementations must inherit from this class.
    """

    solver_name: str = "base"
    # widest clause accepted; None means any width
    max_width: int | None = None
    # complete solvers can prove unsatisfiability
    complete: bool = True

    def __init__(self):
        self.stats: dict[str, Any] = {"solver_name": self.solver_name}

    @abstractmethod
    def solve(self, formula: Formula) -> SolverResult:
        """
        Decide the satisfiability of ``formula``.

        Args:
            formula: CNF formula to solve

        Returns:
            SolverResult containing the solution status and other information
        """

    def get_statistics(self) -> dict[str, Any]:
        """
        Get statistics of the last run.

        Returns:
            Dictionary of statistics
        """
        return self.stats

    def reset_statistics(self) -> None:
        self.stats = {"solver_name": self.solver_name}

    def configure(self, config: dict[str, Any]) -> None:
        """
        Configure the solver with the given parameters.

        Args:
            config: Dictionary of configuration parameters. Unknown keys
                raise ValueError.
        """
        for key, value in config.items():
            if key.startswith("_") or not hasattr(self, key):
                raise ValueError(
                    f"Unknown configuration parameter for {self.solver_name}: {key}"
                )
            setattr(self, key, value)
