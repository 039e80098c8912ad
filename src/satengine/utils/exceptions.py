"""
Custom exceptions for the satengine package.

Unsatisfiability and search-budget exhaustion are ordinary solver results and
are reported through SolverResult, not through exceptions. The classes below
cover usage errors only.
"""


class SATBaseException(Exception):
    """Base class for all satengine specific exceptions."""

    def __init__(self, message: str | None = None):
        """
        Initialize the exception.

        Args:
            message: Optional error message
        """
        self.message = message
        super().__init__(message)


class InvalidClauseError(SATBaseException):
    """
    Exception raised when a clause does not fit the solver it was given to.

    The 2-SAT solver raises this for clauses wider than two literals.
    """

    def __init__(
        self,
        message: str = "Invalid clause detected",
        clause=None,
        max_width: int | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Error message
            clause: The offending clause
            max_width: The widest clause the solver accepts
        """
        self.clause = clause
        self.max_width = max_width

        # Enhance the message with the clause if available
        if clause is not None:
            message = f"{message}: {clause}"
        if max_width is not None:
            message = f"{message} (max width {max_width})"

        super().__init__(message)


class SolverNotFoundError(SATBaseException, ValueError):
    """Exception raised when a solver name is not registered."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        message = f"No solver registered with name '{name}'"
        if self.available:
            message = f"{message} (available: {', '.join(self.available)})"
        super().__init__(message)
