"""
Registry for SAT solvers.

Solvers register under a name with the ``register_solver`` decorator. The
name ``auto`` is not a solver of its own: it resolves, per formula, to the
complete solver with the narrowest clause-width limit that still accepts the
formula's widest clause.
"""

import logging
from collections.abc import Callable

from satengine.utils.exceptions import SolverNotFoundError

from .base import SolverBase
from .config import get_config

# Set up logging
logger = logging.getLogger(__name__)

AUTO = "auto"


def _width_limit(solver_cls: type[SolverBase]) -> float:
    return float("inf") if solver_cls.max_width is None else solver_cls.max_width


class SolverRegistry:
    """
    Registry for SAT solvers.
    Maps solver names to solver classes and resolves ``auto`` by clause width.
    """

    _registry: dict[str, type[SolverBase]] = {}

    @classmethod
    def register(cls, name: str, solver_cls: type[SolverBase]) -> None:
        """
        Register a solver with the given name.

        Args:
            name: Name of the solver
            solver_cls: Solver class (must inherit from SolverBase)
        """
        if not isinstance(solver_cls, type) or not issubclass(solver_cls, SolverBase):
            raise TypeError(f"Solver class {solver_cls!r} must inherit from SolverBase")
        if name == AUTO:
            raise ValueError(f"'{AUTO}' is reserved for width-based selection")

        if name in cls._registry:
            logger.warning(f"Overriding existing solver registration for '{name}'")

        cls._registry[name] = solver_cls
        solver_cls.solver_name = name

    @classmethod
    def register_as(cls, name: str) -> Callable[[type[SolverBase]], type[SolverBase]]:
        """Decorator form of ``register``."""

        def decorator(solver_cls: type[SolverBase]) -> type[SolverBase]:
            cls.register(name, solver_cls)
            return solver_cls

        return decorator

    @classmethod
    def select(cls, max_clause_width: int) -> str:
        """
        Name of the complete solver suited to clauses of the given width.

        Among complete solvers that accept the width, the one with the
        tightest width limit wins.

        Raises:
            SolverNotFoundError: If no complete solver accepts the width
        """
        candidates = [
            (name, solver_cls)
            for name, solver_cls in cls._registry.items()
            if solver_cls.complete and max_clause_width <= _width_limit(solver_cls)
        ]
        if not candidates:
            raise SolverNotFoundError(AUTO, cls.list_solvers())
        name, _ = min(candidates, key=lambda item: _width_limit(item[1]))
        return name

    @classmethod
    def resolve(cls, name: str | None = None, max_clause_width: int | None = None) -> str:
        """
        Turn a requested solver name into a registered one.

        Args:
            name: Solver name, ``auto``, or None to read ``solver.name``
                from the configuration
            max_clause_width: Widest clause of the formula; needed for ``auto``

        Returns:
            Registered solver name
        """
        if name is None:
            name = get_config().get("solver.name", AUTO)

        if name == AUTO:
            if max_clause_width is None:
                raise ValueError("Selecting a solver automatically needs the clause width")
            name = cls.select(max_clause_width)
            logger.debug(f"Clause width {max_clause_width}: selected solver '{name}'")

        if name not in cls._registry:
            raise SolverNotFoundError(name, cls.list_solvers())
        return name

    @classmethod
    def get(cls, name: str) -> type[SolverBase]:
        """
        Get a registered solver class by name.

        Raises:
            SolverNotFoundError: If no solver is registered under ``name``
        """
        if name not in cls._registry:
            raise SolverNotFoundError(name, cls.list_solvers())
        return cls._registry[name]

    @classmethod
    def list_solvers(cls) -> list[str]:
        return list(cls._registry.keys())

    @classmethod
    def create(
        cls, name: str | None = None, max_clause_width: int | None = None, **kwargs
    ) -> SolverBase:
        """
        Create a solver instance.

        Args:
            name: Solver name, ``auto``, or None for the configured solver
            max_clause_width: Widest clause of the formula to be solved
            **kwargs: Arguments to pass to the solver constructor

        Returns:
            Instance of the solver
        """
        solver_cls = cls.get(cls.resolve(name, max_clause_width))
        return solver_cls(**kwargs)


# Register common decorator for more concise solver registration
register_solver = SolverRegistry.register_as
