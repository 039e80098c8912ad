"""
Three-valued truth values and variable environments.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from .formula import Formula, Literal, Variable


class Bool(Enum):
    """Truth state of a variable."""

    TRUE = "true"
    FALSE = "false"
    UNDEFINED = "undefined"

    @classmethod
    def of(cls, value: bool) -> Bool:
        return cls.TRUE if value else cls.FALSE

    def negate(self) -> Bool:
        """Logical not; UNDEFINED stays UNDEFINED."""
        if self is Bool.TRUE:
            return Bool.FALSE
        if self is Bool.FALSE:
            return Bool.TRUE
        return Bool.UNDEFINED

    def __str__(self) -> str:
        return self.name


class Environment:
    """
    Mapping from Variable to Bool.

    Variables that were never assigned read as UNDEFINED. ``put`` returns a
    new environment and leaves this one untouched; ``assign`` updates in
    place.
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: dict[Variable, Bool] | None = None):
        self._bindings: dict[Variable, Bool] = dict(bindings or {})

    def get(self, variable: Variable) -> Bool:
        return self._bindings.get(variable, Bool.UNDEFINED)

    def __getitem__(self, variable: Variable) -> Bool:
        return self.get(variable)

    def __contains__(self, variable: object) -> bool:
        return variable in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._bindings == other._bindings

    def __repr__(self) -> str:
        inner = ", ".join(f"{var}={val}" for var, val in self._bindings.items())
        return f"Environment({inner})"

    def put(self, variable: Variable, value: Bool) -> Environment:
        bindings = dict(self._bindings)
        bindings[variable] = value
        return Environment(bindings)

    def put_literal(self, literal: Literal) -> Environment:
        """Return an environment in which ``literal`` evaluates to TRUE."""
        return self.put(literal.variable, Bool.of(literal.positive))

    def assign(self, variable: Variable, value: Bool) -> None:
        self._bindings[variable] = value

    def copy(self) -> Environment:
        return Environment(self._bindings)

    def eval_literal(self, literal: Literal) -> Bool:
        value = self.get(literal.variable)
        return value if literal.positive else value.negate()

    def satisfies(self, formula: Formula) -> bool:
        """True if every clause has a literal that evaluates to TRUE."""
        return all(
            any(self.eval_literal(lit) is Bool.TRUE for lit in clause)
            for clause in formula
        )

    def to_dict(self) -> dict[Variable, bool]:
        """Plain mapping of the decided variables; UNDEFINED ones are omitted."""
        return {
            var: val is Bool.TRUE
            for var, val in self._bindings.items()
            if val is not Bool.UNDEFINED
        }
