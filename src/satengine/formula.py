"""
CNF formula model.

This module defines the vocabulary shared by every solver: variables,
literals, clauses and formulas. All of these are immutable value objects;
operations that simplify a clause or a formula return new instances so that
search procedures can backtrack without undo logic.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True, order=True)
class Variable:
    """A Boolean variable, identified by its name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Literal:
    """A variable tagged with a polarity."""

    variable: Variable
    positive: bool = True

    @classmethod
    def pos(cls, name: str) -> Literal:
        """Create the positive literal of the variable called ``name``."""
        return cls(Variable(name), True)

    @classmethod
    def neg(cls, name: str) -> Literal:
        """Create the negative literal of the variable called ``name``."""
        return cls(Variable(name), False)

    def negate(self) -> Literal:
        """Return the literal of opposite polarity over the same variable."""
        return Literal(self.variable, not self.positive)

    def __invert__(self) -> Literal:
        return self.negate()

    def __str__(self) -> str:
        return self.variable.name if self.positive else f"~{self.variable.name}"


class ReduceStatus(Enum):
    """Outcome of asserting a literal on a clause or formula."""

    ELIMINATED = "eliminated"
    FALSIFIED = "falsified"
    REDUCED = "reduced"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class Reduction:
    """
    Result of a ``reduce`` call.

    ``result`` holds the simplified Clause or Formula. It is None only when
    the status is ELIMINATED or FALSIFIED, since there is nothing left to
    return in those cases.
    """

    status: ReduceStatus
    result: Any = None

    @property
    def falsified(self) -> bool:
        return self.status is ReduceStatus.FALSIFIED


class Clause:
    """
    A disjunction of literals.

    Duplicate literals collapse. Iteration follows first-insertion order so
    that solvers behave reproducibly.
    """

    __slots__ = ("_literals", "_members")

    def __init__(self, literals: Iterable[Literal] = ()):
        # dict keeps insertion order and gives O(1) membership
        self._members: dict[Literal, None] = dict.fromkeys(literals)
        self._literals: tuple[Literal, ...] = tuple(self._members)

    @property
    def literals(self) -> tuple[Literal, ...]:
        return self._literals

    @property
    def size(self) -> int:
        return len(self._literals)

    def __len__(self) -> int:
        return len(self._literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self._literals)

    def __contains__(self, literal: object) -> bool:
        return literal in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clause):
            return NotImplemented
        return self._members.keys() == other._members.keys()

    def __hash__(self) -> int:
        return hash(frozenset(self._literals))

    def __repr__(self) -> str:
        return f"Clause({[str(lit) for lit in self._literals]})"

    def __str__(self) -> str:
        return "(" + " v ".join(str(lit) for lit in self._literals) + ")"

    def is_empty(self) -> bool:
        """An empty clause can never be satisfied."""
        return not self._literals

    def contains(self, literal: Literal) -> bool:
        return literal in self._members

    def add(self, literal: Literal) -> Clause:
        """Return a new clause that also contains ``literal``."""
        return Clause(self._literals + (literal,))

    def choose_literal(self) -> Literal:
        """
        Pick a literal from the clause (the first one inserted).

        Raises:
            ValueError: If the clause is empty
        """
        if not self._literals:
            raise ValueError("Cannot choose a literal from an empty clause")
        return self._literals[0]

    def variables(self) -> list[Variable]:
        seen: dict[Variable, None] = {}
        for lit in self._literals:
            seen.setdefault(lit.variable)
        return list(seen)

    def reduce(self, literal: Literal) -> Reduction:
        """
        Simplify the clause under the assumption that ``literal`` is true.

        Args:
            literal: Literal known to be true

        Returns:
            Reduction with status ELIMINATED if the clause contains the
            literal, FALSIFIED if the negation was its only literal, REDUCED
            (with the shorter clause) if the negation was removed, or
            UNCHANGED (with this clause) if neither polarity occurs.
        """
        if literal in self._members:
            return Reduction(ReduceStatus.ELIMINATED)

        negation = literal.negate()
        if negation not in self._members:
            return Reduction(ReduceStatus.UNCHANGED, self)

        remaining = [lit for lit in self._literals if lit != negation]
        if not remaining:
            return Reduction(ReduceStatus.FALSIFIED)
        return Reduction(ReduceStatus.REDUCED, Clause(remaining))


class Formula:
    """
    A conjunction of clauses.

    Formulas are immutable: ``add_clause``, ``remove_clause`` and ``reduce``
    all return new formulas.
    """

    __slots__ = ("_clauses",)

    def __init__(self, clauses: Iterable[Clause] = ()):
        self._clauses: tuple[Clause, ...] = tuple(clauses)

    @classmethod
    def from_literals(cls, *clauses: Iterable[Literal]) -> Formula:
        """Build a formula from iterables of literals, one per clause."""
        return cls(Clause(lits) for lits in clauses)

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return self._clauses

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self._clauses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self._clauses == other._clauses

    def __hash__(self) -> int:
        return hash(self._clauses)

    def __repr__(self) -> str:
        return f"Formula({list(self._clauses)!r})"

    def __str__(self) -> str:
        return " ^ ".join(str(c) for c in self._clauses) or "TRUE"

    def is_empty(self) -> bool:
        """A formula without clauses is trivially satisfied."""
        return not self._clauses

    @property
    def has_empty_clause(self) -> bool:
        return any(c.is_empty() for c in self._clauses)

    @property
    def max_clause_width(self) -> int:
        return max((len(c) for c in self._clauses), default=0)

    def variables(self) -> list[Variable]:
        """Variables in order of first appearance."""
        seen: dict[Variable, None] = {}
        for clause in self._clauses:
            for lit in clause:
                seen.setdefault(lit.variable)
        return list(seen)

    @property
    def num_variables(self) -> int:
        return len(self.variables())

    def add_clause(self, clause: Clause) -> Formula:
        return Formula(self._clauses + (clause,))

    def remove_clause(self, clause: Clause) -> Formula:
        """Return a formula without the first occurrence of ``clause``."""
        clauses = list(self._clauses)
        try:
            clauses.remove(clause)
        except ValueError:
            return self
        return Formula(clauses)

    def smallest_clause(self) -> Clause:
        """
        Return the clause with the fewest literals (first one on ties).

        Raises:
            ValueError: If the formula has no clauses
        """
        if not self._clauses:
            raise ValueError("Formula has no clauses")
        return min(self._clauses, key=len)

    def reduce(self, literal: Literal) -> Reduction:
        """
        Assert ``literal`` on every clause.

        Clauses satisfied by the literal are dropped and clauses containing
        its negation are shortened. Reduction stops at the first clause that
        becomes empty.

        Returns:
            Reduction with status FALSIFIED on conflict, otherwise REDUCED
            with the simplified formula.
        """
        reduced: list[Clause] = []
        for clause in self._clauses:
            outcome = clause.reduce(literal)
            if outcome.status is ReduceStatus.FALSIFIED:
                return outcome
            if outcome.status is ReduceStatus.ELIMINATED:
                continue
            reduced.append(outcome.result)
        return Reduction(ReduceStatus.REDUCED, Formula(reduced))
