"""
Implication graph over literals and its strongly connected components.

A binary clause (a v b) is equivalent to the implications ~a -> b and
~b -> a; a unit clause (a) contributes ~a -> a. Every variable owns two
vertices with dense IDs: 2*i for its positive literal and 2*i + 1 for its
negative literal, so the negation of vertex v is v ^ 1.

Components are computed with Kosaraju's algorithm. Both depth-first passes
are iterative and each keeps its own visitation array, so deep implication
chains do not hit the interpreter's recursion limit.
"""

import logging
from dataclasses import dataclass

import numpy as np

from satengine.formula import Clause, Formula, Literal, Variable
from satengine.utils.exceptions import InvalidClauseError

logger = logging.getLogger(__name__)

UNVISITED = -1


def negation_id(vertex: int) -> int:
    return vertex ^ 1


@dataclass
class ComponentDecomposition:
    """
    Strongly connected components of an implication graph.

    Attributes:
        components: Vertex lists, in topological order of the condensation
            (a component only has edges to components listed after it).
        component_of: Component index of every vertex.
    """

    components: list[list[int]]
    component_of: np.ndarray

    def __len__(self) -> int:
        return len(self.components)

    def contradictions(self) -> list[int]:
        """Indices of variables whose two literals share a component."""
        positive = self.component_of[0::2]
        negative = self.component_of[1::2]
        return [int(i) for i in np.flatnonzero(positive == negative)]


class ImplicationGraph:
    """Directed graph whose vertices are literals."""

    MAX_CLAUSE_WIDTH = 2

    def __init__(self):
        self._variables: list[Variable] = []
        self._index: dict[Variable, int] = {}
        self._adjacency: list[list[int]] = []
        self._edges: set[tuple[int, int]] = set()

    @classmethod
    def from_formula(cls, formula: Formula) -> "ImplicationGraph":
        """
        Build the implication graph of a formula with clauses of width <= 2.

        Raises:
            InvalidClauseError: If a clause is empty or wider than two literals
        """
        graph = cls()
        for clause in formula:
            graph.add_clause(clause)
        logger.debug(
            "Built implication graph: %d vertices, %d edges",
            graph.num_vertices,
            graph.num_edges,
        )
        return graph

    @property
    def num_vertices(self) -> int:
        return len(self._adjacency)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def variables(self) -> list[Variable]:
        return list(self._variables)

    def variable(self, index: int) -> Variable:
        return self._variables[index]

    def add_vertex(self, literal: Literal) -> int:
        """Make sure both literals of ``literal``'s variable are vertices."""
        index = self._index.get(literal.variable)
        if index is None:
            index = len(self._variables)
            self._index[literal.variable] = index
            self._variables.append(literal.variable)
            self._adjacency.append([])
            self._adjacency.append([])
        return 2 * index if literal.positive else 2 * index + 1

    def vertex_id(self, literal: Literal) -> int:
        """
        Raises:
            KeyError: If the literal's variable is not in the graph
        """
        index = self._index[literal.variable]
        return 2 * index if literal.positive else 2 * index + 1

    def literal(self, vertex: int) -> Literal:
        return Literal(self._variables[vertex >> 1], vertex & 1 == 0)

    def add_edge(self, source: Literal, target: Literal) -> None:
        """Add the implication ``source -> target``; repeated edges are ignored."""
        u = self.add_vertex(source)
        v = self.add_vertex(target)
        if (u, v) not in self._edges:
            self._edges.add((u, v))
            self._adjacency[u].append(v)

    def add_clause(self, clause: Clause) -> None:
        if clause.is_empty():
            raise InvalidClauseError("Empty clause has no implications")
        if len(clause) > self.MAX_CLAUSE_WIDTH:
            raise InvalidClauseError(
                "Clause too wide for the implication graph",
                clause=clause,
                max_width=self.MAX_CLAUSE_WIDTH,
            )

        if len(clause) == 1:
            # (a) == (a v a): ~a -> a
            (lit,) = clause.literals
            self.add_edge(lit.negate(), lit)
        else:
            first, second = clause.literals
            self.add_edge(first.negate(), second)
            self.add_edge(second.negate(), first)

    def successors(self, vertex: int) -> list[int]:
        return list(self._adjacency[vertex])

    def has_edge(self, source: Literal, target: Literal) -> bool:
        try:
            return (self.vertex_id(source), self.vertex_id(target)) in self._edges
        except KeyError:
            return False

    def transpose(self) -> list[list[int]]:
        """Adjacency lists with every edge reversed."""
        reversed_adjacency: list[list[int]] = [[] for _ in range(self.num_vertices)]
        for u, neighbours in enumerate(self._adjacency):
            for v in neighbours:
                reversed_adjacency[v].append(u)
        return reversed_adjacency

    def finish_order(self) -> list[int]:
        """
        First Kosaraju pass: depth-first search over every vertex.

        Returns:
            Vertices in post-order; each vertex appears once, after all the
            vertices it discovered.
        """
        visited = np.zeros(self.num_vertices, dtype=bool)
        order: list[int] = []

        for root in range(self.num_vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, iter(self._adjacency[root]))]
            while stack:
                vertex, neighbours = stack[-1]
                for w in neighbours:
                    if not visited[w]:
                        visited[w] = True
                        stack.append((w, iter(self._adjacency[w])))
                        break
                else:
                    stack.pop()
                    order.append(vertex)

        return order

    def strongly_connected_components(self) -> ComponentDecomposition:
        """
        Second Kosaraju pass over the transposed graph.

        Vertices are taken from the finish-order stack, latest finisher first;
        each one not yet in a component roots a new component made of
        everything it reaches in the transposed graph.
        """
        finish_stack = self.finish_order()
        transposed = self.transpose()
        component_of = np.full(self.num_vertices, UNVISITED, dtype=np.int64)
        components: list[list[int]] = []

        while finish_stack:
            root = finish_stack.pop()
            if component_of[root] != UNVISITED:
                continue

            index = len(components)
            component_of[root] = index
            members = [root]
            pending = [root]
            while pending:
                vertex = pending.pop()
                for w in transposed[vertex]:
                    if component_of[w] == UNVISITED:
                        component_of[w] = index
                        members.append(w)
                        pending.append(w)
            components.append(members)

        return ComponentDecomposition(components, component_of)
