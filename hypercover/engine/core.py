"""Core hypergraph data structures and membership checks.

A hypergraph here is an immutable mapping from edge ids to frozen vertex
sets. Vertices and edge ids are arbitrary hashable values supplied by the
caller; nothing else about them is assumed.

Inversion swaps the two roles: the inverted hypergraph maps each vertex to
the set of edges containing it. A hitting set of ``h`` is exactly a cover of
``invert(h)`` read in the dual domain, which is what the greedy hitting set
approximation relies on.

Thread Safety:
    Hypergraph instances are never mutated after construction, so they can
    be shared between threads for any of the read-only operations in this
    package without locking.

References:
- Berge: "Hypergraphs: Combinatorics of Finite Sets" (1989)
- Karp: "Reducibility Among Combinatorial Problems" (1972)
"""

from collections import defaultdict
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Hashable)


class HypercoverError(Exception):
    """Base class for all errors raised by hypercover."""


class PreconditionError(HypercoverError, ValueError):
    """Input violates a documented precondition.

    Raised for malformed hypergraphs (unhashable vertices, colliding vertex
    and edge id domains), covers naming unknown edges, and invalid budgets.
    """


class SearchLimitExceeded(HypercoverError, RuntimeError):
    """The exhaustive search popped more frames than its ``max_steps`` allowed.

    Attributes:
        steps: Number of frames expanded before giving up
    """

    def __init__(self, steps: int) -> None:
        super().__init__(f"Search aborted after {steps} steps (max_steps exceeded)")
        self.steps = steps


class Hypergraph(Mapping, Generic[E, V]):
    """An immutable mapping from edge id to a frozenset of vertices.

    Empty edges are allowed. They make every hitting set search fail, which
    is a legitimate "no hitting set" answer rather than an error.

    Each edge also remembers the order its vertices were first given in
    (see ``ordered``), so anything that walks vertices, like ``invert``,
    does not depend on hash order.

    Attributes:
        vertices: Union of all edge vertex sets

    Raises:
        PreconditionError: If ``edges`` is not a mapping, or an edge is a
            string or mapping, or holds an unhashable vertex
    """

    __slots__ = ("_edges", "_order", "_vertices")

    def __init__(self, edges: Mapping[E, Iterable[V]] | None = None) -> None:
        if edges is None:
            edges = {}
        if not isinstance(edges, Mapping):
            raise PreconditionError(
                f"Hypergraph edges must be a mapping, got: {type(edges).__name__}"
            )
        frozen: dict[E, frozenset[V]] = {}
        order: dict[E, tuple[V, ...]] = {}
        for edge_id, members in edges.items():
            if isinstance(members, (str, bytes)):
                raise PreconditionError(
                    f"Edge {edge_id!r} must be a collection of vertices, got a string"
                )
            if isinstance(members, Mapping):
                raise PreconditionError(
                    f"Edge {edge_id!r} must be a collection of vertices, got a mapping"
                )
            try:
                order[edge_id] = tuple(dict.fromkeys(members))
            except TypeError as exc:
                raise PreconditionError(
                    f"Edge {edge_id!r} contains an unhashable vertex or is not iterable"
                ) from exc
            frozen[edge_id] = frozenset(order[edge_id])
        self._edges = frozen
        self._order = order
        self._vertices: frozenset[V] | None = None

    @classmethod
    def coerce(cls, h: "Mapping[E, Iterable[V]] | Hypergraph[E, V]") -> "Hypergraph[E, V]":
        """Return ``h`` unchanged if it is already a Hypergraph, else build one."""
        if isinstance(h, Hypergraph):
            return h
        return cls(h)

    def __getitem__(self, edge_id: E) -> frozenset[V]:
        return self._edges[edge_id]

    def __iter__(self) -> Iterator[E]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        body = ", ".join(
            f"{e!r}: {{{', '.join(map(repr, vs))}}}" for e, vs in self._order.items()
        )
        return f"Hypergraph({{{body}}})"

    def ordered(self, edge_id: E) -> tuple[V, ...]:
        """Vertices of an edge in the order they were first given."""
        return self._order[edge_id]

    @property
    def vertices(self) -> frozenset[V]:
        """All vertices appearing in at least one edge."""
        if self._vertices is None:
            self._vertices = frozenset().union(*self._edges.values())
        return self._vertices

    def edge_sizes(self) -> dict[E, int]:
        """Number of vertices in each edge."""
        return {edge_id: len(members) for edge_id, members in self._edges.items()}

    def empty_edges(self) -> list[E]:
        """Edge ids with no vertices, in insertion order."""
        return [edge_id for edge_id, members in self._edges.items() if not members]

    def domain_collisions(self) -> set[Any]:
        """Values used both as an edge id and as a vertex."""
        return set(self._edges).intersection(self.vertices)

    def check_domains(self) -> None:
        """Raise PreconditionError if the edge id and vertex domains overlap.

        Overlapping domains break the inversion round-trip, and with it the
        hitting set / cover duality.
        """
        collisions = self.domain_collisions()
        if collisions:
            raise PreconditionError(
                f"Values used both as edge id and vertex: {sorted(map(repr, collisions))}"
            )

    # ========== Statistics & Validation ==========

    def stats(self) -> dict[str, Any]:
        """Get hypergraph statistics.

        Returns:
            Dict with num_edges, num_vertices, min_edge_size, max_edge_size
            and empty_edges (list of edge ids)
        """
        sizes = list(self.edge_sizes().values())
        return {
            "num_edges": len(self._edges),
            "num_vertices": len(self.vertices),
            "min_edge_size": min(sizes, default=0),
            "max_edge_size": max(sizes, default=0),
            "empty_edges": self.empty_edges(),
        }

    def validate(self) -> dict[str, Any]:
        """Check the hypergraph against the solvers' preconditions.

        Checks for:
        - Values used both as an edge id and as a vertex (error)
        - Empty edges, which no vertex set can hit (warning)

        Returns:
            Dict with 'valid' (bool), 'errors' and 'warnings' (lists of str)
        """
        errors: list[str] = []
        warnings: list[str] = []

        for value in self.domain_collisions():
            errors.append(f"Value {value!r} is used both as an edge id and as a vertex")

        for edge_id in self.empty_edges():
            warnings.append(f"Edge {edge_id!r} is empty; no hitting set exists")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "warnings": warnings,
        }


def invert(h: Mapping[E, Iterable[V]]) -> Hypergraph[V, E]:
    """Swap the roles of vertices and edges.

    The result maps each vertex of ``h`` to the set of edge ids containing
    it. Empty edges have no vertices and therefore vanish from the result.
    Vertices appear in the order they are first met walking ``h`` edge by
    edge, so the result's iteration order is independent of hashing.

    Args:
        h: Hypergraph (or any mapping of edge id to vertices)

    Returns:
        The inverted hypergraph
    """
    h = Hypergraph.coerce(h)
    incidence: dict[V, list[E]] = defaultdict(list)
    for edge_id in h:
        for vertex in h.ordered(edge_id):
            incidence[vertex].append(edge_id)
    return Hypergraph(incidence)


def _as_candidate(s: Iterable[Any]) -> frozenset[Any]:
    try:
        return frozenset(s)
    except TypeError as exc:
        raise PreconditionError("Candidate set must be an iterable of hashable values") from exc


def is_hitting_set(h: Mapping[E, Iterable[V]], s: Iterable[V]) -> bool:
    """True if ``s`` intersects every edge of ``h``.

    Vacuously true when ``h`` has no edges. Says nothing about minimality.
    Vertices in ``s`` that do not occur in ``h`` are simply ignored.
    """
    h = Hypergraph.coerce(h)
    candidate = _as_candidate(s)
    return all(not members.isdisjoint(candidate) for members in h.values())


def is_cover(h: Mapping[E, Iterable[V]], s: Iterable[E]) -> bool:
    """True if the edges named in ``s`` together contain every vertex of ``h``.

    Raises:
        PreconditionError: If ``s`` names an edge id that is not in ``h``
    """
    h = Hypergraph.coerce(h)
    candidate = _as_candidate(s)
    unknown = [edge_id for edge_id in candidate if edge_id not in h]
    if unknown:
        raise PreconditionError(f"Cover references unknown edge ids: {unknown!r}")
    covered: set[V] = set()
    for edge_id in candidate:
        covered.update(h[edge_id])
    return covered == h.vertices
