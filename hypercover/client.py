"""Hypercover client — the primary interface for solving hitting set and cover problems."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from hypercover.engine.core import Hypergraph, invert, is_cover, is_hitting_set
from hypercover.engine.greedy import approx_hitting_set, greedy_cover
from hypercover.engine.search import (
    enumerate_hitting_sets,
    hitting_set_exists,
    minimum_hitting_set_size,
)
from hypercover.models import CoverResult, HittingSetResult, HypergraphStats, ValidationResult

# --- Conversion helpers: engine sets <-> pydantic models ---


def stable_sorted(values: Iterable[Hashable]) -> list[Any]:
    """Sort values naturally, falling back to repr order for mixed types."""
    values = list(values)
    try:
        return sorted(values)
    except TypeError:
        return sorted(values, key=repr)


def _sets_to_model(
    sets: Iterable[frozenset], *, size: int | None, exact: bool = True
) -> HittingSetResult:
    ordered = sorted((stable_sorted(s) for s in sets), key=lambda s: (len(s), repr(s)))
    return HittingSetResult(size=size, sets=ordered, exact=exact)


class Hypercover:
    """A hitting set / set cover solver bound to one hypergraph.

    The hypergraph is frozen at construction; every method is a pure
    computation over it.

    Example:
        ```python
        hc = Hypercover({"A": {1, 2}, "B": {2, 3}})
        hc.minimal_hitting_sets().sets   # [[2]]
        hc.greedy_cover().edges          # ['A', 'B']
        ```

    Args:
        edges: Mapping of edge id to an iterable of vertices
        strict: Reject hypergraphs whose edge ids also occur as vertices
        max_steps: Default cap on expanded frames for each exhaustive search

    Raises:
        PreconditionError: If the input is malformed, or (with ``strict``)
            the edge id and vertex domains overlap
    """

    def __init__(
        self,
        edges: Mapping[Any, Iterable[Any]] | Hypergraph | None = None,
        *,
        strict: bool = True,
        max_steps: int | None = None,
    ) -> None:
        self._graph = Hypergraph.coerce(edges if edges is not None else {})
        if strict:
            self._graph.check_domains()
        self._max_steps = max_steps

    def __repr__(self) -> str:
        return f"Hypercover({len(self._graph)} edges, {len(self._graph.vertices)} vertices)"

    @property
    def graph(self) -> Hypergraph:
        """The underlying immutable hypergraph."""
        return self._graph

    @property
    def max_steps(self) -> int | None:
        return self._max_steps

    def invert(self) -> Hypercover:
        """Return a client over the inverted hypergraph (vertex -> edge ids)."""
        return Hypercover(invert(self._graph), strict=False, max_steps=self._max_steps)

    # --- Membership ---

    def is_hitting_set(self, vertices: Iterable[Any]) -> bool:
        """Check that ``vertices`` intersects every edge."""
        return is_hitting_set(self._graph, vertices)

    def is_cover(self, edge_ids: Iterable[Any]) -> bool:
        """Check that the named edges cover every vertex.

        Raises:
            PreconditionError: If an edge id is not in the hypergraph
        """
        return is_cover(self._graph, edge_ids)

    # --- Exhaustive search ---

    def hitting_set_exists(self, k: int) -> bool:
        """Check for a hitting set within budget ``k``.

        Exact at or below the minimum size only; larger budgets may miss
        hitting sets that exist.
        """
        return hitting_set_exists(self._graph, k, max_steps=self._max_steps)

    def hitting_sets(self, k: int | None = None) -> HittingSetResult:
        """Enumerate the distinct hitting sets reachable within budget ``k``.

        Args:
            k: Size budget, or None for no depth bound

        Returns:
            A ``HittingSetResult``. ``size`` is set only when all sets
            found share one cardinality.
        """
        found = enumerate_hitting_sets(self._graph, k, max_steps=self._max_steps)
        sizes = {len(s) for s in found}
        return _sets_to_model(found, size=sizes.pop() if len(sizes) == 1 else None)

    def minimum_size(self) -> int | None:
        """Minimum hitting set cardinality, or None if no hitting set exists."""
        return minimum_hitting_set_size(self._graph, max_steps=self._max_steps)

    def minimal_hitting_sets(self) -> HittingSetResult:
        """All minimum-cardinality hitting sets.

        Returns:
            A ``HittingSetResult`` whose ``size`` is the minimum, or None
            with no sets when the hypergraph has an empty edge.
        """
        size = self.minimum_size()
        if size is None:
            return HittingSetResult(size=None, sets=[])
        found = enumerate_hitting_sets(self._graph, size, max_steps=self._max_steps)
        return _sets_to_model(found, size=size)

    # --- Greedy approximation ---

    def greedy_cover(self) -> CoverResult:
        """Greedy set cover of the hypergraph's vertices.

        Returns:
            A ``CoverResult``; ``complete`` is False if vertices remain uncovered.
        """
        chosen = greedy_cover(self._graph)
        covered: set[Any] = set()
        for edge_id in chosen:
            covered.update(self._graph[edge_id])
        uncovered = self._graph.vertices - covered
        return CoverResult(
            edges=stable_sorted(chosen),
            complete=not uncovered,
            uncovered=stable_sorted(uncovered),
        )

    def approx_hitting_set(self) -> HittingSetResult:
        """A small, not necessarily minimum, hitting set from the greedy heuristic."""
        found = approx_hitting_set(self._graph)
        return _sets_to_model([frozenset(found)], size=len(found), exact=False)

    # --- Stats ---

    def stats(self) -> HypergraphStats:
        """Get edge/vertex counts and edge size extremes."""
        s = self._graph.stats()
        return HypergraphStats(
            edge_count=s["num_edges"],
            vertex_count=s["num_vertices"],
            min_edge_size=s["min_edge_size"],
            max_edge_size=s["max_edge_size"],
            empty_edges=s.get("empty_edges", []),
        )

    def validate(self) -> ValidationResult:
        """Check the hypergraph against the solvers' preconditions.

        Returns:
            A ``ValidationResult`` with ``valid``, ``errors``, and ``warnings`` fields.
        """
        result = self._graph.validate()
        return ValidationResult(
            valid=result["valid"],
            errors=result.get("errors", []),
            warnings=result.get("warnings", []),
        )
