"""Exhaustive branch-and-bound search for minimum hitting sets.

The search branches on one edge at a time: pick the smallest remaining edge,
try each of its vertices, drop every edge that vertex hits, and spend one
unit of budget. A branch succeeds when no edges remain and fails when the
budget runs out or it meets an empty edge.

The work is driven by an explicit LIFO stack of ``(remaining, budget,
partial)`` frames instead of native recursion, so depth is limited only by
memory. Frames are expanded depth-first in the same order recursion would.

Caveat:
    Each level consumes exactly one unit of budget and never pads a result
    with extra vertices. Results are therefore complete only when the budget
    equals the minimum hitting set size. Below the minimum the search
    correctly reports nothing; above it, hitting sets may be missed.
"""

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import TypeVar

from .core import Hypergraph, PreconditionError, SearchLimitExceeded

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Hashable)

_Frame = tuple[tuple[frozenset, ...], int, frozenset]


def _check_budget(k: int) -> None:
    if isinstance(k, bool) or not isinstance(k, int):
        raise PreconditionError(f"Budget must be a non-negative integer, got: {k!r}")
    if k < 0:
        raise PreconditionError(f"Budget must be a non-negative integer, got: {k}")


def _solve(
    edges: tuple[frozenset[V], ...],
    budget: int,
    max_steps: int | None = None,
) -> Iterator[frozenset[V]]:
    """Yield the partial vertex set of every successful branch.

    The same set may be yielded more than once when different vertex
    orderings converge on it; callers deduplicate.

    Raises:
        SearchLimitExceeded: If more than ``max_steps`` frames are expanded
    """
    stack: list[_Frame] = [(edges, budget, frozenset())]
    steps = 0
    try:
        while stack:
            remaining, left, partial = stack.pop()
            steps += 1
            if max_steps is not None and steps > max_steps:
                raise SearchLimitExceeded(max_steps)

            if not remaining:
                yield partial
                continue
            if left == 0:
                continue

            # min() keeps the first of equally small edges, so branching follows input order
            edge = min(remaining, key=len)
            if not edge:
                continue

            # Push in reverse so the first vertex is expanded first
            for vertex in reversed(list(edge)):
                reduced = tuple(e for e in remaining if vertex not in e)
                stack.append((reduced, left - 1, partial | {vertex}))
    finally:
        # Also runs when a caller stops early and closes the generator
        logger.debug("Search with budget %d finished after %d steps", budget, steps)


def hitting_set_exists(
    h: Mapping[E, Iterable[V]],
    k: int,
    *,
    max_steps: int | None = None,
) -> bool:
    """Check whether the search finds a hitting set within budget ``k``.

    Stops at the first success. Exact for ``k`` at or below the minimum
    hitting set size; see the module caveat for larger ``k``.

    Args:
        h: Hypergraph to search
        k: Non-negative size budget
        max_steps: Optional cap on expanded search frames

    Returns:
        True if some branch succeeds

    Raises:
        PreconditionError: If ``k`` is not a non-negative integer
        SearchLimitExceeded: If ``max_steps`` is exceeded
    """
    _check_budget(k)
    h = Hypergraph.coerce(h)
    search = _solve(tuple(h.values()), k, max_steps)
    try:
        return next(search, None) is not None
    finally:
        search.close()


def enumerate_hitting_sets(
    h: Mapping[E, Iterable[V]],
    k: int | None = None,
    *,
    max_steps: int | None = None,
) -> set[frozenset[V]]:
    """Collect the distinct hitting sets reached by the search.

    Args:
        h: Hypergraph to search
        k: Size budget. ``None`` uses the number of edges, which never
            limits branching depth since each level removes at least one edge.
        max_steps: Optional cap on expanded search frames

    Returns:
        Set of frozensets of vertices; empty if nothing is found

    Raises:
        PreconditionError: If ``k`` is given and is not a non-negative integer
        SearchLimitExceeded: If ``max_steps`` is exceeded
    """
    h = Hypergraph.coerce(h)
    if k is None:
        k = len(h)
    else:
        _check_budget(k)
    results = set(_solve(tuple(h.values()), k, max_steps))
    logger.debug("Enumerated %d distinct hitting sets with budget %d", len(results), k)
    return results


def minimum_hitting_set_size(
    h: Mapping[E, Iterable[V]],
    *,
    max_steps: int | None = None,
) -> int | None:
    """Smallest budget at which a hitting set exists.

    Budgets are probed in increasing order up to the number of edges (one
    vertex per edge always suffices unless an edge is empty).

    Returns:
        The minimum cardinality, or None if ``h`` has an empty edge
    """
    h = Hypergraph.coerce(h)
    if h.empty_edges():
        return None
    for size in range(len(h) + 1):
        logger.debug("Probing hitting sets of size %d", size)
        if hitting_set_exists(h, size, max_steps=max_steps):
            return size
    return None


def minimal_hitting_sets(
    h: Mapping[E, Iterable[V]],
    *,
    max_steps: int | None = None,
) -> set[frozenset[V]]:
    """All hitting sets of minimum cardinality.

    Returns:
        Set of frozensets, each of the minimum size. ``{frozenset()}`` for a
        hypergraph with no edges, and an empty set if no hitting set exists.
    """
    h = Hypergraph.coerce(h)
    size = minimum_hitting_set_size(h, max_steps=max_steps)
    if size is None:
        return set()
    return enumerate_hitting_sets(h, size, max_steps=max_steps)
