"""Greedy set cover and the hitting set approximation built on it.

Standard ln(n)-approximation: always take the edge covering the most
still-uncovered vertices. No exactness guarantee.
"""

import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

from .core import Hypergraph, invert

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Hashable)


def greedy_cover(h: Mapping[E, Iterable[V]]) -> set[E]:
    """Build a cover of ``h`` greedily.

    Ties go to the edge that comes first in iteration order. If at some
    point no edge covers any remaining vertex, the partial cover built so far
    is returned and a warning is logged.

    Args:
        h: Hypergraph to cover

    Returns:
        Set of chosen edge ids
    """
    h = Hypergraph.coerce(h)
    uncovered = set(h.vertices)
    cover: set[E] = set()

    while uncovered:
        best_id = None
        best_gain = 0
        for edge_id, members in h.items():
            if edge_id in cover:
                continue
            gain = len(members & uncovered)
            if gain > best_gain:
                best_id, best_gain = edge_id, gain

        if best_id is None:
            logger.warning(
                "Greedy cover is partial: %d vertices cannot be covered", len(uncovered)
            )
            break

        logger.debug("Greedy pick %r covers %d new vertices", best_id, best_gain)
        cover.add(best_id)
        uncovered -= h[best_id]

    return cover


def approx_hitting_set(h: Mapping[E, Iterable[V]]) -> set[V]:
    """Approximate a small hitting set as a greedy cover of the inversion.

    Edges of ``invert(h)`` are the vertices of ``h``, so the cover found is
    a vertex set of ``h`` that hits every non-empty edge.

    Returns:
        Set of vertices; a true hitting set whenever ``h`` has no empty edges
    """
    return greedy_cover(invert(h))
