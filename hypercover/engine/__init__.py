from hypercover.engine.core import (
    Hypergraph,
    HypercoverError,
    PreconditionError,
    SearchLimitExceeded,
    invert,
    is_cover,
    is_hitting_set,
)
from hypercover.engine.greedy import approx_hitting_set, greedy_cover
from hypercover.engine.search import (
    enumerate_hitting_sets,
    hitting_set_exists,
    minimal_hitting_sets,
    minimum_hitting_set_size,
)

__all__ = [
    "Hypergraph",
    "HypercoverError",
    "PreconditionError",
    "SearchLimitExceeded",
    "invert",
    "is_hitting_set",
    "is_cover",
    "hitting_set_exists",
    "enumerate_hitting_sets",
    "minimum_hitting_set_size",
    "minimal_hitting_sets",
    "greedy_cover",
    "approx_hitting_set",
]
