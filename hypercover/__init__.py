"""Hypercover — minimum hitting sets and greedy set covers for hypergraphs."""

__version__ = "0.1.0"

from hypercover.client import Hypercover
from hypercover.engine import (
    Hypergraph,
    HypercoverError,
    PreconditionError,
    SearchLimitExceeded,
    approx_hitting_set,
    enumerate_hitting_sets,
    greedy_cover,
    hitting_set_exists,
    invert,
    is_cover,
    is_hitting_set,
    minimal_hitting_sets,
    minimum_hitting_set_size,
)
from hypercover.models import CoverResult, HittingSetResult, HypergraphStats, ValidationResult

__all__ = [
    "CoverResult",
    "HittingSetResult",
    "Hypercover",
    "Hypergraph",
    "HypercoverError",
    "HypergraphStats",
    "PreconditionError",
    "SearchLimitExceeded",
    "ValidationResult",
    "__version__",
    "approx_hitting_set",
    "enumerate_hitting_sets",
    "greedy_cover",
    "hitting_set_exists",
    "invert",
    "is_cover",
    "is_hitting_set",
    "minimal_hitting_sets",
    "minimum_hitting_set_size",
]
