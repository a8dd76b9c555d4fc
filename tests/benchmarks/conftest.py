"""Benchmark fixtures for hitting set and set cover performance tests."""

import random

import pytest

from hypercover.engine import Hypergraph


def generate_random_hypergraph(
    num_vertices: int,
    num_edges: int,
    avg_cardinality: float = 2.5,
    seed: int = 42,
) -> Hypergraph:
    """Generate a random hypergraph for benchmarking.

    Args:
        num_vertices: Number of distinct vertices to draw from
        num_edges: Number of edges to create
        avg_cardinality: Average number of vertices per edge
        seed: Random seed for reproducibility

    Returns:
        Hypergraph with edges "edge_0" .. and integer vertices
    """
    rng = random.Random(seed)
    vertices = list(range(num_vertices))
    edges = {}

    for i in range(num_edges):
        # Cardinality from 1 to about avg*2, centered around avg
        cardinality = max(1, int(rng.gauss(avg_cardinality, avg_cardinality / 2)))
        cardinality = min(cardinality, num_vertices)
        edges[f"edge_{i}"] = rng.sample(vertices, cardinality)

    return Hypergraph(edges)


@pytest.fixture
def graph_small():
    """30 vertices, 12 edges - exact search stays fast."""
    return generate_random_hypergraph(num_vertices=30, num_edges=12, avg_cardinality=3.0)


@pytest.fixture
def graph_1k():
    """1K vertices, 5K edges - greedy benchmark graph."""
    return generate_random_hypergraph(num_vertices=1000, num_edges=5000, avg_cardinality=4.0)


@pytest.fixture
def graph_10k():
    """10K vertices, 20K edges - larger greedy benchmark graph."""
    return generate_random_hypergraph(num_vertices=10000, num_edges=20000, avg_cardinality=5.0)
