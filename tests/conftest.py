"""Shared fixtures for Hypercover tests."""

import pytest

from hypercover import Hypercover, Hypergraph


@pytest.fixture()
def overlapping():
    """Two edges sharing vertex 2: the single minimum hitting set is {2}."""
    return Hypergraph({"A": {1, 2}, "B": {2, 3}})


@pytest.fixture()
def disjoint():
    """Two disjoint edges: every minimum hitting set picks one vertex from each."""
    return Hypergraph({"A": {1, 2}, "B": {3, 4}})


@pytest.fixture()
def star():
    """One big edge plus three singletons; greedy picks "A" and stops."""
    return Hypergraph({"A": {1, 2, 3}, "B": {1}, "C": {2}, "D": {3}})


@pytest.fixture()
def staffing():
    """A shift-coverage hypergraph: edges are shifts, vertices are staff who can work them.

    Edges (5):
        mon: alice, bob
        tue: bob, carol
        wed: carol, dave
        thu: dave, alice
        fri: erin

    Minimum hitting sets have size 3: erin plus a vertex cover of the
    4-cycle alice-bob-carol-dave, i.e. {alice, carol} or {bob, dave}.
    """
    return Hypergraph(
        {
            "mon": {"alice", "bob"},
            "tue": {"bob", "carol"},
            "wed": {"carol", "dave"},
            "thu": {"dave", "alice"},
            "fri": {"erin"},
        }
    )


@pytest.fixture()
def hc(staffing):
    """Client over the staffing hypergraph."""
    return Hypercover(staffing)
