"""Tests for the Hypercover MCP server tools and resources."""

from __future__ import annotations

import pytest

from hypercover.mcp import server as mcp_server
from hypercover.mcp.server import (
    approx_hitting_set,
    enumerate_hitting_sets,
    get_stats,
    greedy_cover,
    guide_resource,
    hitting_set_exists,
    invert_hypergraph,
    is_cover,
    is_hitting_set,
    mcp,
    minimal_hitting_sets,
    validate_hypergraph,
)

EDGES = {"A": [1, 2], "B": [2, 3]}
SHIFTS = {
    "mon": ["alice", "bob"],
    "tue": ["bob", "carol"],
    "wed": ["carol", "dave"],
    "thu": ["dave", "alice"],
    "fri": ["erin"],
}


@pytest.fixture(autouse=True)
def _clear_max_steps(monkeypatch):
    """Run every test without an inherited step cap."""
    monkeypatch.delenv("HYPERCOVER_MAX_STEPS", raising=False)


class TestExactTools:
    def test_minimal_hitting_sets(self):
        result = minimal_hitting_sets(edges=EDGES)
        assert result == {"found": True, "size": 1, "count": 1, "sets": [[2]]}

    def test_minimal_hitting_sets_none(self):
        result = minimal_hitting_sets(edges={"A": []})
        assert result["found"] is False
        assert result["size"] is None
        assert result["sets"] == []

    def test_hitting_set_exists(self):
        assert hitting_set_exists(edges=EDGES, k=1) == {"k": 1, "exists": True}
        assert hitting_set_exists(edges=EDGES, k=0) == {"k": 0, "exists": False}

    def test_hitting_set_exists_negative_budget(self):
        result = hitting_set_exists(edges=EDGES, k=-1)
        assert result["error"] is True
        assert "PreconditionError" in result["message"]

    def test_enumerate_hitting_sets(self):
        result = enumerate_hitting_sets(edges={"A": [1, 2], "B": [3, 4]}, k=2)
        assert result["count"] == 4
        assert result["sets"] == [[1, 3], [1, 4], [2, 3], [2, 4]]

    def test_enumerate_unbounded(self):
        result = enumerate_hitting_sets(edges=SHIFTS)
        assert result["k"] is None
        assert ["alice", "carol", "erin"] in result["sets"]


class TestGreedyTools:
    def test_greedy_cover(self):
        result = greedy_cover(edges={"A": [1, 2, 3], "B": [1], "C": [2], "D": [3]})
        assert result == {"edges": ["A"], "size": 1, "complete": True, "uncovered": []}

    def test_approx_hitting_set(self):
        result = approx_hitting_set(edges=EDGES)
        assert result == {"vertices": [2], "size": 1}


class TestCheckTools:
    def test_is_hitting_set(self):
        assert is_hitting_set(edges=EDGES, vertices=[2]) == {"hitting_set": True}
        assert is_hitting_set(edges=EDGES, vertices=[1]) == {"hitting_set": False}

    def test_is_cover(self):
        assert is_cover(edges=EDGES, edge_ids=["A", "B"]) == {"cover": True}
        assert is_cover(edges=EDGES, edge_ids=["A"]) == {"cover": False}

    def test_is_cover_unknown_edge(self):
        result = is_cover(edges=EDGES, edge_ids=["Z"])
        assert result["error"] is True
        assert "unknown edge ids" in result["message"]

    def test_invert_hypergraph(self):
        result = invert_hypergraph(edges=EDGES)
        assert result == {
            "incidence": [
                {"vertex": 1, "edges": ["A"]},
                {"vertex": 2, "edges": ["A", "B"]},
                {"vertex": 3, "edges": ["B"]},
            ]
        }

    def test_get_stats(self):
        result = get_stats(edges=EDGES)
        assert result["edge_count"] == 2
        assert result["vertex_count"] == 3
        assert result["max_edge_size"] == 2

    def test_validate_hypergraph(self):
        result = validate_hypergraph(edges={"A": ["A"], "B": []})
        assert result["valid"] is False
        assert len(result["errors"]) == 1
        assert len(result["warnings"]) == 1

    def test_domain_collision_rejected_by_solvers(self):
        result = minimal_hitting_sets(edges={"A": ["A", "B"]})
        assert result["error"] is True
        assert "PreconditionError" in result["message"]

    def test_malformed_edges(self):
        result = minimal_hitting_sets(edges={"A": [[1, 2]]})
        assert result["error"] is True


class TestConfiguration:
    def test_max_steps_from_env(self, monkeypatch):
        monkeypatch.setenv("HYPERCOVER_MAX_STEPS", "3")
        result = minimal_hitting_sets(edges=SHIFTS)
        assert result["error"] is True
        assert "SearchLimitExceeded" in result["message"]

    def test_max_steps_unset(self):
        assert mcp_server._max_steps() is None

    def test_max_steps_empty(self, monkeypatch):
        monkeypatch.setenv("HYPERCOVER_MAX_STEPS", "")
        assert mcp_server._max_steps() is None

    def test_max_steps_invalid(self, monkeypatch):
        monkeypatch.setenv("HYPERCOVER_MAX_STEPS", "0")
        with pytest.raises(ValueError, match="positive integer"):
            mcp_server._max_steps()

    def test_tool_errors_are_logged(self, caplog):
        is_cover(edges=EDGES, edge_ids=["Z"])
        assert any("Tool is_cover failed" in r.getMessage() for r in caplog.records)


class TestResources:
    def test_guide(self):
        text = guide_resource()
        assert "# Hypercover" in text
        assert "HYPERCOVER_MAX_STEPS" in text

    def test_server_name(self):
        assert mcp.name == "Hypercover"
