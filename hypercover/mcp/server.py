"""Hypercover MCP server — exposes hitting set and set cover solvers as tools for AI agents."""

from __future__ import annotations

import functools
import logging
import os
import sys
from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from hypercover.client import Hypercover, stable_sorted

# All logging goes to stderr — stdout is reserved for JSON-RPC
logging.basicConfig(stream=sys.stderr, level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger("hypercover.mcp")


mcp = FastMCP(
    "Hypercover",
    instructions=(
        "Hypercover solves hitting set and set cover problems on hypergraphs. "
        "Every tool takes the hypergraph as `edges`: an object mapping edge ids to lists "
        "of vertices. Edge ids must not also be used as vertices. "
        "Use minimal_hitting_sets for exact answers on small inputs (exponential time) and "
        "approx_hitting_set or greedy_cover for fast, non-minimal answers. "
        "hitting_set_exists is only exact for budgets at or below the minimum size."
    ),
)


def _max_steps() -> int | None:
    """Read the search step cap from HYPERCOVER_MAX_STEPS (unset or empty = unlimited)."""
    raw = os.environ.get("HYPERCOVER_MAX_STEPS", "").strip()
    if not raw:
        return None
    value = int(raw)
    if value < 1:
        raise ValueError(f"HYPERCOVER_MAX_STEPS must be a positive integer, got: {raw}")
    return value


def _get_client(edges: dict[str, list[Any]]) -> Hypercover:
    """Build a strict client over the given edges with the configured step cap."""
    return Hypercover(edges, max_steps=_max_steps())


def _safe_tool(fn: Callable[..., dict]) -> Callable[..., dict]:
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> dict:
        try:
            return fn(*args, **kwargs)
        except Exception as exc:
            logger.exception("Tool %s failed", fn.__name__)
            return {"error": True, "message": f"{type(exc).__name__}: {exc}"}
    return wrapper


# ===================================================================
# Exact search tools (3)
# ===================================================================


@mcp.tool()
@_safe_tool
def minimal_hitting_sets(edges: dict[str, list[Any]]) -> dict:
    """Find every minimum-cardinality hitting set of a hypergraph.

    A hitting set is a set of vertices sharing at least one vertex with every edge.
    Exponential in the worst case; keep inputs small.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
    """
    result = _get_client(edges).minimal_hitting_sets()
    return {
        "found": result.found,
        "size": result.size,
        "count": result.count,
        "sets": result.sets,
    }


@mcp.tool()
@_safe_tool
def hitting_set_exists(edges: dict[str, list[Any]], k: int) -> dict:
    """Check whether a hitting set of size at most k is found.

    Exact when k is at or below the minimum hitting set size. For larger k the
    search may report False even though a hitting set exists.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
        k: Non-negative size budget.
    """
    return {"k": k, "exists": _get_client(edges).hitting_set_exists(k)}


@mcp.tool()
@_safe_tool
def enumerate_hitting_sets(edges: dict[str, list[Any]], k: int | None = None) -> dict:
    """List the distinct hitting sets the bounded search reaches within budget k.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
        k: Optional size budget. Omit to search without a depth bound.
    """
    result = _get_client(edges).hitting_sets(k)
    return {"k": k, "count": result.count, "sets": result.sets}


# ===================================================================
# Greedy tools (2)
# ===================================================================


@mcp.tool()
@_safe_tool
def greedy_cover(edges: dict[str, list[Any]]) -> dict:
    """Build a set cover greedily: repeatedly pick the edge covering most uncovered vertices.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
    """
    result = _get_client(edges).greedy_cover()
    return {
        "edges": result.edges,
        "size": result.size,
        "complete": result.complete,
        "uncovered": result.uncovered,
    }


@mcp.tool()
@_safe_tool
def approx_hitting_set(edges: dict[str, list[Any]]) -> dict:
    """Find a small (not necessarily minimum) hitting set quickly.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
    """
    result = _get_client(edges).approx_hitting_set()
    return {"vertices": result.sets[0], "size": result.size}


# ===================================================================
# Checks and utilities (5)
# ===================================================================


@mcp.tool()
@_safe_tool
def is_hitting_set(edges: dict[str, list[Any]], vertices: list[Any]) -> dict:
    """Check whether the given vertices intersect every edge.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
        vertices: Candidate hitting set.
    """
    return {"hitting_set": _get_client(edges).is_hitting_set(vertices)}


@mcp.tool()
@_safe_tool
def is_cover(edges: dict[str, list[Any]], edge_ids: list[str]) -> dict:
    """Check whether the given edges together contain every vertex.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
        edge_ids: Candidate cover. Every id must exist in edges.
    """
    return {"cover": _get_client(edges).is_cover(edge_ids)}


@mcp.tool()
@_safe_tool
def invert_hypergraph(edges: dict[str, list[Any]]) -> dict:
    """Swap vertices and edges: list, for each vertex, the edges containing it.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
    """
    inverted = _get_client(edges).invert().graph
    return {
        "incidence": [
            {"vertex": vertex, "edges": stable_sorted(inverted[vertex])}
            for vertex in stable_sorted(inverted)
        ]
    }


@mcp.tool()
@_safe_tool
def get_stats(edges: dict[str, list[Any]]) -> dict:
    """Get edge and vertex counts and edge size extremes.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
    """
    return Hypercover(edges, strict=False).stats().model_dump()


@mcp.tool()
@_safe_tool
def validate_hypergraph(edges: dict[str, list[Any]]) -> dict:
    """Check a hypergraph for domain collisions and empty edges.

    Args:
        edges: Mapping of edge id to the list of vertices in that edge.
    """
    return Hypercover(edges, strict=False).validate().model_dump()


# ===================================================================
# Resources (1)
# ===================================================================


@mcp.resource("hypercover://guide")
def guide_resource() -> str:
    """Hypercover problem reference."""
    return (
        "# Hypercover\n\n"
        "## Hypergraph\n"
        "An object mapping edge ids (strings) to lists of vertices. "
        "Edges may be empty; an empty edge means no hitting set exists.\n\n"
        "## Hitting set\n"
        "A set of vertices sharing at least one vertex with every edge. "
        "`minimal_hitting_sets` returns all of minimum size.\n\n"
        "## Set cover\n"
        "A set of edge ids whose vertices together include every vertex. "
        "`greedy_cover` gives a logarithmic-factor approximation.\n\n"
        "## Duality\n"
        "Hitting sets of a hypergraph are covers of its inversion "
        "(`invert_hypergraph`).\n\n"
        "## Limits\n"
        "Exact search is exponential. The server honours HYPERCOVER_MAX_STEPS "
        "and reports SearchLimitExceeded when it is reached.\n"
    )


# ===================================================================
# Entry point
# ===================================================================


def run_server() -> None:
    """Run the Hypercover MCP server over stdio."""
    logger.info("Starting Hypercover MCP server (max_steps=%s)", _max_steps())
    mcp.run(transport="stdio")
