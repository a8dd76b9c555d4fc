"""Hypercover MCP server — exposes hitting set and set cover solvers as tools for AI agents."""

from hypercover.mcp.server import mcp, run_server

__all__ = ["mcp", "run_server"]
