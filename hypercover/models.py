"""Pydantic models for the Hypercover public API.

These are thin result wrappers over the engine's plain sets and dicts
(engine.core, engine.search, engine.greedy), providing validation and JSON
serialization for the client, CLI and MCP surfaces. Set-valued results are
carried as lists in a stable order.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class HittingSetResult(BaseModel):
    """Hitting sets found for a hypergraph.

    ``size`` is the common cardinality of the sets when known (minimum
    search, approximation), and None when no hitting set exists or the sets
    come from an enumeration that may mix sizes. ``exact`` is False for
    results produced by the greedy approximation.
    """

    size: int | None = Field(default=None, ge=0)
    sets: list[list[Any]] = Field(default_factory=list)
    exact: bool = True

    @model_validator(mode="after")
    def _check_sizes(self) -> HittingSetResult:
        if self.size is not None and any(len(s) != self.size for s in self.sets):
            raise ValueError(f"All hitting sets must have size {self.size}")
        return self

    @property
    def count(self) -> int:
        """Number of distinct hitting sets."""
        return len(self.sets)

    @property
    def found(self) -> bool:
        return bool(self.sets)

    def __repr__(self) -> str:
        kind = "exact" if self.exact else "approx"
        return f"HittingSetResult({kind}, size={self.size}, count={self.count})"


class CoverResult(BaseModel):
    """A (possibly partial) set cover.

    ``complete`` is False when some vertices could not be covered; they are
    listed in ``uncovered``.
    """

    edges: list[Any] = Field(default_factory=list)
    complete: bool = True
    uncovered: list[Any] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.edges)


class ValidationResult(BaseModel):
    """Result of a hypergraph precondition check.

    Contains a pass/fail flag, a list of errors, and a list of warnings
    found during validation.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class HypergraphStats(BaseModel):
    """Summary counts for a hypergraph."""

    edge_count: int
    vertex_count: int
    min_edge_size: int
    max_edge_size: int
    empty_edges: list[Any] = Field(default_factory=list)
