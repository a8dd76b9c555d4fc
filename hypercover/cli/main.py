"""Hypercover CLI — solve hitting set and set cover problems from the command line.

Every command reads a hypergraph from a JSON file holding an object that maps
edge ids to lists of vertices, e.g. ``{"A": [1, 2], "B": [2, 3]}``.

Yes/no checks print ``yes`` or ``no`` and exit 0 either way. Exit code 1 is
reserved for errors (bad input, precondition violations, search limits) and
2 for usage errors.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from hypercover.client import Hypercover
from hypercover.engine.core import HypercoverError


def _load_edges(path: str) -> dict[str, list[Any]]:
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise click.ClickException(f"{path} must contain a JSON object of edge id -> vertices")
    for edge_id, members in data.items():
        if not isinstance(members, list):
            raise click.ClickException(f"Edge {edge_id!r} must be a list of vertices")
    return data


def _get_client(ctx: click.Context, graph: str) -> Hypercover:
    edges = _load_edges(graph)
    try:
        return Hypercover(edges, strict=ctx.obj["strict"], max_steps=ctx.obj["max_steps"])
    except HypercoverError as exc:
        raise click.ClickException(str(exc)) from exc


def _resolve(names: tuple[str, ...], known: frozenset[Any]) -> set[Any]:
    """Map command-line strings back onto the graph's own values by string form."""
    by_name = {str(value): value for value in known}
    return {by_name.get(name, name) for name in names}


def _fmt(values: list[Any]) -> str:
    return "{" + ", ".join(str(v) for v in values) + "}"


@click.group()
@click.option(
    "--max-steps",
    type=click.IntRange(min=1),
    default=None,
    envvar="HYPERCOVER_MAX_STEPS",
    help="Abort exhaustive searches after this many steps.",
)
@click.option(
    "--log-level",
    default="WARNING",
    envvar="HYPERCOVER_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (logs go to stderr).",
)
@click.option("--lenient", is_flag=True, help="Allow edge ids that are also vertices.")
@click.pass_context
def cli(ctx: click.Context, max_steps: int | None, log_level: str, lenient: bool) -> None:
    """Hypercover CLI — hitting sets and set covers for hypergraphs."""
    logging.basicConfig(
        stream=sys.stderr, level=log_level.upper(), format="%(levelname)s: %(message)s"
    )
    ctx.ensure_object(dict)
    ctx.obj["max_steps"] = max_steps
    ctx.obj["strict"] = not lenient


def _run(fn):
    """Call ``fn`` and report hypercover errors as CLI errors."""
    try:
        return fn()
    except HypercoverError as exc:
        raise click.ClickException(f"{type(exc).__name__}: {exc}") from exc


@cli.command()
@click.argument("graph", type=click.Path(exists=True))
@click.pass_context
def minimal(ctx: click.Context, graph: str) -> None:
    """List all minimum-cardinality hitting sets."""
    hc = _get_client(ctx, graph)
    result = _run(hc.minimal_hitting_sets)
    if not result.found:
        click.echo("No hitting set exists.")
        return
    click.echo(f"Minimum size: {result.size}  ({result.count} hitting sets)")
    for s in result.sets:
        click.echo(f"  {_fmt(s)}")


@cli.command()
@click.argument("graph", type=click.Path(exists=True))
@click.argument("k", type=click.IntRange(min=0))
@click.pass_context
def exists(ctx: click.Context, graph: str, k: int) -> None:
    """Check for a hitting set within budget K (exact at or below the minimum)."""
    hc = _get_client(ctx, graph)
    found = _run(lambda: hc.hitting_set_exists(k))
    click.echo("yes" if found else "no")


@cli.command("enumerate")
@click.argument("graph", type=click.Path(exists=True))
@click.option("--k", "k", type=click.IntRange(min=0), default=None, help="Size budget.")
@click.pass_context
def enumerate_cmd(ctx: click.Context, graph: str, k: int | None) -> None:
    """Enumerate hitting sets reachable within an optional budget."""
    hc = _get_client(ctx, graph)
    result = _run(lambda: hc.hitting_sets(k))
    if not result.found:
        click.echo("No hitting sets found.")
        return
    for s in result.sets:
        click.echo(f"  {_fmt(s)}")


@cli.command("greedy-cover")
@click.argument("graph", type=click.Path(exists=True))
@click.pass_context
def greedy_cover(ctx: click.Context, graph: str) -> None:
    """Build a set cover with the greedy heuristic."""
    hc = _get_client(ctx, graph)
    result = hc.greedy_cover()
    click.echo(f"Cover: {_fmt(result.edges)}  (size={result.size})")
    if not result.complete:
        click.echo(f"  WARNING: uncovered vertices: {_fmt(result.uncovered)}")


@cli.command()
@click.argument("graph", type=click.Path(exists=True))
@click.pass_context
def approx(ctx: click.Context, graph: str) -> None:
    """Approximate a small hitting set with the greedy heuristic."""
    hc = _get_client(ctx, graph)
    result = hc.approx_hitting_set()
    click.echo(f"Hitting set: {_fmt(result.sets[0])}  (size={result.size})")


@cli.command("check-hitting")
@click.argument("graph", type=click.Path(exists=True))
@click.argument("vertices", nargs=-1)
@click.pass_context
def check_hitting(ctx: click.Context, graph: str, vertices: tuple[str, ...]) -> None:
    """Check whether VERTICES form a hitting set."""
    hc = _get_client(ctx, graph)
    ok = hc.is_hitting_set(_resolve(vertices, hc.graph.vertices))
    click.echo("yes" if ok else "no")


@cli.command("check-cover")
@click.argument("graph", type=click.Path(exists=True))
@click.argument("edge_ids", nargs=-1)
@click.pass_context
def check_cover(ctx: click.Context, graph: str, edge_ids: tuple[str, ...]) -> None:
    """Check whether EDGE_IDS form a set cover."""
    hc = _get_client(ctx, graph)
    ok = _run(lambda: hc.is_cover(edge_ids))
    click.echo("yes" if ok else "no")


@cli.command()
@click.argument("graph", type=click.Path(exists=True))
@click.argument("output", type=click.Path(), required=False)
@click.pass_context
def invert(ctx: click.Context, graph: str, output: str | None) -> None:
    """Write the inverted hypergraph (vertex -> edge ids) as JSON."""
    hc = _get_client(ctx, graph)
    inverted = hc.invert().graph
    data = {str(vertex): sorted(str(e) for e in members) for vertex, members in inverted.items()}
    text = json.dumps(data, indent=2)
    if output:
        Path(output).write_text(text)
        click.echo(f"Wrote inverted hypergraph to {output}")
    else:
        click.echo(text)


@cli.command()
@click.argument("graph", type=click.Path(exists=True))
@click.pass_context
def stats(ctx: click.Context, graph: str) -> None:
    """Show hypergraph statistics."""
    s = _get_client(ctx, graph).stats()
    click.echo(f"Edges: {s.edge_count}  Vertices: {s.vertex_count}")
    click.echo(f"Edge size: min={s.min_edge_size} max={s.max_edge_size}")
    if s.empty_edges:
        click.echo(f"Empty edges: {_fmt(s.empty_edges)}")


@cli.command()
@click.argument("graph", type=click.Path(exists=True))
@click.pass_context
def validate(ctx: click.Context, graph: str) -> None:
    """Check the hypergraph against the solvers' preconditions."""
    edges = _load_edges(graph)
    result = _run(lambda: Hypercover(edges, strict=False).validate())
    if result.valid:
        click.echo("Hypergraph is valid.")
    else:
        click.echo("Validation errors:")
        for err in result.errors:
            click.echo(f"  ERROR: {err}")
    for warn in result.warnings:
        click.echo(f"  WARNING: {warn}")


@cli.command()
@click.pass_context
def mcp(ctx: click.Context) -> None:
    """Start the MCP server for AI agent integration."""
    import os

    if ctx.obj["max_steps"] is not None:
        os.environ["HYPERCOVER_MAX_STEPS"] = str(ctx.obj["max_steps"])
    from hypercover.mcp.server import run_server

    run_server()


if __name__ == "__main__":
    cli()
