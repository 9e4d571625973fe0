"""CLI for confmap (show, search, lineage, MCP server)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from confmap.core.tree.export import ExportFormat, render
from confmap.core.tree.navigation import get_breadcrumbs
from confmap.core.tree.overlay import set_collapsed
from confmap.exceptions import ConfmapError
from confmap.logging_config import configure_logging
from confmap.models.node import Node, SearchStatus
from confmap.render.payload import to_chart_data
from confmap.session import Session

app = typer.Typer(help="confmap: explore YAML and JSON documents as a mind map.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _open_session(path: Path) -> tuple[Session, Node]:
    """Load a document into a new session, exiting on load errors."""
    if not path.exists():
        logger.error("File not found: {}", path)
        raise typer.Exit(1)
    session = Session()
    try:
        tree = session.load_file(path)
    except ConfmapError as exc:
        logger.error("{}", exc)
        raise typer.Exit(1) from exc
    return session, tree


@app.command()
def show(
    path: Path = typer.Argument(..., help="YAML or JSON document"),
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="tree, nested, markdown or json"),
    ] = "tree",
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", min=0, help="Max depth levels to render"),
    ] = None,
    expand_all: bool = typer.Option(
        False, "--expand-all", "-e", help="Expand every node in json output"
    ),
    show_ids: bool = typer.Option(False, "--ids", "-i", help="Prefix labels with node ids"),
) -> None:
    """Print the mind map of a document."""
    _session, tree = _open_session(path)

    if expand_all:
        set_collapsed(tree, False)

    if fmt == "json":
        typer.echo(json.dumps(to_chart_data(tree), indent=2))
        return

    try:
        export_format = ExportFormat(fmt)
    except ValueError:
        typer.echo(f"Unknown format '{fmt}'.")
        raise typer.Exit(1) from None
    text = render(tree, export_format, max_depth=max_depth, show_ids=show_ids)
    typer.echo(text, nl=False)


@app.command()
def search(
    path: Path = typer.Argument(..., help="YAML or JSON document"),
    query: str = typer.Argument(..., help="Search query"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Find nodes whose label contains a query."""
    session, tree = _open_session(path)
    outcome = session.search(query)
    if outcome is None:
        logger.error("No document loaded from {}", path)
        raise typer.Exit(1)

    if outcome.status is SearchStatus.CLEARED:
        typer.echo("Empty query.")
        raise typer.Exit(1)

    if output_json:
        data = {
            "query": query,
            "results": [
                {
                    "node_id": m.node_id,
                    "label": m.label,
                    "depth": m.depth,
                    "breadcrumbs": [
                        c.label for c in get_breadcrumbs(tree, m.node_id)
                    ],
                }
                for m in outcome.matches
            ],
            "total": len(outcome.matches),
        }
        typer.echo(json.dumps(data, indent=2))
        return

    if outcome.status is SearchStatus.NO_MATCH:
        typer.echo("No matching nodes found.")
        return

    typer.echo(f"Found {len(outcome.matches)} results:\n")
    for m in outcome.matches:
        crumbs = get_breadcrumbs(tree, m.node_id)
        typer.echo(f"  {m.label}")
        typer.echo(f"    id={m.node_id}  path={' > '.join(c.label for c in crumbs)}")


@app.command()
def lineage(
    path: Path = typer.Argument(..., help="YAML or JSON document"),
    node_id: int = typer.Argument(..., help="Node id (see 'show --ids')"),
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="tree, nested or markdown"),
    ] = "tree",
) -> None:
    """Print a node's ancestors and its full subtree."""
    session, _tree = _open_session(path)
    try:
        export_format = ExportFormat(fmt)
    except ValueError:
        typer.echo(f"Unknown format '{fmt}'.")
        raise typer.Exit(1) from None

    text = session.copy_lineage(node_id, export_format)
    if not text:
        typer.echo(f"Node '{node_id}' not found.")
        raise typer.Exit(1)
    typer.echo(text, nl=False)


@app.command()
def serve() -> None:
    """Start the MCP server (stdio transport)."""
    from confmap.mcp.server import run_mcp_server

    run_mcp_server()
