"""MCP server exposing a confmap session as tools."""

import asyncio
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger
from mcp.server.fastmcp import Context, FastMCP

from confmap.core.tree.export import ExportFormat, render
from confmap.core.tree.navigation import count_nodes, get_breadcrumbs
from confmap.exceptions import ConfmapError
from confmap.models.node import Node, SearchMatch, SearchStatus
from confmap.render.payload import to_chart_data
from confmap.session import Session

_NOT_LOADED = {"error": "No document loaded. Call confmap_load_tool first."}


def _match_dict(tree: Node, match: SearchMatch) -> dict[str, Any]:
    crumbs = get_breadcrumbs(tree, match.node_id)
    return {
        "node_id": match.node_id,
        "label": match.label,
        "depth": match.depth,
        "breadcrumbs": " > ".join(c.label for c in crumbs),
    }


def _parse_format(output_format: str) -> ExportFormat | None:
    try:
        return ExportFormat(output_format)
    except ValueError:
        return None


# --- Core functions (testable without MCP context) ---


def confmap_load(session: Session, *, path: str) -> dict[str, Any]:
    """Load a YAML or JSON document, replacing the current one."""
    file_path = Path(path).expanduser()
    if not file_path.exists():
        return {"error": f"File '{path}' not found."}
    try:
        tree = session.load_file(file_path)
    except ConfmapError as exc:
        return {"error": str(exc)}
    return {"document": file_path.name, "node_count": count_nodes(tree), "root_id": tree.id}


def confmap_view(
    session: Session,
    *,
    output_format: str = "tree",
    max_depth: int | None = None,
) -> dict[str, Any]:
    """Return the current view as text, or as chart data with output_format="json"."""
    if session.view is None:
        return dict(_NOT_LOADED)

    result: dict[str, Any] = {"state": session.state.value, "layout": session.layout.value}
    if output_format == "json":
        result["tree"] = to_chart_data(session.view)
        return result

    fmt = _parse_format(output_format)
    if fmt is None:
        return {"error": f"Unknown format '{output_format}'."}
    if max_depth is not None and max_depth < 0:
        return {"error": f"max_depth must be >= 0, got {max_depth}."}
    result["content"] = render(session.view, fmt, max_depth=max_depth, show_ids=True)
    return result


def confmap_search(session: Session, *, query: str) -> dict[str, Any]:
    """Search node labels (case-insensitive substring). Empty query clears."""
    outcome = session.search(query)
    if outcome is None or session.original is None:
        return dict(_NOT_LOADED)
    if outcome.status is SearchStatus.CLEARED:
        return {"status": outcome.status.value, "results": [], "count": 0}
    results = [_match_dict(session.original, m) for m in outcome.matches]
    return {"status": outcome.status.value, "results": results, "count": len(results)}


def confmap_step_result(session: Session, *, backwards: bool = False) -> dict[str, Any]:
    """Move the search cursor to the next (or previous) match, wrapping around."""
    match = session.previous_result() if backwards else session.next_result()
    cursor = session.cursor
    if match is None or cursor is None or session.original is None:
        return {"error": "No active search."}
    return {
        **_match_dict(session.original, match),
        "position": cursor.index + 1,
        "count": len(cursor.matches),
    }


def confmap_focus(session: Session, *, node_id: int) -> dict[str, Any]:
    """Show only a node's ancestors and subtree."""
    if not session.loaded:
        return dict(_NOT_LOADED)
    if not session.focus_on(node_id):
        return {"error": f"Node '{node_id}' not found."}
    return confmap_view(session)


def confmap_unfocus(session: Session) -> dict[str, Any]:
    if not session.loaded:
        return dict(_NOT_LOADED)
    session.unfocus()
    return {"state": session.state.value}


def confmap_reveal(session: Session, *, node_id: int) -> dict[str, Any]:
    """Collapse the whole tree except the path to a node."""
    if not session.loaded:
        return dict(_NOT_LOADED)
    if not session.reveal(node_id):
        return {"error": f"Node '{node_id}' not found."}
    return {"state": session.state.value, "node_id": node_id}


def confmap_toggle_expand_all(session: Session) -> dict[str, Any]:
    collapsed = session.toggle_expand_all()
    if collapsed is None:
        return dict(_NOT_LOADED)
    return {"collapsed": collapsed}


def confmap_lineage(
    session: Session, *, node_id: int, output_format: str = "tree"
) -> dict[str, Any]:
    """Export a node's lineage from the current view as text."""
    if not session.loaded:
        return dict(_NOT_LOADED)
    fmt = _parse_format(output_format)
    if fmt is None:
        return {"error": f"Unknown format '{output_format}'."}
    text = session.copy_lineage(node_id, fmt)
    if not text:
        return {"error": f"Node '{node_id}' not found."}
    return {"node_id": node_id, "content": text}


# --- Server lifecycle ---


@dataclass
class ServerContext:
    session: Session
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ServerContext]:
    """Create the session, preloading CONFMAP_DOCUMENT if set."""
    session = Session()
    document = os.environ.get("CONFMAP_DOCUMENT")
    if document:
        result = confmap_load(session, path=document)
        if "error" in result:
            logger.warning("Could not preload {}: {}", document, result["error"])
    yield ServerContext(session=session)


mcp_server = FastMCP(
    "confmap",
    instructions="""\
confmap shows a YAML or JSON document as a tree of labeled nodes.

1. Load a document with confmap_load_tool.
2. Use confmap_view_tool to see the tree; every line is prefixed with its node id.
3. confmap_search_tool expands every match; step through hits with
   confmap_step_result_tool.
4. confmap_focus_tool narrows the view to one node's ancestors and subtree,
   confmap_unfocus_tool returns to the full tree.
""",
    lifespan=server_lifespan,
)


def _ctx(mcp_ctx: Context) -> ServerContext:
    return mcp_ctx.request_context.lifespan_context  # type: ignore[return-value]


# --- MCP Tool Wrappers ---


@mcp_server.tool()
async def confmap_load_tool(ctx: Context, path: str) -> dict[str, Any]:
    """Load a .yml, .yaml or .json document, replacing the current one.

    Args:
        path: Path to the document on disk.
    """
    async with _ctx(ctx).lock:
        return confmap_load(_ctx(ctx).session, path=path)


@mcp_server.tool()
async def confmap_view_tool(
    ctx: Context, output_format: str = "tree", max_depth: int | None = None
) -> dict[str, Any]:
    """Show the current view.

    Args:
        output_format: "tree", "nested", "markdown" or "json".
        max_depth: Max levels to render (text formats only).
    """
    async with _ctx(ctx).lock:
        return confmap_view(_ctx(ctx).session, output_format=output_format, max_depth=max_depth)


@mcp_server.tool()
async def confmap_search_tool(ctx: Context, query: str) -> dict[str, Any]:
    """Find nodes whose label contains query (case-insensitive).

    Every match is highlighted and its ancestors expanded. An empty query
    clears the search.
    """
    async with _ctx(ctx).lock:
        return confmap_search(_ctx(ctx).session, query=query)


@mcp_server.tool()
async def confmap_step_result_tool(ctx: Context, backwards: bool = False) -> dict[str, Any]:
    """Move to the next search match, or the previous one with backwards=True."""
    async with _ctx(ctx).lock:
        return confmap_step_result(_ctx(ctx).session, backwards=backwards)


@mcp_server.tool()
async def confmap_focus_tool(ctx: Context, node_id: int) -> dict[str, Any]:
    """Narrow the view to a node's ancestors and full subtree."""
    async with _ctx(ctx).lock:
        return confmap_focus(_ctx(ctx).session, node_id=node_id)


@mcp_server.tool()
async def confmap_unfocus_tool(ctx: Context) -> dict[str, Any]:
    """Return to the full tree."""
    async with _ctx(ctx).lock:
        return confmap_unfocus(_ctx(ctx).session)


@mcp_server.tool()
async def confmap_reveal_tool(ctx: Context, node_id: int) -> dict[str, Any]:
    """Collapse everything except the path to a node in the full tree."""
    async with _ctx(ctx).lock:
        return confmap_reveal(_ctx(ctx).session, node_id=node_id)


@mcp_server.tool()
async def confmap_toggle_expand_all_tool(ctx: Context) -> dict[str, Any]:
    """Expand every node, or collapse every node if all are already expanded."""
    async with _ctx(ctx).lock:
        return confmap_toggle_expand_all(_ctx(ctx).session)


@mcp_server.tool()
async def confmap_lineage_tool(
    ctx: Context, node_id: int, output_format: str = "tree"
) -> dict[str, Any]:
    """Export a node's ancestors and subtree as text.

    Args:
        node_id: Node id from confmap_view_tool.
        output_format: "tree", "nested" or "markdown".
    """
    async with _ctx(ctx).lock:
        return confmap_lineage(_ctx(ctx).session, node_id=node_id, output_format=output_format)


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from confmap.logging_config import configure_logging

    configure_logging(quiet=True)
    mcp_server.run(transport="stdio")
