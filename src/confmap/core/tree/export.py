"""Render node subtrees as plain text for export."""

import io
from enum import Enum

from confmap.core.tree.lineage import lineage
from confmap.core.tree.navigation import find_node
from confmap.models.node import Node


class ExportFormat(Enum):
    TREE = "tree"
    NESTED = "nested"
    MARKDOWN = "markdown"


def _text_lines(node: Node, show_ids: bool) -> list[str]:
    """Split a label into display lines; block scalars span several."""
    lines = node.label.rstrip("\n").split("\n")
    if show_ids:
        lines[0] = f"[{node.id}] {lines[0]}"
    return lines


def _more(node: Node) -> str:
    count = len(node.children or ())
    noun = "child" if count == 1 else "children"
    return f"... ({count} more {noun})"


def _cut_off(node: Node, depth: int, max_depth: int | None) -> bool:
    return max_depth is not None and depth == max_depth and node.is_parent


def _check_max_depth(max_depth: int | None) -> None:
    if max_depth is not None and max_depth < 0:
        msg = f"max_depth must be >= 0, got {max_depth}"
        raise ValueError(msg)


def render_tree_text(tree: Node, *, max_depth: int | None = None, show_ids: bool = False) -> str:
    """Render a tree with box-drawing connectors, one entry per node.

    Continuation lines of multi-line labels sit under the node's own prefix.

    Args:
        tree: Node to start rendering from.
        max_depth: Max levels below ``tree`` to include (None = unlimited).
        show_ids: Prefix every label with its node id.
    """
    _check_max_depth(max_depth)
    out = io.StringIO()

    def write_label(node: Node, first: str, rest: str) -> None:
        lines = _text_lines(node, show_ids)
        out.write(f"{first}{lines[0]}\n")
        # keep the vertical rule running down to the node's children
        cont = rest + ("│ " if node.is_parent else "  ")
        for line in lines[1:]:
            out.write(f"{cont}{line}\n")

    def walk(node: Node, prefix: str, depth: int) -> None:
        if _cut_off(node, depth, max_depth):
            out.write(f"{prefix}└── {_more(node)}\n")
            return
        children = node.children or []
        for i, child in enumerate(children):
            last = i == len(children) - 1
            child_prefix = prefix + ("    " if last else "│   ")
            write_label(child, prefix + ("└── " if last else "├── "), child_prefix)
            walk(child, child_prefix, depth + 1)

    write_label(tree, "", "")
    walk(tree, "", 0)
    return out.getvalue()


def render_nested_text(
    tree: Node, *, max_depth: int | None = None, show_ids: bool = False
) -> str:
    """Render a tree as colon-nested text, two spaces per level.

    Parent labels end with a colon, leaf labels already read ``key: value``.
    """
    _check_max_depth(max_depth)
    out = io.StringIO()

    def walk(node: Node, depth: int) -> None:
        indent = "  " * depth
        lines = _text_lines(node, show_ids)
        if node.is_parent:
            lines[-1] += ":"
        out.write(f"{indent}{lines[0]}\n")
        for line in lines[1:]:
            out.write(f"{indent}  {line}\n")
        if not node.is_parent:
            return
        if _cut_off(node, depth, max_depth):
            out.write(f"{indent}  {_more(node)}\n")
            return
        for child in node.children or ():
            walk(child, depth + 1)

    walk(tree, 0)
    return out.getvalue()


def render_markdown(tree: Node, *, max_depth: int | None = None, show_ids: bool = False) -> str:
    """Render a tree as an indented markdown bullet list."""
    _check_max_depth(max_depth)
    out = io.StringIO()

    def walk(node: Node, depth: int) -> None:
        indent = "    " * depth
        lines = _text_lines(node, show_ids)
        out.write(f"{indent}- {lines[0]}\n")
        for line in lines[1:]:
            out.write(f"{indent}  {line}\n")
        # Truncation indicator when children are cut off by max_depth
        if _cut_off(node, depth, max_depth):
            out.write(f"{indent}    - {_more(node)}\n")
            return
        for child in node.children or ():
            walk(child, depth + 1)

    walk(tree, 0)
    return out.getvalue()


_RENDERERS = {
    ExportFormat.TREE: render_tree_text,
    ExportFormat.NESTED: render_nested_text,
    ExportFormat.MARKDOWN: render_markdown,
}


def render(
    tree: Node,
    fmt: ExportFormat = ExportFormat.TREE,
    *,
    max_depth: int | None = None,
    show_ids: bool = False,
) -> str:
    return _RENDERERS[fmt](tree, max_depth=max_depth, show_ids=show_ids)


def export_lineage(tree: Node, target_id: int, fmt: ExportFormat = ExportFormat.TREE) -> str:
    """Render the lineage of a node, or return "" if the node is not in the tree."""
    if find_node(tree, target_id) is None:
        return ""
    return render(lineage(tree, target_id), fmt)
