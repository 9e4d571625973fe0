"""Tree navigation: traversal, lookups, breadcrumbs."""

from collections.abc import Iterator

from confmap.models.node import Breadcrumb, Node


def iter_preorder(tree: Node) -> Iterator[Node]:
    """Yield every node depth-first, children in original order."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        if node.children:
            stack.extend(reversed(node.children))


def count_nodes(tree: Node) -> int:
    return sum(1 for _ in iter_preorder(tree))


def find_node(tree: Node, node_id: int) -> Node | None:
    """Find a node by id, or None."""
    return next((n for n in iter_preorder(tree) if n.id == node_id), None)


def find_by_label_depth(tree: Node, label: str, depth: int) -> Node | None:
    """Find the first node in pre-order with this label at this depth.

    Two nodes sharing label and depth cannot be told apart here; prefer
    ``find_node`` wherever an id is available.
    """
    return next(
        (n for n in iter_preorder(tree) if n.label == label and n.depth == depth),
        None,
    )


def path_to(tree: Node, node_id: int) -> list[Node]:
    """Return the nodes from the root down to node_id (inclusive).

    Returns an empty list when the node is not in the tree.
    """
    # Iterative DFS keeping the current path on the stack
    stack: list[tuple[Node, list[Node]]] = [(tree, [tree])]
    while stack:
        node, path = stack.pop()
        if node.id == node_id:
            return path
        if node.children:
            for child in reversed(node.children):
                stack.append((child, [*path, child]))
    return []


def get_breadcrumbs(tree: Node, node_id: int) -> tuple[Breadcrumb, ...]:
    """Get ancestor breadcrumbs for a node.

    Returns breadcrumbs in order from root to immediate parent (excludes the node itself).
    """
    path = path_to(tree, node_id)
    return tuple(Breadcrumb(node_id=n.id, label=n.label, depth=n.depth) for n in path[:-1])
