"""Presentation state layered on the structural tree.

All operations mutate the given tree in place and are idempotent.
"""

from confmap.core.tree.navigation import iter_preorder, path_to
from confmap.models.node import NO_HIGHLIGHT, Node


def set_collapsed(tree: Node, value: bool) -> None:
    """Set ``collapsed`` on every parent node; leaves are left alone."""
    for node in iter_preorder(tree):
        if node.is_parent:
            node.collapsed = value


def is_fully_expanded(tree: Node) -> bool:
    """True iff no parent node in the tree is collapsed."""
    return not any(n.is_parent and n.collapsed for n in iter_preorder(tree))


def toggle_all(tree: Node) -> bool:
    """Collapse everything if fully expanded, otherwise expand everything.

    Returns the new collapsed value.
    """
    collapse = is_fully_expanded(tree)
    set_collapsed(tree, collapse)
    return collapse


def collapse_ancestors_except(tree: Node, target_id: int) -> bool:
    """Collapse every parent, then expand the root-to-target path.

    Returns False and leaves the tree untouched if the target is missing.
    """
    path = path_to(tree, target_id)
    if not path:
        return False
    set_collapsed(tree, True)
    for node in path:
        node.collapsed = False
    return True


def clear_highlights(tree: Node) -> None:
    for node in iter_preorder(tree):
        node.highlight = NO_HIGHLIGHT
