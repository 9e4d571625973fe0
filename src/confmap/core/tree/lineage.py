"""Reduce a tree to a node's lineage: its ancestors plus its whole subtree."""

import copy

from loguru import logger

from confmap.core.tree.navigation import find_by_label_depth, path_to
from confmap.models.node import Node


def lineage(tree: Node, target_id: int) -> Node:
    """Return the root-to-target spine with the target's full subtree attached.

    Siblings of spine nodes are dropped. Spine nodes and the target are
    expanded in the result. ``tree`` is not modified; if the target is not
    found, ``tree`` itself is returned.
    """
    path = path_to(tree, target_id)
    if not path:
        logger.debug("Lineage target {} not found", target_id)
        return tree

    target = copy.deepcopy(path[-1])
    target.collapsed = False
    reduced = target
    for ancestor in reversed(path[:-1]):
        spine = copy.copy(ancestor)
        spine.children = [reduced]
        spine.collapsed = False
        reduced = spine
    return reduced


def lineage_by_label(tree: Node, label: str, depth: int) -> Node:
    """Lineage of the first node in pre-order with this label and depth."""
    target = find_by_label_depth(tree, label, depth)
    if target is None:
        return tree
    return lineage(tree, target.id)
