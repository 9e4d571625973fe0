"""Build a labeled, bounded-branching mind map tree from a document value.

Collections become parent nodes, scalars become ``"key: value"`` leaves.
Dense collections are split into synthetic cluster nodes so no parent shows
more than ``CLUSTER_SIZE`` siblings once clustering kicks in.
"""

import itertools
from collections.abc import Iterator
from typing import Any

from loguru import logger

from confmap.config import CLUSTER_SIZE, CLUSTER_THRESHOLD, ROOT_NAME, VISIBILITY_HORIZON
from confmap.core.tree.classifier import classify, format_scalar, has_structure
from confmap.core.tree.navigation import count_nodes
from confmap.models.node import Node


def _starts_collapsed(depth: int) -> bool:
    return depth >= VISIBILITY_HORIZON


def cluster_label(start: int, end: int) -> str:
    """Label for a cluster covering the inclusive index range start..end."""
    return f"[{start} - {end}]"


def build_tree(value: Any, name: str = ROOT_NAME) -> Node:
    """Convert a parsed document into a Node tree.

    Node ids are assigned in pre-order starting at 0 for the root.

    Args:
        value: Any parsed YAML/JSON value. Must be acyclic.
        name: Label used for the root node.

    Returns:
        The root Node.
    """
    ids = itertools.count()
    root = _build(value, name, 0, ids)
    logger.debug("Built tree with {} nodes", count_nodes(root))
    return root


def _build(value: Any, name: str, depth: int, ids: Iterator[int]) -> Node:
    node = Node(id=next(ids), label=name, depth=depth)
    _kind, pairs = classify(value)

    if not pairs:
        node.label = f"{name}: {format_scalar(value)}"
        return node

    if len(pairs) > CLUSTER_THRESHOLD and any(has_structure(v) for _, v in pairs):
        node.children = []
        for start in range(0, len(pairs), CLUSTER_SIZE):
            chunk = pairs[start : start + CLUSTER_SIZE]
            cluster = Node(
                id=next(ids),
                label=cluster_label(start, start + len(chunk) - 1),
                depth=depth + 1,
                collapsed=_starts_collapsed(depth + 1),
            )
            cluster.children = [_build(v, k, depth + 2, ids) for k, v in chunk]
            node.children.append(cluster)
    else:
        node.children = [_build(v, k, depth + 1, ids) for k, v in pairs]

    node.collapsed = _starts_collapsed(depth)
    return node
