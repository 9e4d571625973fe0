"""Tests for the collapse/expand overlay."""

from confmap.core.tree.navigation import iter_preorder
from confmap.core.tree.overlay import (
    clear_highlights,
    collapse_ancestors_except,
    is_fully_expanded,
    set_collapsed,
    toggle_all,
)
from confmap.models.node import NO_HIGHLIGHT, SEARCH_HIGHLIGHT, Node


def _collapsed_state(tree: Node) -> dict[int, bool]:
    return {n.id: n.collapsed for n in iter_preorder(tree)}


def test_set_collapsed_only_touches_parents(sample_tree: Node) -> None:
    set_collapsed(sample_tree, True)
    for node in iter_preorder(sample_tree):
        assert node.collapsed == node.is_parent


def test_set_collapsed_is_idempotent(deep_tree: Node) -> None:
    set_collapsed(deep_tree, True)
    once = _collapsed_state(deep_tree)
    set_collapsed(deep_tree, True)
    assert _collapsed_state(deep_tree) == once


def test_is_fully_expanded(sample_tree: Node, deep_tree: Node) -> None:
    assert is_fully_expanded(sample_tree)
    assert not is_fully_expanded(deep_tree)


def test_toggle_all_expands_partially_collapsed_tree(deep_tree: Node) -> None:
    assert toggle_all(deep_tree) is False
    assert is_fully_expanded(deep_tree)


def test_toggle_all_twice_restores_state(sample_tree: Node) -> None:
    before = _collapsed_state(sample_tree)
    assert toggle_all(sample_tree) is True
    assert not is_fully_expanded(sample_tree)
    toggle_all(sample_tree)
    assert _collapsed_state(sample_tree) == before


def test_leaf_only_tree_stays_expanded() -> None:
    leaf = Node(id=0, label="root: 1", depth=0)
    toggle_all(leaf)
    assert is_fully_expanded(leaf)
    assert not leaf.collapsed


def test_collapse_ancestors_except_keeps_path_open(sample_tree: Node) -> None:
    assert collapse_ancestors_except(sample_tree, 2)
    state = _collapsed_state(sample_tree)
    assert state[0] is False  # root
    assert state[1] is False  # a
    assert state[4] is True  # d, off the path


def test_collapse_ancestors_except_miss_is_a_no_op(sample_tree: Node) -> None:
    before = _collapsed_state(sample_tree)
    assert not collapse_ancestors_except(sample_tree, 99)
    assert _collapsed_state(sample_tree) == before


def test_clear_highlights(sample_tree: Node) -> None:
    for node in iter_preorder(sample_tree):
        node.highlight = SEARCH_HIGHLIGHT
    clear_highlights(sample_tree)
    assert all(n.highlight == NO_HIGHLIGHT for n in iter_preorder(sample_tree))
