"""Tests for text export of trees and lineages."""

import pytest

from confmap.core.importer.loader import parse_document
from confmap.core.tree.builder import build_tree
from confmap.core.tree.export import (
    ExportFormat,
    export_lineage,
    render,
    render_markdown,
    render_nested_text,
    render_tree_text,
)
from confmap.models.node import Node


def test_render_tree_text(sample_tree: Node) -> None:
    assert render_tree_text(sample_tree) == (
        "root\n"
        "├── a\n"
        "│   ├── b: 1\n"
        "│   └── c: 2\n"
        "└── d\n"
        "    ├── [0]: 1\n"
        "    ├── [1]: 2\n"
        "    └── [2]: 3\n"
    )


def test_render_tree_text_with_depth_limit_shows_truncation(sample_tree: Node) -> None:
    text = render_tree_text(sample_tree, max_depth=1)
    assert text == (
        "root\n"
        "├── a\n"
        "│   └── ... (2 more children)\n"
        "└── d\n"
        "    └── ... (3 more children)\n"
    )


def test_render_tree_text_with_ids(sample_tree: Node) -> None:
    lines = render_tree_text(sample_tree, show_ids=True).splitlines()
    assert lines[0] == "[0] root"
    assert lines[1] == "├── [1] a"


def test_render_nested_text(sample_tree: Node) -> None:
    assert render_nested_text(sample_tree) == (
        "root:\n"
        "  a:\n"
        "    b: 1\n"
        "    c: 2\n"
        "  d:\n"
        "    [0]: 1\n"
        "    [1]: 2\n"
        "    [2]: 3\n"
    )


def test_render_markdown_with_depth_limit(sample_tree: Node) -> None:
    md = render_markdown(sample_tree, max_depth=1)
    assert md.startswith("- root\n    - a\n        - ... (2 more children)\n")
    assert "b: 1" not in md


def test_render_no_truncation_without_max_depth(sample_tree: Node) -> None:
    for fmt in ExportFormat:
        assert "... (" not in render(sample_tree, fmt)


def test_export_lineage_drops_unrelated_branches(sample_tree: Node) -> None:
    text = export_lineage(sample_tree, 2)
    assert text == "root\n└── a\n    └── b: 1\n"


def test_export_lineage_nested(sample_tree: Node) -> None:
    text = export_lineage(sample_tree, 4, ExportFormat.NESTED)
    assert text.splitlines() == ["root:", "  d:", "    [0]: 1", "    [1]: 2", "    [2]: 3"]


def test_export_lineage_miss_is_empty(sample_tree: Node) -> None:
    assert export_lineage(sample_tree, 99) == ""


MULTILINE_YAML = "a:\n  desc: |\n    line one\n    line two\n  z: 1\n"


def _multiline_tree() -> Node:
    return build_tree(parse_document(MULTILINE_YAML, filename="x.yaml"))


def test_tree_text_indents_multiline_labels_under_the_node() -> None:
    assert render_tree_text(_multiline_tree()).splitlines() == [
        "root",
        "└── a",
        "    ├── desc: line one",
        "    │     line two",
        "    └── z: 1",
    ]


def test_tree_text_multiline_parent_keeps_rule_to_children() -> None:
    tree = build_tree({"k": 1}, "top\nsecond")
    assert render_tree_text(tree).splitlines() == ["top", "│ second", "└── k: 1"]


def test_nested_text_indents_multiline_labels() -> None:
    assert render_nested_text(_multiline_tree()).splitlines() == [
        "root:",
        "  a:",
        "    desc: line one",
        "      line two",
        "    z: 1",
    ]


def test_markdown_indents_multiline_labels() -> None:
    assert render_markdown(_multiline_tree()).splitlines() == [
        "- root",
        "    - a",
        "        - desc: line one",
        "          line two",
        "        - z: 1",
    ]


def test_multiline_label_with_ids() -> None:
    lines = render_tree_text(_multiline_tree(), show_ids=True).splitlines()
    assert lines[2:4] == ["    ├── [2] desc: line one", "    │     line two"]


@pytest.mark.parametrize("fmt", list(ExportFormat))
def test_negative_max_depth_is_rejected(sample_tree: Node, fmt: ExportFormat) -> None:
    with pytest.raises(ValueError, match="max_depth"):
        render(sample_tree, fmt, max_depth=-1)
