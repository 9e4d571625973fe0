"""Tests for MCP tool core functions."""

from pathlib import Path

import pytest

from confmap.mcp.server import (
    confmap_focus,
    confmap_lineage,
    confmap_load,
    confmap_reveal,
    confmap_search,
    confmap_step_result,
    confmap_toggle_expand_all,
    confmap_unfocus,
    confmap_view,
)
from confmap.session import Session


@pytest.fixture
def session(sample_yaml: Path) -> Session:
    s = Session()
    result = confmap_load(s, path=str(sample_yaml))
    assert result == {"document": "sample.yaml", "node_count": 8, "root_id": 0}
    return s


def test_load_reports_errors(tmp_path: Path) -> None:
    session = Session()
    assert "error" in confmap_load(session, path=str(tmp_path / "nope.yaml"))

    bad = tmp_path / "bad.yaml"
    bad.write_text("a: [1\n")
    assert "error" in confmap_load(session, path=str(bad))
    assert not session.loaded


def test_tools_require_a_document() -> None:
    session = Session()
    assert "error" in confmap_view(session)
    assert "error" in confmap_search(session, query="x")
    assert "error" in confmap_focus(session, node_id=0)
    assert "error" in confmap_toggle_expand_all(session)
    assert "error" in confmap_lineage(session, node_id=0)


def test_view_returns_text_with_ids(session: Session) -> None:
    result = confmap_view(session)
    assert result["state"] == "normal"
    assert result["layout"] == "LR"
    assert "[2] b: 1" in result["content"]


def test_view_json(session: Session) -> None:
    result = confmap_view(session, output_format="json")
    assert result["tree"]["name"] == "root"


def test_view_unknown_format(session: Session) -> None:
    assert "error" in confmap_view(session, output_format="xml")


def test_search_and_step(session: Session) -> None:
    result = confmap_search(session, query="1")
    assert result["status"] == "matched"
    assert result["count"] == 3
    assert result["results"][0]["breadcrumbs"] == "root > a"

    step = confmap_step_result(session)
    assert step["node_id"] == 5
    assert step["position"] == 2
    back = confmap_step_result(session, backwards=True)
    assert back["node_id"] == 2

    cleared = confmap_search(session, query="")
    assert cleared["status"] == "cleared"
    assert "error" in confmap_step_result(session)


def test_search_no_match(session: Session) -> None:
    result = confmap_search(session, query="zzz")
    assert result == {"status": "no-match", "results": [], "count": 0}


def test_focus_unfocus(session: Session) -> None:
    result = confmap_focus(session, node_id=4)
    assert result["state"] == "focused"
    assert "[1] a" not in result["content"]
    assert "[5] [0]: 1" in result["content"]
    assert "error" in confmap_focus(session, node_id=99)
    assert confmap_unfocus(session) == {"state": "normal"}


def test_reveal(session: Session) -> None:
    assert confmap_reveal(session, node_id=6) == {"state": "normal", "node_id": 6}
    assert "error" in confmap_reveal(session, node_id=99)


def test_toggle_expand_all(session: Session) -> None:
    assert confmap_toggle_expand_all(session) == {"collapsed": True}
    assert confmap_toggle_expand_all(session) == {"collapsed": False}


def test_lineage(session: Session) -> None:
    result = confmap_lineage(session, node_id=3, output_format="markdown")
    assert result["content"] == "- root\n    - a\n        - c: 2\n"
    assert "error" in confmap_lineage(session, node_id=99)
    assert "error" in confmap_lineage(session, node_id=3, output_format="xml")


def test_step_after_unmatched_search(session: Session) -> None:
    confmap_search(session, query="1")
    assert confmap_search(session, query="zzz")["count"] == 0
    assert "error" in confmap_step_result(session)


def test_view_rejects_negative_depth(session: Session) -> None:
    assert "error" in confmap_view(session, max_depth=-1)
