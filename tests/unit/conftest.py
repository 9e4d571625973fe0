"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from confmap.core.tree.builder import build_tree
from confmap.models.node import Node
from tests.unit.documents import DEEP_DOC, SAMPLE_DOC, SAMPLE_YAML


@pytest.fixture
def sample_tree() -> Node:
    return build_tree(SAMPLE_DOC)


@pytest.fixture
def deep_tree() -> Node:
    return build_tree(DEEP_DOC)


@pytest.fixture
def sample_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "sample.yaml"
    path.write_text(SAMPLE_YAML)
    return path


@pytest.fixture
def sample_json(tmp_path: Path) -> Path:
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(SAMPLE_DOC))
    return path
