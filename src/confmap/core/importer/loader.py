"""Load YAML and JSON documents into plain Python values."""

import json
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from confmap.config import JSON_SUFFIXES, YAML_SUFFIXES
from confmap.exceptions import DocumentParseError, UnsupportedFileTypeError


def parse_document(text: str, *, filename: str) -> Any:
    """Parse document text, picking the parser from the filename suffix.

    Raises:
        UnsupportedFileTypeError: The suffix is not .yml, .yaml or .json.
        DocumentParseError: The text is not valid for its format.
    """
    suffix = Path(filename).suffix.lower()
    if suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentParseError(filename, str(exc)) from exc
    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(filename, str(exc)) from exc
    raise UnsupportedFileTypeError(filename)


def load_document(path: Path) -> Any:
    """Read and parse a document from disk."""
    logger.debug("Loading document {}", path)
    return parse_document(path.read_text(encoding="utf-8"), filename=path.name)
