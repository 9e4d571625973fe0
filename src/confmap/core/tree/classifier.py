"""Classify document values as scalars, ordered or keyed collections."""

from collections.abc import Mapping
from typing import Any

from confmap.models.node import ValueKind


def format_scalar(value: Any) -> str:
    """Render a value for use in a node label, JSON style."""
    # bool before anything numeric: bool subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Mapping):
        return "{}" if not value else str(dict(value))
    if isinstance(value, (list, tuple)):
        return "[]" if not value else str(list(value))
    return str(value)


def classify(value: Any) -> tuple[ValueKind, list[tuple[str, Any]]]:
    """Classify a value and return its ordered (key, value) child pairs.

    Keyed collections keep their declared key order, ordered collections get
    synthetic ``[i]`` keys. Scalars have no pairs. Never raises.
    """
    if isinstance(value, Mapping):
        return ValueKind.KEYED, [(format_scalar(k), v) for k, v in value.items()]
    if isinstance(value, (list, tuple)):
        return ValueKind.ORDERED, [(f"[{i}]", v) for i, v in enumerate(value)]
    return ValueKind.SCALAR, []


def has_structure(value: Any) -> bool:
    """Whether a value is a collection with at least one entry."""
    kind, pairs = classify(value)
    return kind is not ValueKind.SCALAR and bool(pairs)
