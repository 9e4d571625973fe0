"""Explore YAML and JSON documents as a mind map."""

from confmap.core.tree.builder import build_tree
from confmap.protocols import ClipboardProtocol, RendererProtocol
from confmap.session import Session

__all__ = ["ClipboardProtocol", "RendererProtocol", "Session", "build_tree"]
