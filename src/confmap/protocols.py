"""Protocols for the collaborators a session talks to."""

from typing import Protocol, runtime_checkable

from confmap.models.node import DisplayOptions, LayoutMode, Node


@runtime_checkable
class RendererProtocol(Protocol):
    """Protocol for whatever draws the current view."""

    def render(self, tree: Node, *, layout: LayoutMode, display: DisplayOptions) -> None:
        """Draw the tree. Called on every state change, never awaited."""
        ...


@runtime_checkable
class ClipboardProtocol(Protocol):
    """Protocol for clipboard writers used by lineage export."""

    def write_text(self, text: str) -> None:
        """Put text on the clipboard."""
        ...
