"""Interactive session over one loaded document.

The session owns the canonical tree and the view currently shown. Which view
that is follows a small state machine::

    NORMAL --search(match)--> SEARCHING --clear/no match--> (state before search)
    NORMAL/SEARCHING --focus_on--> FOCUSED --unfocus--> NORMAL
    FOCUSED --search(match)--> SEARCHING --clear--> FOCUSED

Searches never touch the canonical tree; expand/collapse act in place on the
current view.
"""

from pathlib import Path
from typing import Any

from loguru import logger

from confmap.config import ROOT_NAME
from confmap.core.importer.loader import load_document
from confmap.core.search.searcher import SearchCursor, search_tree
from confmap.core.tree.builder import build_tree
from confmap.core.tree.export import ExportFormat, export_lineage
from confmap.core.tree.lineage import lineage
from confmap.core.tree.navigation import find_node
from confmap.core.tree.overlay import collapse_ancestors_except, toggle_all
from confmap.models.node import (
    DisplayMode,
    DisplayOptions,
    LayoutMode,
    Node,
    SearchMatch,
    SearchOutcome,
    SearchStatus,
    ViewState,
)
from confmap.protocols import ClipboardProtocol, RendererProtocol
from confmap.render.payload import display_options


class Session:
    """One user exploring one document."""

    def __init__(
        self,
        *,
        renderer: RendererProtocol | None = None,
        clipboard: ClipboardProtocol | None = None,
    ) -> None:
        self.renderer = renderer
        self.clipboard = clipboard
        self.original: Node | None = None
        self.view: Node | None = None
        self.state = ViewState.NORMAL
        self.layout = LayoutMode.LR
        self.display_mode = DisplayMode.DEFAULT
        self.cursor: SearchCursor | None = None
        self._focused: Node | None = None
        self._state_before_search = ViewState.NORMAL

    @property
    def display(self) -> DisplayOptions:
        return display_options(self.display_mode)

    @property
    def loaded(self) -> bool:
        return self.original is not None

    def _base_view(self) -> Node | None:
        """The view searches start from: the focused lineage or the original."""
        return self._focused if self._focused is not None else self.original

    def _render(self) -> None:
        if self.renderer is not None and self.view is not None:
            self.renderer.render(self.view, layout=self.layout, display=self.display)

    def load(self, value: Any, *, name: str = ROOT_NAME) -> Node:
        """Build a fresh tree from a parsed document, discarding the old one."""
        self.original = build_tree(value, name)
        self.view = self.original
        self.state = ViewState.NORMAL
        self.cursor = None
        self._focused = None
        self._state_before_search = ViewState.NORMAL
        self._render()
        return self.original

    def load_file(self, path: Path) -> Node:
        """Load a document from disk.

        Parse errors propagate before any state changes, so the prior view
        stays intact.
        """
        value = load_document(path)
        logger.debug("Loaded {}", path.name)
        return self.load(value)

    def search(self, query: str) -> SearchOutcome | None:
        """Search the current base view. Returns None if nothing is loaded."""
        base = self._base_view()
        if base is None:
            logger.debug("search ignored: no document loaded")
            return None

        outcome = search_tree(base, query)
        if outcome.status is not SearchStatus.MATCHED:
            # an empty or unmatched query ends any previous search
            self.clear_search()
        else:
            if self.state is not ViewState.SEARCHING:
                self._state_before_search = self.state
            self.state = ViewState.SEARCHING
            self.view = outcome.tree
            self.cursor = SearchCursor(outcome.matches)
            self._render()
        return outcome

    def clear_search(self) -> None:
        """Drop search highlights and return to the state before searching."""
        if self.state is not ViewState.SEARCHING:
            return
        self.state = self._state_before_search
        self.view = self._base_view()
        self.cursor = None
        self._render()

    def next_result(self) -> SearchMatch | None:
        return self.cursor.next() if self.cursor else None

    def previous_result(self) -> SearchMatch | None:
        return self.cursor.previous() if self.cursor else None

    def focus_on(self, node_id: int) -> bool:
        """Show only the lineage of a node. Returns False if it does not exist."""
        if self.original is None or find_node(self.original, node_id) is None:
            logger.debug("focus ignored: node {} not found", node_id)
            return False
        self._focused = lineage(self.original, node_id)
        self.view = self._focused
        self.state = ViewState.FOCUSED
        self.cursor = None
        self._render()
        return True

    def unfocus(self) -> None:
        if self.original is None:
            return
        self._focused = None
        self.view = self.original
        self.state = ViewState.NORMAL
        self.cursor = None
        self._render()

    def reveal(self, node_id: int) -> bool:
        """Collapse the full tree down to the path leading to a node."""
        if self.original is None or not collapse_ancestors_except(self.original, node_id):
            logger.debug("reveal ignored: node {} not found", node_id)
            return False
        self._focused = None
        self.view = self.original
        self.state = ViewState.NORMAL
        self.cursor = None
        self._render()
        return True

    def toggle_expand_all(self) -> bool | None:
        """Expand or collapse the whole current view.

        Returns True if the view is now collapsed, None if nothing is loaded.
        """
        if self.view is None:
            return None
        collapsed = toggle_all(self.view)
        self._render()
        return collapsed

    def set_layout(self, mode: LayoutMode | str) -> None:
        self.layout = LayoutMode(mode)
        self._render()

    def set_display(self, mode: DisplayMode | str) -> None:
        self.display_mode = DisplayMode(mode)
        self._render()

    def copy_lineage(self, node_id: int, fmt: ExportFormat = ExportFormat.TREE) -> str:
        """Export a node's lineage from the current view as text.

        The text is also handed to the clipboard, if one is attached. Returns
        "" when the node is not in the current view.
        """
        if self.view is None:
            return ""
        text = export_lineage(self.view, node_id, fmt)
        if text and self.clipboard is not None:
            self.clipboard.write_text(text)
        return text
