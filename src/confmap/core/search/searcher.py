"""Substring search over the mind map tree."""

import copy

from loguru import logger

from confmap.core.tree.overlay import clear_highlights
from confmap.models.node import (
    NO_HIGHLIGHT,
    SEARCH_HIGHLIGHT,
    Node,
    SearchMatch,
    SearchOutcome,
    SearchStatus,
)


def search_tree(tree: Node, query: str) -> SearchOutcome:
    """Highlight every node whose label contains the query.

    Works on a deep copy of ``tree``. Matching is case-insensitive. Every
    matching parent and every ancestor of a match is expanded so all hits are
    visible without further clicks.

    Args:
        tree: The view to search (original or a derived view).
        query: Search text. Blank means "clear the search".

    Returns:
        SearchOutcome whose matches are in pre-order.
    """
    annotated = copy.deepcopy(tree)
    term = query.strip().lower()
    if not term:
        clear_highlights(annotated)
        return SearchOutcome(status=SearchStatus.CLEARED, query=query, tree=annotated)

    matches: list[SearchMatch] = []

    def traverse(node: Node) -> bool:
        is_match = term in node.label.lower()
        node.highlight = SEARCH_HIGHLIGHT if is_match else NO_HIGHLIGHT
        if is_match:
            matches.append(SearchMatch(node_id=node.id, label=node.label, depth=node.depth))

        # No short-circuit: every child has to be visited for its highlight
        child_found = False
        for child in node.children or ():
            child_found = traverse(child) or child_found
        if node.is_parent and (is_match or child_found):
            node.collapsed = False
        return is_match or child_found

    traverse(annotated)

    if not matches:
        logger.debug("No nodes match {!r}", query)
        return SearchOutcome(status=SearchStatus.NO_MATCH, query=query, tree=annotated)

    logger.debug("{} nodes match {!r}", len(matches), query)
    return SearchOutcome(
        status=SearchStatus.MATCHED, query=query, tree=annotated, matches=tuple(matches)
    )


class SearchCursor:
    """Cycles through search matches, wrapping at both ends."""

    def __init__(self, matches: tuple[SearchMatch, ...]) -> None:
        self.matches = matches
        self.index = 0

    @property
    def current(self) -> SearchMatch | None:
        if not self.matches:
            return None
        return self.matches[self.index]

    def next(self) -> SearchMatch | None:
        if not self.matches:
            return None
        self.index = (self.index + 1) % len(self.matches)
        return self.matches[self.index]

    def previous(self) -> SearchMatch | None:
        if not self.matches:
            return None
        self.index = (self.index - 1) % len(self.matches)
        return self.matches[self.index]
