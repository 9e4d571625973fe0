"""Domain models for the mind map tree."""

from dataclasses import dataclass, field
from enum import Enum

from confmap.config import HIGHLIGHT_COLOR, HIGHLIGHT_WIDTH, NO_HIGHLIGHT_COLOR


class ValueKind(Enum):
    """How a document value is shaped."""

    SCALAR = "scalar"
    ORDERED = "ordered-collection"
    KEYED = "keyed-collection"


@dataclass(frozen=True)
class Highlight:
    """Border highlight drawn around a node label."""

    active: bool = False
    color: str = NO_HIGHLIGHT_COLOR
    width: int = 0


NO_HIGHLIGHT = Highlight()
SEARCH_HIGHLIGHT = Highlight(active=True, color=HIGHLIGHT_COLOR, width=HIGHLIGHT_WIDTH)


@dataclass
class Node:
    """A single node in the mind map tree.

    ``id`` is assigned once at build time and survives deep copies, so it can
    be used to address the same node across derived views.
    """

    id: int
    label: str
    depth: int
    children: list["Node"] | None = None
    collapsed: bool = False
    highlight: Highlight = field(default=NO_HIGHLIGHT)

    @property
    def is_parent(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True)
class Breadcrumb:
    """A single ancestor in a breadcrumb trail."""

    node_id: int
    label: str
    depth: int


class SearchStatus(Enum):
    CLEARED = "cleared"
    NO_MATCH = "no-match"
    MATCHED = "matched"


@dataclass(frozen=True)
class SearchMatch:
    """A node whose label contains the query."""

    node_id: int
    label: str
    depth: int


@dataclass(frozen=True)
class SearchOutcome:
    """Result of running a query over a tree."""

    status: SearchStatus
    query: str
    tree: Node
    matches: tuple[SearchMatch, ...] = ()

    @property
    def matched_labels(self) -> list[str]:
        return [m.label for m in self.matches]


class ViewState(Enum):
    """Which view of the document the session is showing."""

    NORMAL = "normal"
    SEARCHING = "searching"
    FOCUSED = "focused"


class LayoutMode(Enum):
    LR = "LR"
    TB = "TB"
    RADIAL = "radial"


class DisplayMode(Enum):
    DEFAULT = "default"
    MINIMAL = "minimal"
    ENHANCED = "enhanced"
    TECHNICAL = "technical"


@dataclass(frozen=True)
class DisplayOptions:
    """Edge styling flags passed to the renderer."""

    smooth_curves: bool = True
    line_shadows: bool = True
