"""Convert a Node tree into the data shape consumed by the chart renderer."""

from typing import Any

from confmap.config import COLORS
from confmap.models.node import DisplayMode, DisplayOptions, Node

_DISPLAY_OPTIONS: dict[DisplayMode, DisplayOptions] = {
    DisplayMode.DEFAULT: DisplayOptions(smooth_curves=True, line_shadows=True),
    DisplayMode.MINIMAL: DisplayOptions(smooth_curves=False, line_shadows=False),
    DisplayMode.ENHANCED: DisplayOptions(smooth_curves=True, line_shadows=True),
    DisplayMode.TECHNICAL: DisplayOptions(smooth_curves=False, line_shadows=True),
}


def color_for_depth(depth: int) -> str:
    """Label background for a depth level, cycling through the palette."""
    return COLORS[depth % len(COLORS)]


def display_options(mode: DisplayMode) -> DisplayOptions:
    return _DISPLAY_OPTIONS[mode]


def to_chart_data(tree: Node) -> dict[str, Any]:
    """Serialize a tree recursively into chart series data.

    ``collapsed`` and ``children`` are only present on parent nodes.
    """
    data: dict[str, Any] = {
        "id": tree.id,
        "name": tree.label,
        "depth": tree.depth,
        "isParent": tree.is_parent,
        "itemStyle": {"color": "transparent", "borderColor": "transparent", "borderWidth": 0},
        "label": {
            "backgroundColor": color_for_depth(tree.depth),
            "borderColor": tree.highlight.color,
            "borderWidth": tree.highlight.width,
        },
    }
    if tree.is_parent:
        data["collapsed"] = tree.collapsed
        data["children"] = [to_chart_data(child) for child in tree.children or ()]
    return data
