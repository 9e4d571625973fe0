"""Configuration constants for confmap."""

# Collections with more direct children than this are split into clusters,
# provided at least one child has structure of its own.
CLUSTER_THRESHOLD: int = 10
CLUSTER_SIZE: int = 10

# Parent nodes at this depth or deeper start out collapsed.
VISIBILITY_HORIZON: int = 2

ROOT_NAME: str = "root"

# Label background per depth level, cycled for deeper trees.
COLORS: list[str] = [
    "#d6dffc",  # root
    "#b8e0d2",
    "#ffe6b8",
    "#a9e2da",
    "#ffd1b3",
    "#c0f1ff",
    "#ffb6b9",
    "#a7d0f2",
    "#ffe8a3",
    "#c7e9c0",
    "#ffcfa8",
    "#b5b3ff",
    "#f7c6e0",
]

HIGHLIGHT_COLOR: str = "crimson"
HIGHLIGHT_WIDTH: int = 2
NO_HIGHLIGHT_COLOR: str = "transparent"

YAML_SUFFIXES: tuple[str, ...] = (".yml", ".yaml")
JSON_SUFFIXES: tuple[str, ...] = (".json",)
