"""
Shortest-path search on a bounded 4-connected grid.

Labels cells with their breadth-first distance from a source and walks the
labels back from the destination to recover a shortest path.
"""

from .config import AnsiColor, RenderConfig, SearchConfig
from .errors import LabelChainError, OutOfBoundsError, PathfindingError
from .grid_search import GridSearch, SearchResult
from .renderer import BoardRenderer, format_cell

__all__ = [
    "GridSearch",
    "SearchResult",
    "SearchConfig",
    "BoardRenderer",
    "RenderConfig",
    "AnsiColor",
    "format_cell",
    "PathfindingError",
    "OutOfBoundsError",
    "LabelChainError",
]
