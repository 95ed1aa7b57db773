"""
Configuration for the grid search engine and its text renderer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from src.game.board import DEFAULT_SCAN_ORDER, Direction


class AnsiColor(Enum):
    """Foreground colour escape codes."""

    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"


ANSI_RESET = "\x1b[0m"


@dataclass
class SearchConfig:
    """Configuration for GridSearch."""

    # Neighbour order used to break ties between equal-length paths
    scan_order: Tuple[Direction, ...] = DEFAULT_SCAN_ORDER

    def __post_init__(self):
        self.scan_order = tuple(self.scan_order)
        if sorted(d.name for d in self.scan_order) != sorted(d.name for d in Direction):
            raise ValueError(
                f"scan_order must list each direction exactly once, got {self.scan_order}"
            )


@dataclass
class RenderConfig:
    """Configuration for BoardRenderer."""

    cell_width: int = 3
    obstacle_token: str = "XX"
    colorize: bool = True
    path_color: AnsiColor = AnsiColor.RED
    obstacle_color: AnsiColor = AnsiColor.BLUE
    path_marker: str = "*"  # Highlight used instead of colour when colorize=False

    def __post_init__(self):
        if self.cell_width < 2:
            raise ValueError(f"cell_width must be at least 2, got {self.cell_width}")
