"""
Text rendering of a labeled search board.
"""

from typing import Iterable, Optional, Set

from src.game.board import OBSTACLE, Board, Cell

from .config import ANSI_RESET, AnsiColor, RenderConfig


def colored(text: str, color: AnsiColor) -> str:
    return f"{color.value}{text}{ANSI_RESET}"


def format_cell(label: int, on_path: bool, config: RenderConfig) -> str:
    """Format one board label as a fixed-width string.

    Obstacles always show the obstacle token, even when listed in the path.
    """
    width = config.cell_width
    if label == OBSTACLE:
        token = config.obstacle_token.rjust(width)
        return colored(token, config.obstacle_color) if config.colorize else token

    if not on_path:
        return f"{label:{width}d}"

    if config.colorize:
        return colored(f"{label:{width}d}", config.path_color)
    return f"{config.path_marker}{label:{width - 1}d}"


class BoardRenderer:
    """Renders a Board row by row, one output line per row."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render(self, board: Board, path: Iterable[Cell] = ()) -> str:
        on_path: Set[Cell] = set(path)
        rows = []
        for y in range(board.height):
            rows.append(
                "".join(
                    format_cell(board.get((x, y)), (x, y) in on_path, self.config)
                    for x in range(board.width)
                )
            )
        return "\n".join(rows)
