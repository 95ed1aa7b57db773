from typing import Iterable, List, Optional, Sequence

from src.pathfinding.config import SearchConfig
from src.pathfinding.grid_search import GridSearch
from src.util.logger import logger

from .board import Cell, Direction


def next_direction(path: Sequence[Cell]) -> Optional[Direction]:
    """Direction of the first step along path, or None if there is no step."""
    if len(path) < 2:
        return None
    return Direction.between(path[0], path[1])


def path_to_directions(path: Sequence[Cell]) -> List[Direction]:
    return [Direction.between(a, b) for a, b in zip(path, path[1:])]


class MovePlanner:
    """Chooses the next move of a player head towards a target cell."""

    def __init__(self, width: int, height: int, config: Optional[SearchConfig] = None):
        self.search = GridSearch(width, height, config)
        self.logger = logger.bind(component="movement")

    def plan(
        self, head: Cell, target: Cell, obstacles: Iterable[Cell]
    ) -> Optional[Direction]:
        """Next direction for head, falling back to any free neighbour.

        Returns None when the head is already on the target or boxed in.
        """
        obstacles = set(obstacles)
        path = self.search.find_path(head, target, obstacles)
        if path is not None:
            return next_direction(path)

        self.logger.debug(f"No path from {head} to {target}, trying free neighbours")
        for direction in self.search.config.scan_order:
            nx, ny = direction.step(head)
            if (
                self.search.board.is_valid_position(nx, ny)
                and (nx, ny) not in obstacles
            ):
                return direction

        self.logger.warning(f"Head {head} is boxed in")
        return None
