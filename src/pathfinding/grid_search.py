"""
Wavefront (Lee) shortest-path search on a bounded 4-connected grid.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from src.game.board import START, Board, Cell
from src.util.logger import logger

from .config import RenderConfig, SearchConfig
from .errors import LabelChainError, OutOfBoundsError
from .renderer import BoardRenderer


@dataclass
class SearchResult:
    """Result of a single search."""

    path: Optional[List[Cell]]
    path_length: int
    cells_labeled: int
    layers: int
    time_taken_ms: float

    @property
    def reachable(self) -> bool:
        return self.path is not None


class GridSearch:
    """Breadth-first wavefront search over a reusable label board.

    Every call resets the board, writes the obstacles, then labels cells
    layer by layer starting with the source at 1. Paths are rebuilt by
    walking labels back from the destination, taking the first neighbour
    in ``config.scan_order`` that carries the previous layer.

    Not safe for overlapping calls from several threads: the board is
    mutated in place. Use one instance per worker.
    """

    def __init__(
        self,
        width: int,
        height: int,
        config: Optional[SearchConfig] = None,
        render_config: Optional[RenderConfig] = None,
    ):
        self.board = Board(width, height)
        self.config = config or SearchConfig()
        self.renderer = BoardRenderer(render_config)
        self.logger = logger.bind(component="grid_search")
        self._search_count = 0

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def find_path(
        self, source: Cell, destination: Cell, obstacles: Iterable[Cell]
    ) -> Optional[List[Cell]]:
        """Shortest path from source to destination, both inclusive.

        Returns None when the destination cannot be reached.
        """
        return self.trace(source, destination, obstacles).path

    def is_reachable(
        self, source: Cell, destination: Cell, obstacles: Iterable[Cell]
    ) -> bool:
        found, _ = self._fill(source, destination, obstacles)
        return found

    def trace(
        self, source: Cell, destination: Cell, obstacles: Iterable[Cell]
    ) -> SearchResult:
        """Run a full search and reconstruct the path if one exists.

        Args:
            source: Start cell
            destination: Target cell
            obstacles: Cells to block for this query; duplicates are allowed

        Returns:
            SearchResult with the path, or path=None when unreachable
        """
        start_time = time.time()
        found, layer = self._fill(source, destination, obstacles)
        path = self._backtrack(destination, layer) if found else None
        elapsed_ms = (time.time() - start_time) * 1000

        return SearchResult(
            path=path,
            path_length=len(path) if path else 0,
            cells_labeled=self.board.labeled_cells(),
            layers=layer,
            time_taken_ms=elapsed_ms,
        )

    def _check_bounds(self, role: str, cell: Cell) -> None:
        if not self.board.is_valid_position(cell[0], cell[1]):
            raise OutOfBoundsError(role, cell, self.width, self.height)

    def _fill(
        self, source: Cell, destination: Cell, obstacles: Iterable[Cell]
    ) -> Tuple[bool, int]:
        """Label the board from source. Returns (found, last layer written)."""
        obstacles = list(obstacles)
        self._check_bounds("source", source)
        self._check_bounds("destination", destination)
        for cell in obstacles:
            self._check_bounds("obstacle", cell)

        self._search_count += 1
        log = self.logger.bind(search_id=self._search_count)

        self.board.reset()
        self.board.mark_obstacles(obstacles)
        self.board.set(source, START)

        layer = START
        found = source == destination
        current: Set[Cell] = {source}
        while current and not found:
            layer += 1
            next_frontier: Set[Cell] = set()
            for cell in current:
                next_frontier.update(self.board.unvisited_neighbors(cell))
            for cell in next_frontier:
                self.board.set(cell, layer)
            found = destination in next_frontier
            current = next_frontier

        if not found:
            # The last layer expanded came back empty
            layer -= 1

        log.debug(
            f"{source} -> {destination}: reachable={found}, layers={layer}, "
            f"obstacles={len(obstacles)}"
        )
        return found, layer

    def _backtrack(self, destination: Cell, layer: int) -> List[Cell]:
        path = deque([destination])
        current = destination
        for label in range(layer - 1, START - 1, -1):
            candidates = self.board.neighbors_with_label(
                current, label, self.config.scan_order
            )
            if not candidates:
                self.logger.error(
                    f"Label chain broken at {current}: no neighbour labeled {label}"
                )
                raise LabelChainError(current, label)
            current = candidates[0]
            path.appendleft(current)
        return list(path)

    def render(self, path: Iterable[Cell] = ()) -> str:
        """Render the labels left by the last search, highlighting path."""
        return self.renderer.render(self.board, path)

    def __str__(self) -> str:
        return self.render()
