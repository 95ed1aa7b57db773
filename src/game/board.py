from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import numpy as np

Cell = Tuple[int, int]

EMPTY = 0
START = 1
OBSTACLE = -10


class Direction(Enum):
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    def step(self, cell: Cell) -> Cell:
        return (cell[0] + self.dx, cell[1] + self.dy)

    @classmethod
    def between(cls, a: Cell, b: Cell) -> "Direction":
        """Direction of the single step that moves from a to b."""
        delta = (b[0] - a[0], b[1] - a[1])
        for direction in cls:
            if direction.value == delta:
                return direction
        raise ValueError(f"Cells {a} and {b} are not 4-adjacent")


# Reconstruction tie-break: the first neighbour found in this order wins.
DEFAULT_SCAN_ORDER: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.LEFT,
    Direction.DOWN,
    Direction.RIGHT,
)


class Board:
    """Rectangular grid of integer search labels.

    Labels are EMPTY (unvisited), OBSTACLE, or a positive BFS layer number
    with the search source stamped as START.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.grid = np.zeros((height, width), dtype=int)

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, cell: Cell) -> int:
        x, y = cell
        return int(self.grid[y, x])

    def set(self, cell: Cell, value: int) -> None:
        x, y = cell
        self.grid[y, x] = value

    def is_unvisited(self, cell: Cell) -> bool:
        return self.get(cell) == EMPTY

    def is_obstacle(self, cell: Cell) -> bool:
        return self.get(cell) == OBSTACLE

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def mark_obstacles(self, cells: Iterable[Cell]) -> None:
        for cell in cells:
            self.set(cell, OBSTACLE)

    def neighbors(
        self, cell: Cell, order: Sequence[Direction] = DEFAULT_SCAN_ORDER
    ) -> List[Cell]:
        neighbors = []
        for direction in order:
            nx, ny = direction.step(cell)
            if self.is_valid_position(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def unvisited_neighbors(
        self, cell: Cell, order: Sequence[Direction] = DEFAULT_SCAN_ORDER
    ) -> List[Cell]:
        return [n for n in self.neighbors(cell, order) if self.is_unvisited(n)]

    def neighbors_with_label(
        self, cell: Cell, label: int, order: Sequence[Direction] = DEFAULT_SCAN_ORDER
    ) -> List[Cell]:
        return [n for n in self.neighbors(cell, order) if self.get(n) == label]

    def labeled_cells(self) -> int:
        return int(np.count_nonzero(self.grid > EMPTY))

    def copy(self) -> "Board":
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "grid": self.grid.tolist(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        board = cls(data["width"], data["height"])
        board.grid = np.array(data["grid"], dtype=int)
        return board

    def __str__(self) -> str:
        result = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                value = int(self.grid[y, x])
                row.append(" XX" if value == OBSTACLE else f"{value:3d}")
            result.append("".join(row))
        return "\n".join(result)
