"""
Exceptions raised by the grid search engine.
"""


class PathfindingError(Exception):
    """Base class for grid search errors."""


class OutOfBoundsError(PathfindingError, ValueError):
    """A source, destination or obstacle cell lies outside the board."""

    def __init__(self, role: str, cell, width: int, height: int):
        self.role = role
        self.cell = cell
        super().__init__(
            f"{role} {cell} out of bounds [0, {width - 1}] x [0, {height - 1}]"
        )


class LabelChainError(PathfindingError, RuntimeError):
    """Path reconstruction found no neighbour carrying the previous layer."""

    def __init__(self, cell, layer: int):
        self.cell = cell
        self.layer = layer
        super().__init__(f"No neighbour of {cell} carries label {layer}")
