# grid.py
from enum import IntEnum
from typing import List, Tuple

import numpy as np  # type: ignore

from .config import GRID_W, GRID_H

Cell = Tuple[int, int]


class TileState(IntEnum):
    EMPTY = 0
    SNAKE = 1
    PELLET = 2
    DEAD = 3


class Grid:
    """
    Fixed-size board of tile states, indexed as grid[x, y].
    Access outside the board raises IndexError; gameplay code is expected
    to call in_bounds() before touching a cell.
    """

    def __init__(self, width: int = GRID_W, height: int = GRID_H):
        self.width = width
        self.height = height
        self._tiles = np.full((width, height), TileState.EMPTY, dtype=np.int8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")

    def get(self, x: int, y: int) -> TileState:
        self._check(x, y)
        return TileState(int(self._tiles[x, y]))

    def set(self, x: int, y: int, tile: TileState) -> None:
        self._check(x, y)
        self._tiles[x, y] = TileState(tile)

    def count(self, tile: TileState) -> int:
        return int(np.count_nonzero(self._tiles == tile))

    def empty_cells(self) -> List[Cell]:
        return [(int(x), int(y)) for x, y in np.argwhere(self._tiles == TileState.EMPTY)]

    def snapshot(self) -> np.ndarray:
        """Return a copy of the tile array, safe to hand to a renderer."""
        return self._tiles.copy()
