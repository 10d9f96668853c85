from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .constants import FINISH, START, WALL
from .types import Coordinate, CoordinateLike, as_coordinate


@dataclass(frozen=True)
class Maze:
    """
    Generated maze grid plus the resolved start/finish cells.

    - field: one string per row, ``wall_height`` rows of ``wall_width`` symbols
    - start_coord / finish_coord: odd-lattice coordinates stamped with S / F

    Instances are read-only; every query works on coordinates in (row, col) order.
    """

    field: Tuple[str, ...]
    wall_height: int
    wall_width: int
    start_coord: Coordinate
    finish_coord: Coordinate

    def __post_init__(self) -> None:
        assert len(self.field) == self.wall_height, "field must have wall_height rows"
        for row in self.field:
            assert len(row) == self.wall_width, "every row must have wall_width symbols"

    def get_object(self, location: CoordinateLike) -> str:
        """Symbol at ``location``. Raises IndexError outside the array."""
        x, y = as_coordinate(location)
        if x < 0 or y < 0 or x >= self.wall_height or y >= self.wall_width:
            raise IndexError(
                f"({x}, {y}) outside maze of size {self.wall_height}x{self.wall_width}"
            )
        return self.field[x][y]

    def is_wall(self, location: CoordinateLike) -> bool:
        return self.get_object(location) == WALL

    def is_inside_wall(self, location: CoordinateLike) -> bool:
        """True if ``location`` lies strictly inside the outer border ring."""
        x, y = as_coordinate(location)
        return 1 <= x <= self.wall_height - 2 and 1 <= y <= self.wall_width - 2

    def is_passable(self, location: CoordinateLike) -> bool:
        return self.is_inside_wall(location) and not self.is_wall(location)

    def start_object(self) -> str:
        return START

    def finish_object(self) -> str:
        return FINISH

    def to_occupancy(self) -> np.ndarray:
        """Bool array of shape (wall_height, wall_width); True = wall."""
        chars = np.array([list(row) for row in self.field], dtype="<U1")
        return chars == WALL

    def __str__(self) -> str:
        return "\n".join(self.field)
