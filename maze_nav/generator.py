"""Perfect-maze generation on the odd lattice.

Nodes live on odd (row, col) cells and the even cell between two nodes is the
wall cleared to connect them. Carving is an iterative randomized depth-first
backtrack from the start cell, followed by a finish repair pass if needed.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .config import MazeConfig
from .constants import DIRECTIONS, FINISH, MIN_MAZE_SIZE, PASSAGE, START, WALL
from .errors import (
    FinishOutOfBoundsError,
    SamePositionError,
    SizeTooSmallError,
    StartOutOfBoundsError,
)
from .maze import Maze
from .repair import ensure_path_to_finish
from .types import Coordinate, CoordinateLike, to_largest_odd_below

logger = logging.getLogger(__name__)


class MazeGenerator:
    """Generate mazes from a shared random source.

    Args:
        rng: NumPy random generator; a fresh unseeded one is used if omitted.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def generate(
        self,
        height: int,
        width: int,
        start: CoordinateLike,
        finish: CoordinateLike,
    ) -> Maze:
        height = int(height)
        width = int(width)
        odd_start = to_largest_odd_below(start)
        odd_finish = to_largest_odd_below(finish)
        self._validate(height, width, odd_start, odd_finish)

        grid = np.full((height, width), WALL, dtype="<U1")
        self._carve(grid, odd_start)

        if grid[odd_finish.x, odd_finish.y] == WALL:
            logger.info("Finish %s isolated after carving, repairing", tuple(odd_finish))
            self._repair(grid, odd_finish)

        grid[odd_start.x, odd_start.y] = START
        grid[odd_finish.x, odd_finish.y] = FINISH

        return Maze(
            field=tuple("".join(row) for row in grid),
            wall_height=height,
            wall_width=width,
            start_coord=odd_start,
            finish_coord=odd_finish,
        )

    @staticmethod
    def _validate(height: int, width: int, start: Coordinate, finish: Coordinate) -> None:
        if height < MIN_MAZE_SIZE or width < MIN_MAZE_SIZE:
            raise SizeTooSmallError(height, width)
        if not (0 < start.x < height - 1 and 0 < start.y < width - 1):
            raise StartOutOfBoundsError(start.x, start.y)
        if not (0 < finish.x < height - 1 and 0 < finish.y < width - 1):
            raise FinishOutOfBoundsError(finish.x, finish.y)
        if start == finish:
            raise SamePositionError(start.x, start.y)

    @staticmethod
    def _unvisited_neighbors(grid: np.ndarray, pos: Coordinate) -> List[Coordinate]:
        H, W = grid.shape
        neighbors = []
        for dx, dy in DIRECTIONS:
            nb = pos.offset(dx, dy)
            if 0 < nb.x < H - 1 and 0 < nb.y < W - 1 and grid[nb.x, nb.y] == WALL:
                neighbors.append(nb)
        return neighbors

    def _carve(self, grid: np.ndarray, start: Coordinate) -> None:
        """Randomized depth-first backtracking over the odd lattice."""
        grid[start.x, start.y] = PASSAGE
        stack: List[Coordinate] = [start]
        while stack:
            current = stack[-1]
            neighbors = self._unvisited_neighbors(grid, current)
            if not neighbors:
                stack.pop()
                continue
            nxt = neighbors[int(self.rng.integers(len(neighbors)))]
            grid[(current.x + nxt.x) // 2, (current.y + nxt.y) // 2] = PASSAGE
            grid[nxt.x, nxt.y] = PASSAGE
            stack.append(nxt)

    def _repair(self, grid: np.ndarray, finish: Coordinate) -> None:
        opened = ensure_path_to_finish(grid, finish)
        logger.debug("Repair opened %d cells", opened)


def generate_maze(
    height: int,
    width: int,
    start: CoordinateLike,
    finish: CoordinateLike,
    rng: Optional[np.random.Generator] = None,
) -> Maze:
    """Generate a perfect maze with a guaranteed start-to-finish path.

    Coordinates are (row, col) and are snapped to the odd lattice first.
    Raises a ``MazeError`` subclass for rejected sizes or positions.
    """
    return MazeGenerator(rng).generate(height, width, start, finish)


def generate_from_config(cfg: Optional[MazeConfig] = None) -> Maze:
    c = cfg or MazeConfig()
    rng = np.random.default_rng(c.seed)
    return generate_maze(c.height, c.width, c.resolved_start(), c.resolved_finish(), rng)


__all__ = ["MazeGenerator", "generate_maze", "generate_from_config"]
