from __future__ import annotations

from typing import Tuple

# Cell symbols
WALL: str = "#"
PASSAGE: str = "."
START: str = "S"
FINISH: str = "F"

# Lattice steps; order is also the repair BFS enqueue order
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -2),
    (0, 2),
    (-2, 0),
    (2, 0),
)

# Grid
MIN_MAZE_SIZE: int = 3
DEFAULT_MAZE_HEIGHT: int = 21
DEFAULT_MAZE_WIDTH: int = 21
