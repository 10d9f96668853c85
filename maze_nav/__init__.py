"""Perfect-maze generation on a rectangular grid."""

from .config import MazeConfig
from .errors import (
    FinishOutOfBoundsError,
    MazeError,
    MazeRepairError,
    SamePositionError,
    SizeTooSmallError,
    StartOutOfBoundsError,
)
from .generator import MazeGenerator, generate_from_config, generate_maze
from .maze import Maze
from .types import Coordinate, to_largest_odd_below

__all__ = [
    "Coordinate",
    "Maze",
    "MazeConfig",
    "MazeGenerator",
    "generate_maze",
    "generate_from_config",
    "to_largest_odd_below",
    "MazeError",
    "SizeTooSmallError",
    "StartOutOfBoundsError",
    "FinishOutOfBoundsError",
    "SamePositionError",
    "MazeRepairError",
]
