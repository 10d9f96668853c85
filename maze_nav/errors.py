"""Exceptions raised while generating a maze."""

from __future__ import annotations


class MazeError(ValueError):
    """Base class for rejected generation requests."""


class SizeTooSmallError(MazeError):
    def __init__(self, height: int, width: int) -> None:
        super().__init__(f"Maze size too small: {height}x{width}. Minimum is 3x3.")
        self.height = height
        self.width = width


class StartOutOfBoundsError(MazeError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Start position out of bounds: ({x}, {y})")
        self.coord = (x, y)


class FinishOutOfBoundsError(MazeError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Finish position out of bounds: ({x}, {y})")
        self.coord = (x, y)


class SamePositionError(MazeError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Start and finish positions cannot be the same: ({x}, {y})")
        self.coord = (x, y)


class MazeRepairError(RuntimeError):
    """No carved cell could be reached from the finish."""
