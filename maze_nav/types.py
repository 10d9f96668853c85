from __future__ import annotations

from typing import NamedTuple, Tuple, Union


class Coordinate(NamedTuple):
    """Grid coordinate. ``x`` indexes rows, ``y`` indexes columns."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)


CoordinateLike = Union[Coordinate, Tuple[int, int]]


def as_coordinate(value: CoordinateLike) -> Coordinate:
    x, y = value
    return Coordinate(int(x), int(y))


def to_largest_odd_below(coord: CoordinateLike) -> Coordinate:
    """Snap a coordinate onto the odd lattice.

    Each axis is handled independently: even values drop by one, odd values
    are kept. ``(0, 4) -> (-1, 3)``.
    """
    x, y = as_coordinate(coord)
    return Coordinate(x - 1 if x % 2 == 0 else x, y - 1 if y % 2 == 0 else y)
