"""Finish connectivity repair.

Used when carving leaves the finish cell as wall. The finish is opened and
joined to the nearest carved cell on the odd lattice, first by a direct
neighbour check and otherwise by a breadth-first search.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Optional

import numpy as np

from .constants import DIRECTIONS, PASSAGE
from .errors import MazeRepairError
from .types import Coordinate

logger = logging.getLogger(__name__)


def _is_interior(grid: np.ndarray, c: Coordinate) -> bool:
    H, W = grid.shape
    return 0 < c.x < H - 1 and 0 < c.y < W - 1


def _open(grid: np.ndarray, c: Coordinate) -> int:
    if grid[c.x, c.y] == PASSAGE:
        return 0
    grid[c.x, c.y] = PASSAGE
    return 1


def _carve_corridor(grid: np.ndarray, src: Coordinate, dst: Coordinate) -> int:
    """Open ``src`` and the lattice walls stepping towards ``dst``, axis by axis."""
    opened = 0
    x, y = src
    step_x = 2 if dst.x > x else -2
    step_y = 2 if dst.y > y else -2
    while x != dst.x or y != dst.y:
        opened += _open(grid, Coordinate(x, y))
        if x != dst.x:
            opened += _open(grid, Coordinate(x + step_x // 2, y))
            x += step_x
        else:
            opened += _open(grid, Coordinate(x, y + step_y // 2))
            y += step_y
    return opened


def ensure_path_to_finish(grid: np.ndarray, finish: Coordinate) -> int:
    """Join ``finish`` to the carved region of ``grid`` in place.

    Returns the number of cells that were opened.
    """
    opened = _open(grid, finish)

    for dx, dy in DIRECTIONS:
        nb = finish.offset(dx, dy)
        if _is_interior(grid, nb) and grid[nb.x, nb.y] == PASSAGE:
            opened += _open(grid, Coordinate((finish.x + nb.x) // 2, (finish.y + nb.y) // 2))
            logger.debug("Finish %s joined to neighbour %s", tuple(finish), tuple(nb))
            return opened

    # Nothing adjacent: search outwards for the closest carved cell
    parent: Dict[Coordinate, Optional[Coordinate]] = {finish: None}
    q: deque[Coordinate] = deque([finish])
    while q:
        current = q.popleft()
        for dx, dy in DIRECTIONS:
            nxt = current.offset(dx, dy)
            if not _is_interior(grid, nxt) or nxt in parent:
                continue
            parent[nxt] = current
            if grid[nxt.x, nxt.y] != PASSAGE:
                q.append(nxt)
                continue
            # Walk back from the discovered cell to the finish
            node: Coordinate = nxt
            prev = parent[node]
            while prev is not None:
                opened += _carve_corridor(grid, prev, node)
                node, prev = prev, parent[prev]
            logger.debug(
                "Finish %s joined to %s through %d opened cells",
                tuple(finish),
                tuple(nxt),
                opened,
            )
            return opened

    raise MazeRepairError(f"No carved cell reachable from finish {tuple(finish)}")


__all__ = ["ensure_path_to_finish"]
