from __future__ import annotations

from collections import deque
from typing import Sequence, Tuple

import numpy as np

from ..constants import WALL

_NEIGH_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))
_NEIGH_8 = _NEIGH_4 + ((1, 1), (1, -1), (-1, 1), (-1, -1))


def occupancy_from_rows(rows: Sequence[str]) -> np.ndarray:
    """Convert maze rows to a bool grid (True = wall)."""
    if not rows:
        raise ValueError("rows must not be empty")
    return np.array([[ch == WALL for ch in row] for row in rows], dtype=bool)


def _flood(grid: np.ndarray, start_ij: Tuple[int, int], neigh) -> np.ndarray:
    H, W = grid.shape
    si, sj = start_ij
    visited = np.zeros_like(grid, dtype=bool)
    if si < 0 or sj < 0 or si >= H or sj >= W or grid[si, sj]:
        return visited

    q: deque[Tuple[int, int]] = deque()
    q.append((si, sj))
    visited[si, sj] = True
    while q:
        i, j = q.popleft()
        for di, dj in neigh:
            ni = i + di
            nj = j + dj
            if 0 <= ni < H and 0 <= nj < W and not grid[ni, nj] and not visited[ni, nj]:
                visited[ni, nj] = True
                q.append((ni, nj))
    return visited


def cells_connected_free(
    grid: np.ndarray,
    start_ij: Tuple[int, int],
    goal_ij: Tuple[int, int],
    connectivity: int = 4,
) -> bool:
    """Return True if start and goal are connected through free (False) cells.

    grid: bool array with True for walls, False for free.
    connectivity: 4 or 8.
    """
    if grid.ndim != 2:
        raise ValueError("grid must be 2D")
    if connectivity == 4:
        neigh = _NEIGH_4
    elif connectivity == 8:
        neigh = _NEIGH_8
    else:
        raise ValueError("connectivity must be 4 or 8")

    H, W = grid.shape
    gi, gj = goal_ij
    if gi < 0 or gj < 0 or gi >= H or gj >= W:
        return False
    return bool(_flood(grid, start_ij, neigh)[gi, gj])


def reachable_free_cells(grid: np.ndarray, start_ij: Tuple[int, int]) -> int:
    """Number of free cells 4-connected to ``start_ij`` (0 if it is a wall)."""
    if grid.ndim != 2:
        raise ValueError("grid must be 2D")
    return int(_flood(grid, start_ij, _NEIGH_4).sum())


def count_lattice_nodes(rows: Sequence[str]) -> int:
    """Open cells with both indices odd."""
    free = ~occupancy_from_rows(rows)
    return int(free[1::2, 1::2].sum())


def count_lattice_edges(rows: Sequence[str]) -> int:
    """Open edge cells joining two open odd-lattice nodes.

    A perfect maze over n open nodes has exactly n - 1 of these.
    """
    free = ~occupancy_from_rows(rows)
    H, W = free.shape
    edges = 0
    for i in range(1, H - 1):
        for j in range(1, W - 1):
            if not free[i, j] or (i % 2 == 1 and j % 2 == 1):
                continue
            if i % 2 == 1 and j % 2 == 0:
                edges += int(free[i, j - 1] and free[i, j + 1])
            elif i % 2 == 0 and j % 2 == 1:
                edges += int(free[i - 1, j] and free[i + 1, j])
    return edges


__all__ = [
    "occupancy_from_rows",
    "cells_connected_free",
    "reachable_free_cells",
    "count_lattice_nodes",
    "count_lattice_edges",
]
