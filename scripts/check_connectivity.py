from __future__ import annotations

import argparse
import sys

import numpy as np

from maze_nav import generate_maze
from maze_nav.utils import (
    cells_connected_free,
    count_lattice_edges,
    count_lattice_nodes,
)


def main():
    parser = argparse.ArgumentParser(
        description="Smoke test: generated mazes must be connected trees"
    )
    parser.add_argument("--n", type=int, default=200)
    parser.add_argument("--height", type=int, default=21)
    parser.add_argument("--width", type=int, default=21)
    parser.add_argument("--seed", type=int, default=1234)
    args = parser.parse_args()

    rng = np.random.default_rng(int(args.seed))
    H, W = int(args.height), int(args.width)

    unreachable = 0
    cyclic = 0
    for _ in range(int(args.n)):
        sd = int(rng.integers(0, 2**32 - 1))
        maze = generate_maze(
            H, W, (1, 1), (H - 2, W - 2), rng=np.random.default_rng(sd)
        )
        occ = maze.to_occupancy()
        if not cells_connected_free(occ, maze.start_coord, maze.finish_coord):
            unreachable += 1
            print("[SMOKE] unreachable seed=", sd)
        if count_lattice_edges(maze.field) != count_lattice_nodes(maze.field) - 1:
            cyclic += 1
            print("[SMOKE] not a tree seed=", sd)

    print("[SMOKE] N=", int(args.n))
    print("[SMOKE] unreachable=", unreachable)
    print("[SMOKE] not_tree=", cyclic)
    if unreachable or cyclic:
        sys.exit(1)


if __name__ == "__main__":
    main()
