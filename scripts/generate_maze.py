from __future__ import annotations

import argparse
import logging
import sys

from maze_nav import MazeConfig, MazeError, generate_from_config
from maze_nav.utils import load_maze_config


def main():
    parser = argparse.ArgumentParser(description="Generate a maze and print it")
    parser.add_argument("--config", type=str, default=None, help="YAML config path")
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--finish", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = load_maze_config(args.config) if args.config else MazeConfig()
    # CLI flags override the file
    for name in ("height", "width", "seed", "start", "finish"):
        value = getattr(args, name)
        if value is not None:
            setattr(cfg, name, tuple(value) if isinstance(value, list) else value)

    try:
        maze = generate_from_config(cfg)
    except MazeError as exc:
        print(f"[MAZE] error: {exc}", file=sys.stderr)
        sys.exit(2)

    print(maze)
    print("[MAZE] size=", f"{maze.wall_height}x{maze.wall_width}")
    print("[MAZE] start=", tuple(maze.start_coord), "finish=", tuple(maze.finish_coord))


if __name__ == "__main__":
    main()
