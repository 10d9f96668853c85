"""Utility helpers shared by the generator, scripts and tests."""

from .config import load_config_dict, load_config_any, load_maze_config
from .connectivity import (
    cells_connected_free,
    count_lattice_edges,
    count_lattice_nodes,
    occupancy_from_rows,
    reachable_free_cells,
)

__all__ = [
    "load_config_dict",
    "load_config_any",
    "load_maze_config",
    "cells_connected_free",
    "count_lattice_edges",
    "count_lattice_nodes",
    "occupancy_from_rows",
    "reachable_free_cells",
]
