import numpy as np
import pytest

from maze_nav import (
    FinishOutOfBoundsError,
    MazeGenerator,
    SamePositionError,
    SizeTooSmallError,
    StartOutOfBoundsError,
    generate_maze,
)
from maze_nav.constants import FINISH, PASSAGE, START, WALL
from maze_nav.utils import (
    cells_connected_free,
    count_lattice_edges,
    count_lattice_nodes,
)

SIZES = [(5, 5), (7, 11), (8, 8), (10, 13), (21, 21)]


@pytest.mark.parametrize("height,width", [(2, 5), (5, 2), (0, 0)])
def test_size_too_small(height, width):
    with pytest.raises(SizeTooSmallError):
        generate_maze(height, width, (1, 1), (3, 3))


def test_size_checked_before_positions():
    with pytest.raises(SizeTooSmallError):
        generate_maze(2, 2, (100, 100), (100, 100))


def test_start_out_of_bounds():
    with pytest.raises(StartOutOfBoundsError):
        generate_maze(7, 7, (0, 3), (5, 5))
    with pytest.raises(StartOutOfBoundsError):
        generate_maze(7, 7, (7, 3), (5, 5))


def test_finish_out_of_bounds():
    # (6, 6) snaps to (5, 5) which is inside; (7, 5) stays on the border
    generate_maze(7, 7, (1, 1), (6, 6), rng=np.random.default_rng(0))
    with pytest.raises(FinishOutOfBoundsError):
        generate_maze(7, 7, (1, 1), (7, 5))


def test_same_position_after_normalization():
    with pytest.raises(SamePositionError):
        generate_maze(3, 3, (1, 1), (2, 2))
    with pytest.raises(SamePositionError):
        generate_maze(9, 9, (4, 4), (3, 3))


def test_raw_origin_snaps_outside_border():
    # (0, 0) snaps to (-1, -1), so the start check fires first
    with pytest.raises(StartOutOfBoundsError):
        generate_maze(3, 3, (0, 0), (2, 2))


def test_error_messages_mention_values():
    with pytest.raises(SizeTooSmallError, match="2x5"):
        generate_maze(2, 5, (1, 1), (1, 3))
    with pytest.raises(FinishOutOfBoundsError, match=r"\(9, 1\)"):
        generate_maze(5, 5, (1, 1), (9, 1))


def test_small_scenario_5x5():
    maze = generate_maze(5, 5, (1, 1), (3, 3), rng=np.random.default_rng(7))
    assert maze.start_coord == (1, 1)
    assert maze.finish_coord == (3, 3)
    assert len(maze.field) == 5 and all(len(r) == 5 for r in maze.field)
    assert maze.get_object((1, 1)) == START
    assert maze.get_object((3, 3)) == FINISH
    assert set("".join(maze.field)) <= {WALL, PASSAGE, START, FINISH}
    assert cells_connected_free(maze.to_occupancy(), (1, 1), (3, 3))


@pytest.mark.parametrize("height,width", SIZES)
def test_structural_properties_over_seeds(height, width):
    for seed in range(25):
        rng = np.random.default_rng(seed)
        maze = generate_maze(height, width, (1, 1), (height - 2, width - 2), rng=rng)

        assert len(maze.field) == height
        assert all(len(row) == width for row in maze.field)
        assert maze.get_object(maze.start_coord) == START
        assert maze.get_object(maze.finish_coord) == FINISH
        assert maze.start_coord != maze.finish_coord

        occ = maze.to_occupancy()
        # Border ring is never carved
        assert occ[0, :].all() and occ[-1, :].all()
        assert occ[:, 0].all() and occ[:, -1].all()
        # No open cell sits on (even, even)
        assert occ[::2, ::2].all()

        assert cells_connected_free(occ, maze.start_coord, maze.finish_coord)
        nodes = count_lattice_nodes(maze.field)
        assert count_lattice_edges(maze.field) == nodes - 1


@pytest.mark.parametrize("height,width", SIZES)
def test_carve_spans_every_interior_node(height, width):
    maze = generate_maze(height, width, (1, 1), (height - 2, width - 2), rng=np.random.default_rng(3))
    expected = len(range(1, height - 1, 2)) * len(range(1, width - 1, 2))
    assert count_lattice_nodes(maze.field) == expected


def test_same_seed_same_maze():
    a = generate_maze(15, 15, (1, 1), (13, 13), rng=np.random.default_rng(42))
    b = generate_maze(15, 15, (1, 1), (13, 13), rng=np.random.default_rng(42))
    assert a.field == b.field


def test_start_may_be_anywhere_inside():
    maze = generate_maze(11, 11, (6, 6), (1, 1), rng=np.random.default_rng(5))
    assert maze.start_coord == (5, 5)
    assert maze.get_object((5, 5)) == START
    assert maze.get_object((1, 1)) == FINISH


def test_generator_reuses_its_rng():
    gen = MazeGenerator(np.random.default_rng(11))
    first = gen.generate(11, 11, (1, 1), (9, 9))
    second = gen.generate(11, 11, (1, 1), (9, 9))
    assert first.wall_height == second.wall_height == 11
