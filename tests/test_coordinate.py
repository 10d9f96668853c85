from maze_nav.types import Coordinate, to_largest_odd_below


def test_even_axes_drop_to_odd():
    assert to_largest_odd_below((4, 6)) == Coordinate(3, 5)
    assert to_largest_odd_below((3, 8)) == Coordinate(3, 7)


def test_odd_axes_unchanged():
    assert to_largest_odd_below(Coordinate(5, 9)) == Coordinate(5, 9)


def test_zero_and_negative_values():
    assert to_largest_odd_below((0, 0)) == Coordinate(-1, -1)
    assert to_largest_odd_below((-2, -3)) == Coordinate(-3, -3)


def test_normalization_is_idempotent():
    for x in range(-6, 7):
        for y in range(-6, 7):
            once = to_largest_odd_below((x, y))
            assert to_largest_odd_below(once) == once
            assert once.x % 2 == 1 and once.y % 2 == 1


def test_offset_acts_as_vector():
    assert Coordinate(3, 3).offset(-2, 0) == Coordinate(1, 3)
