import pytest

from adventsolutions.y2022.day08 import EXAMPLE, count_visible, is_visible, parse_grid


def test_parse_grid_rows_match_text():
    grid = parse_grid("30373\n25512")
    assert grid == [[3, 0, 3, 7, 3], [2, 5, 5, 1, 2]]


def test_parse_grid_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_grid("12a\n345")


def test_border_trees_are_never_visible():
    grid = parse_grid(EXAMPLE)
    last = len(grid) - 1
    for i in range(len(grid)):
        assert not is_visible(grid, 0, i)
        assert not is_visible(grid, last, i)
        assert not is_visible(grid, i, 0)
        assert not is_visible(grid, i, last)


def test_taller_centre_is_visible():
    grid = parse_grid("000\n010\n000")
    assert is_visible(grid, 1, 1) is True


def test_hidden_centre_is_not_visible():
    grid = parse_grid("999\n919\n999")
    assert is_visible(grid, 1, 1) is False


def test_equal_height_blocks_view():
    grid = parse_grid("050\n555\n050")
    assert is_visible(grid, 1, 1) is False


def test_out_of_range_position_raises():
    grid = parse_grid(EXAMPLE)
    with pytest.raises(IndexError):
        is_visible(grid, -1, 2)


def test_count_visible_example():
    assert count_visible(parse_grid(EXAMPLE)) == 3


def test_count_visible_bounded_by_interior():
    grid = parse_grid(EXAMPLE)
    interior = (len(grid) - 2) * (len(grid[0]) - 2)
    assert 0 <= count_visible(grid) <= interior


def test_all_zero_grid_has_nothing_visible():
    assert count_visible(parse_grid("000\n000\n000")) == 0