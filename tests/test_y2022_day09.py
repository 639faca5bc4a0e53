import pytest

from adventsolutions.y2022.day09 import (
    EXAMPLE,
    GRID_HEIGHT,
    GRID_WIDTH,
    KNOT_CELL,
    SEPARATOR,
    Position,
    move_head,
    move_tail,
    parse_moves,
    render_grid,
    simulate_rope,
)


def test_parse_moves_example():
    moves = parse_moves(EXAMPLE)
    assert moves[0] == ("R", 5)
    assert moves[-1] == ("U", 20)
    assert len(moves) == 8


def test_parse_moves_rejects_bad_direction():
    with pytest.raises(ValueError):
        parse_moves("X 3")


def test_move_head_up():
    assert move_head(Position(0, 0), "U") == Position(0, 1)


@pytest.mark.parametrize("there, back", [("U", "D"), ("L", "R")])
def test_move_head_round_trip(there, back):
    start = Position(4, 7)
    assert move_head(move_head(start, there), back) == start


def test_move_head_unknown_direction():
    with pytest.raises(ValueError):
        move_head(Position(0, 0), "Q")


def test_move_tail_equal_positions_stay():
    assert move_tail(Position(2, 2), Position(2, 2)) == Position(2, 2)


@pytest.mark.parametrize(
    "head, tail",
    [
        (Position(3, 0), Position(0, 0)),
        (Position(0, -4), Position(0, 0)),
        (Position(2, 1), Position(0, 0)),
        (Position(-3, 5), Position(1, 1)),
        (Position(1, 0), Position(0, 0)),
    ],
)
def test_move_tail_closes_distance_by_one(head, tail):
    before = max(abs(head.x - tail.x), abs(head.y - tail.y))
    moved = move_tail(head, tail)
    after = max(abs(head.x - moved.x), abs(head.y - moved.y))
    assert after == before - 1
    assert abs(moved.x - tail.x) <= 1 and abs(moved.y - tail.y) <= 1


def test_single_step_leaves_tails_in_place():
    start = Position(3, 3)
    rope, visited = simulate_rope([("R", 1)], start)
    assert rope[0] == move_head(start, "R")
    assert rope[1:] == [start] * 9
    assert visited == [start]


def test_example_invariants():
    rope, visited = simulate_rope(parse_moves(EXAMPLE))
    assert len(visited) == len(set(visited))
    assert all(knot == rope[1] for knot in rope[1:])


def test_render_grid_shape_and_marks():
    text = render_grid([Position(0, 0), Position(5, 5)])
    lines = text.split("\n")
    assert lines[-1] == SEPARATOR
    assert len(lines) == GRID_HEIGHT
    assert lines[0].startswith(KNOT_CELL)
    assert text.count(KNOT_CELL) == 2


def test_render_grid_outside_raises():
    with pytest.raises(ValueError):
        render_grid([Position(GRID_WIDTH, 0)])