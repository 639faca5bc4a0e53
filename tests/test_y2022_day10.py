import pytest

from adventsolutions.y2022.day10 import EXAMPLE, SCREEN_HEIGHT, SCREEN_WIDTH, execute

EXPECTED_SCREEN = (
    "##..##..##..##..##..##..##..##..##..##..\n"
    "###...###...###...###...###...###...###.\n"
    "####....####....####....####....####....\n"
    "#####.....#####.....#####.....#####.....\n"
    "######......######......######......####\n"
    "#######.......#######.......#######.....\n"
)


def test_example_signal_strength():
    signal, _ = execute(EXAMPLE.splitlines())
    assert signal == 13140


def test_example_screen():
    _, screen = execute(EXAMPLE.splitlines())
    assert screen == EXPECTED_SCREEN


def test_example_screen_shape():
    _, screen = execute(EXAMPLE.splitlines())
    rows = screen.split("\n")[:-1]
    assert len(rows) == SCREEN_HEIGHT
    assert all(len(row) == SCREEN_WIDTH for row in rows)


def test_single_noop_draws_lit_pixel():
    assert execute(["noop"]) == (0, "#")


def test_pixel_count_matches_cycles():
    program = ["noop", "addx 3", "addx -5", "noop"]
    _, screen = execute(program)
    assert len(screen) == 1 + 2 + 2 + 1


def test_empty_program():
    assert execute([]) == (0, "")


@pytest.mark.parametrize("instruction", ["jump 3", "addx", "addx x"])
def test_bad_instruction_raises(instruction):
    with pytest.raises(ValueError):
        execute([instruction])