import pytest

from adventsolutions.y2022.day05 import apply_moves, parse_instruction, top_crates

EXAMPLE_STACKS = [["Z", "N"], ["M", "C", "D"], ["P"]]
EXAMPLE_MOVES = [
    "move 1 from 2 to 1",
    "move 3 from 1 to 3",
    "move 2 from 2 to 1",
    "move 1 from 1 to 2",
]


def test_parse_instruction():
    assert parse_instruction("move 1 from 2 to 1") == (1, 2, 1)


@pytest.mark.parametrize("line", ["move 1", "move x from 2 to 1"])
def test_parse_instruction_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_instruction(line)


def test_worked_example():
    moves = [parse_instruction(line) for line in EXAMPLE_MOVES]
    assert top_crates(apply_moves(EXAMPLE_STACKS, moves)) == "MCD"


def test_crates_are_conserved():
    moves = [parse_instruction(line) for line in EXAMPLE_MOVES]
    result = apply_moves(EXAMPLE_STACKS, moves)
    assert sorted(c for s in result for c in s) == sorted(c for s in EXAMPLE_STACKS for c in s)


def test_input_not_mutated():
    stacks = [list(s) for s in EXAMPLE_STACKS]
    apply_moves(stacks, [(1, 2, 1)])
    assert stacks == EXAMPLE_STACKS


def test_moved_crates_keep_order():
    result = apply_moves([["a", "b", "c"], []], [(2, 1, 2)])
    assert result == [["a"], ["b", "c"]]


def test_too_many_crates():
    with pytest.raises(ValueError):
        apply_moves([["a"], []], [(2, 1, 2)])


def test_unknown_stack():
    with pytest.raises(ValueError):
        apply_moves([["a"], []], [(1, 0, 2)])


def test_top_of_empty_stack():
    with pytest.raises(ValueError):
        top_crates([["a"], []])