import pytest

from adventsolutions.y2023.day03 import (
    EXAMPLE,
    NumberItem,
    SymbolItem,
    gear_ratio_sum,
    main,
    parse_schematic,
    part_number_sum,
)


def test_parse_first_row():
    items = parse_schematic("467..114..")
    assert items == [
        NumberItem(467, ((0, 0), (1, 0), (2, 0))),
        NumberItem(114, ((5, 0), (6, 0), (7, 0))),
    ]


def test_parse_symbol_after_number():
    items = parse_schematic("617*")
    assert items == [NumberItem(617, ((0, 0), (1, 0), (2, 0))), SymbolItem("*", (3, 0))]


def test_example_part_numbers():
    assert part_number_sum(EXAMPLE) == 4361


def test_example_gear_ratios():
    assert gear_ratio_sum(EXAMPLE) == 467835


def test_two_numbers_at_a_gear():
    assert gear_ratio_sum("12*34") == 12 * 34


def test_no_symbols_means_no_parts():
    assert part_number_sum("12..34\n..56..") == 0


def test_gear_needs_exactly_two_numbers():
    assert gear_ratio_sum("12*..") == part_number_sum("12...")


def test_zero_valued_number_is_ignored():
    assert parse_schematic("0*") == [SymbolItem("*", (1, 0))]


def test_diagonal_neighbour_counts():
    assert part_number_sum("5.\n.#") == 5


def test_part_sum_bounded_by_all_numbers():
    numbers = [item.value for item in parse_schematic(EXAMPLE) if isinstance(item, NumberItem)]
    assert part_number_sum(EXAMPLE) <= sum(numbers)


def test_empty_schematic_is_rejected():
    with pytest.raises(ValueError):
        part_number_sum("")


def test_main_example(capsys):
    assert main(["--example"]) == 0
    assert capsys.readouterr().out.strip() == f"Sum is: {part_number_sum(EXAMPLE)}"