import pytest

from adventsolutions.y2022.day01 import elf_totals, main, max_calories, top_three

EXAMPLE = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000"


def test_totals_cover_every_number():
    numbers = [int(line) for line in EXAMPLE.split("\n") if line]
    assert sum(elf_totals(EXAMPLE)) == sum(numbers)


def test_one_total_per_block():
    assert len(elf_totals(EXAMPLE)) == EXAMPLE.count("\n\n") + 1


def test_worked_example():
    totals = elf_totals(EXAMPLE)
    assert max_calories(totals) == 24000
    assert top_three(totals) == 45000


def test_trailing_newline_adds_empty_elf():
    with_newline = elf_totals(EXAMPLE + "\n")
    assert with_newline[-1] == 0
    assert with_newline[:-1] == elf_totals(EXAMPLE)


def test_top_three_not_below_max():
    totals = elf_totals(EXAMPLE)
    assert top_three(totals) >= max_calories(totals)


def test_top_three_needs_three():
    with pytest.raises(ValueError):
        top_three([1, 2])


def test_bad_number():
    with pytest.raises(ValueError):
        elf_totals("12\nabc")


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert f"Part 2: {top_three(elf_totals(EXAMPLE))}" in out