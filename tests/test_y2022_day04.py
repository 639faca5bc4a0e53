import pytest

from adventsolutions.y2022.day04 import count_overlaps, main, overlaps, parse_pair

EXAMPLE = ["2-4,6-8", "2-3,4-5", "5-7,7-9", "2-8,3-7", "6-6,4-6", "2-6,4-8"]


def test_parse_pair():
    assert parse_pair("2-4,6-8") == ((2, 4), (6, 8))


@pytest.mark.parametrize("line", ["2-4", "2-4,6", "a-b,1-2"])
def test_parse_pair_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_pair(line)


@pytest.mark.parametrize(
    "first,second,expected",
    [
        ((2, 4), (6, 8), False),
        ((2, 3), (4, 5), False),
        ((5, 7), (7, 9), True),
        ((2, 8), (3, 7), True),
    ],
)
def test_overlaps(first, second, expected):
    assert overlaps(first, second) is expected
    assert overlaps(second, first) is expected


def test_empty_range_never_overlaps():
    assert overlaps((5, 3), (1, 10)) is False


def test_worked_example():
    assert count_overlaps(EXAMPLE) == 4


def test_count_bounded_by_pairs():
    assert 0 <= count_overlaps(EXAMPLE) <= len(EXAMPLE)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.data"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    main([str(path)])
    assert "Answer: 4" in capsys.readouterr().out