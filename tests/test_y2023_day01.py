import pytest

from adventsolutions.y2023.day01 import (
    calibration_sum,
    first_last_digits,
    first_number,
    main,
    spelled_calibration_sum,
)

EXAMPLE_PLAIN = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"
EXAMPLE_SPELLED = (
    "two1nine\neightwothree\nabcone2threexyz\nxtwone3four\n"
    "4nineeightseven2\nzoneight234\n7pqrstsixteen"
)


def test_plain_example_sum():
    assert calibration_sum(EXAMPLE_PLAIN) == 142


def test_single_digit_is_used_twice():
    assert first_last_digits("treb7uchet") == 77


def test_spelled_example_sum():
    assert spelled_calibration_sum(EXAMPLE_SPELLED) == 281


@pytest.mark.parametrize(
    "line, expected",
    [
        ("two1nine", 29),
        ("eightwothree", 83),
        ("abcone2threexyz", 13),
        ("xtwone3four", 24),
        ("4nineeightseven2", 42),
        ("zoneight234", 14),
        ("7pqrstsixteen", 76),
    ],
)
def test_spelled_lines(line, expected):
    assert spelled_calibration_sum(line) == expected


def test_digit_only_input_agrees_between_parts():
    assert spelled_calibration_sum(EXAMPLE_PLAIN) == calibration_sum(EXAMPLE_PLAIN)


def test_overlapping_words_read_from_both_ends():
    assert first_number("oneight", False) == first_number("1", False)
    assert first_number("oneight", True) == first_number("8", True)


def test_line_without_digits_is_rejected():
    with pytest.raises(ValueError):
        first_last_digits("abcdef")


def test_line_without_numbers_is_rejected():
    with pytest.raises(ValueError):
        first_number("xyz", True)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_SPELLED, encoding="utf-8")
    assert main([str(path), "--part", "2"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == f"Answer: {spelled_calibration_sum(EXAMPLE_SPELLED)}"