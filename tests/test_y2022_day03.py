import string

import pytest

from adventsolutions.y2022.day03 import badge_priority_sum, common_badge, main, score_item

EXAMPLE = [
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
    "PmmdzqPrVvPwwTWBwg",
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
    "ttgJtRGJQctTZtZT",
    "CrZsJsPPZsGzwwsLwLmpwMDw",
]


def test_scores_run_one_to_fifty_two():
    letters = string.ascii_lowercase + string.ascii_uppercase
    assert [score_item(c) for c in letters] == list(range(1, 53))


@pytest.mark.parametrize("item", ["!", "", "ab", "1"])
def test_score_rejects_non_items(item):
    with pytest.raises(ValueError):
        score_item(item)


def test_badges_of_example():
    assert common_badge(EXAMPLE[:3]) == "r"
    assert common_badge(EXAMPLE[3:]) == "Z"


def test_sum_matches_badges():
    expected = score_item(common_badge(EXAMPLE[:3])) + score_item(common_badge(EXAMPLE[3:]))
    assert badge_priority_sum(EXAMPLE) == expected


def test_badge_is_in_every_rucksack():
    badge = common_badge(EXAMPLE[:3])
    assert all(badge in rucksack for rucksack in EXAMPLE[:3])


def test_no_common_item():
    with pytest.raises(ValueError):
        common_badge(["abc", "def", "ghi"])


def test_incomplete_group():
    with pytest.raises(ValueError):
        badge_priority_sum(EXAMPLE[:4])


def test_main(tmp_path, capsys):
    path = tmp_path / "input.data"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    main([str(path)])
    assert f"Answer: {badge_priority_sum(EXAMPLE)}" in capsys.readouterr().out