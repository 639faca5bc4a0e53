import pytest

from adventsolutions.y2023.day06 import (
    EXAMPLE,
    Race,
    parse_races,
    parse_single_race,
    product_of_ways,
    ways_to_win,
)


def test_parse_races_example():
    assert parse_races(EXAMPLE) == [
        Race(dist=9, time=7),
        Race(dist=40, time=15),
        Race(dist=200, time=30),
    ]


def test_parse_single_race_joins_columns():
    assert parse_single_race(EXAMPLE) == Race(dist=940200, time=71530)


def test_product_of_ways_example():
    assert product_of_ways(parse_races(EXAMPLE)) == 288


def test_single_race_example():
    assert ways_to_win(parse_single_race(EXAMPLE)) == 71503


@pytest.mark.parametrize("time", [1, 2, 7, 30, 1000])
def test_zero_record_beaten_by_every_positive_hold(time):
    # Every hold time except 0 travels a positive distance.
    assert ways_to_win(Race(dist=0, time=time)) == time - 1


def test_unbeatable_record():
    assert ways_to_win(Race(dist=10**12, time=7)) == 0


def test_zero_time_race():
    assert ways_to_win(Race(dist=0, time=0)) == 0


def test_higher_record_never_gives_more_ways():
    counts = [ways_to_win(Race(dist=dist, time=30)) for dist in range(0, 240, 10)]
    assert counts == sorted(counts, reverse=True)


def test_empty_product_is_one():
    assert product_of_ways([]) == 1


def test_missing_distance_line():
    with pytest.raises(ValueError):
        parse_races("Time: 7 15 30")


def test_fewer_distances_than_times():
    with pytest.raises(ValueError):
        parse_races("Time: 7 15 30\nDistance: 9 40")


def test_negative_race_rejected():
    with pytest.raises(ValueError):
        Race(dist=-1, time=5)