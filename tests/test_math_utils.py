from wedding_planner.core.math_utils import percentage, round_half_up


def test_round_half_up_rounds_halves_away_from_even():
    assert round_half_up(2.5) == 3
    assert round_half_up(95.5) == 96
    assert round_half_up(94.4) == 94


def test_round_half_up_to_one_decimal():
    assert round_half_up(14 / 3, 1) == 4.7
    assert round_half_up(4.25, 1) == 4.3


def test_percentage_is_zero_without_a_whole():
    assert percentage(5, 0) == 0
    assert percentage(5, -10) == 0


def test_percentage_rounds_to_int():
    assert percentage(3, 4) == 75
    assert percentage(1, 3) == 33
    assert percentage(2, 3) == 67
