import pytest

from debugwarmups.scrambling import Scrambler, scramble, shuffle_values


def test_scramble_of_zero_is_zero():
    assert scramble(0) == 0


@pytest.mark.parametrize("value", [1, 42, 12345, 2**31 - 1, -7])
def test_scramble_range(value):
    result = scramble(value)
    assert 0 <= result < 2**31


def test_scramble_treats_negatives_as_unsigned():
    assert scramble(-1) == scramble(0xFFFFFFFF)
    assert scramble(-5) == scramble(2**32 - 5)


def test_scramble_is_deterministic_and_mixes():
    assert scramble(1234) == scramble(1234)
    assert len({scramble(v) for v in range(1, 200)}) == 199


def test_integer_in_range_and_advances_seed():
    scrambler = Scrambler(99)
    for _ in range(500):
        value = scrambler.integer(3, 9)
        assert 3 <= value <= 9
    assert scrambler.seed != 99


def test_integer_single_value():
    assert Scrambler(5).integer(4, 4) == 4


def test_integer_rejects_bad_range():
    with pytest.raises(ValueError):
        Scrambler(1).integer(5, 4)


def test_same_seed_same_sequence():
    a, b = Scrambler(77), Scrambler(77)
    assert [a.integer(0, 100) for _ in range(20)] == [b.integer(0, 100) for _ in range(20)]


def test_shuffle_is_permutation():
    items = list(range(50))
    Scrambler(31337).shuffle(items)
    assert sorted(items) == list(range(50))
    assert items != list(range(50))


def _cycle_length_from(values, start):
    length, current = 1, values[start]
    while current != start:
        length += 1
        current = values[current]
    return length


@pytest.mark.parametrize("target", [1, 3, 7])
def test_shuffle_values_finds_cycle_of_target_length(target):
    values = list(range(64))
    start = shuffle_values(2024, values, target)
    assert sorted(values) == list(range(64))
    assert _cycle_length_from(values, start) == target


def test_shuffle_values_deterministic():
    first, second = list(range(32)), list(range(32))
    assert shuffle_values(-12, first, 4) == shuffle_values(-12, second, 4)
    assert first == second


def test_shuffle_values_rejects_bad_input():
    with pytest.raises(ValueError):
        shuffle_values(1, [0, 1, 1], 2)
    with pytest.raises(ValueError):
        shuffle_values(1, [0, 1, 2], 4)