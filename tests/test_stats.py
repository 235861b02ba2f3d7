import random

import numpy as np
import pytest

from debugwarmups.stats import chi_squared_is_close, poisson_is_close


def _die(seed, sides):
    rng = random.Random(seed)
    return lambda: rng.randrange(sides)


def test_chi_squared_accepts_fair_die():
    assert chi_squared_is_close([1 / 6] * 6, _die(1, 6), 20_000) is True


def test_chi_squared_accepts_skewed_distribution():
    rng = random.Random(5)
    experiment = lambda: 0 if rng.random() < 0.75 else 1  # noqa: E731
    assert chi_squared_is_close([0.75, 0.25], experiment, 20_000) is True


def test_chi_squared_rejects_wrong_distribution():
    assert chi_squared_is_close([0.5, 0.5], lambda: 0, 10_000) is False


def test_chi_squared_rejects_uniform_against_skew():
    assert chi_squared_is_close([0.9, 0.1], _die(2, 2), 20_000) is False


def test_chi_squared_single_outcome_passes_without_running():
    calls = []
    assert chi_squared_is_close([1.0], lambda: calls.append(1) or 0) is True
    assert calls == []


def test_chi_squared_too_many_outcomes():
    with pytest.raises(ValueError):
        chi_squared_is_close([1 / 31] * 31, lambda: 0, 10)


def test_chi_squared_illegal_outcome():
    with pytest.raises(ValueError):
        chi_squared_is_close([0.5, 0.5], lambda: 2, 10)
    with pytest.raises(ValueError):
        chi_squared_is_close([0.5, 0.5], lambda: -1, 10)


def test_poisson_accepts_fair_die():
    rng = np.random.default_rng(3)
    assert poisson_is_close([0.25] * 4, _die(4, 4), 20_000, 5.0, rng) is True


def test_poisson_rejects_constant_experiment():
    rng = np.random.default_rng(3)
    assert poisson_is_close([0.5, 0.5], lambda: 1, 10_000, 5.0, rng) is False


def test_poisson_zero_probability_outcome_observed_fails():
    rng = np.random.default_rng(8)
    assert poisson_is_close([1.0, 0.0], lambda: 1, 1_000, 5.0, rng) is False


def test_poisson_zero_probability_outcome_unobserved_passes():
    rng = np.random.default_rng(8)
    assert poisson_is_close([1.0, 0.0], lambda: 0, 1_000, 5.0, rng) is True


def test_poisson_illegal_outcome():
    rng = np.random.default_rng(0)
    with pytest.raises(ValueError):
        poisson_is_close([0.5, 0.5], lambda: 5, 100, 5.0, rng)