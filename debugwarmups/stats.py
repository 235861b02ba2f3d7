"""Statistical checks that an experiment matches a distribution."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import numpy as np

_DEFAULT_SAMPLES = 100_000
_MAX_OUTCOMES = 30

# Chi-squared thresholds for p = 1e-6, indexed by degrees of freedom.
_CHI_SQUARED_THRESHOLDS = (
    -1,
    23.9281, 27.6294, 31.2164, 33.3788, 35.8882, 38.2584, 40.522, 42.701,
    44.811, 46.8632, 48.8658, 50.8254, 52.7472, 54.6354, 56.4936, 58.3244,
    60.1308, 61.9144, 63.6772, 65.4208, 67.1466, 68.8558, 70.5496, 72.229,
    73.8947, 75.5474, 77.1882, 78.8176, 80.436, 82.0442,
)

_poisson_rng = np.random.default_rng(137)


def _histogram(experiment: Callable[[], int], outcomes: int, samples: int) -> list[int]:
    frequencies = [0] * outcomes
    for _ in range(samples):
        result = experiment()
        if not 0 <= result < outcomes:
            raise ValueError("Illegal experiment outcome.")
        frequencies[result] += 1
    return frequencies


def chi_squared_is_close(
    probabilities: Sequence[float],
    experiment: Callable[[], int],
    num_samples: int = _DEFAULT_SAMPLES,
) -> bool:
    """Whether the outcomes of ``experiment`` fit ``probabilities`` (p = 1e-6)."""
    if len(probabilities) <= 1:
        return True
    if len(probabilities) > _MAX_OUTCOMES:
        raise ValueError("Number of outcomes too large for chi squared testing.")

    frequencies = _histogram(experiment, len(probabilities), num_samples)
    chi_squared = 0.0
    for observed, probability in zip(frequencies, probabilities):
        expected = probability * num_samples
        chi_squared += (observed - expected) ** 2 / expected
    return chi_squared < _CHI_SQUARED_THRESHOLDS[len(probabilities) - 1]


def poisson_is_close(
    probabilities: Sequence[float],
    experiment: Callable[[], int],
    mean_samples: int = _DEFAULT_SAMPLES,
    stdev_max: float = 5.0,
    rng: np.random.Generator | None = None,
) -> bool:
    """Whether each outcome count lies within ``stdev_max`` standard deviations
    of its expectation, running a Poisson-distributed number of trials."""
    generator = rng if rng is not None else _poisson_rng
    samples = int(generator.poisson(mean_samples))

    frequencies = _histogram(experiment, len(probabilities), samples)
    for observed, probability in zip(frequencies, probabilities):
        lam = mean_samples * probability
        if lam == 0:
            if observed != 0:
                return False
            continue
        if abs(lam - observed) / math.sqrt(lam) > stdev_max:
            return False
    return True