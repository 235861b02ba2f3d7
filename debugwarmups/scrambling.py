"""Deterministic xorshift scrambling and permutation shuffling."""

from __future__ import annotations

from collections.abc import MutableSequence

_MASK32 = 0xFFFFFFFF


def scramble(value: int) -> int:
    """Xorshift a 32-bit value; the result lies in [0, 2**31)."""
    x = value & _MASK32
    x ^= (x << 13) & _MASK32
    x ^= x >> 17
    x ^= (x << 5) & _MASK32
    return x & 0x7FFFFFFF


class Scrambler:
    """A pseudo-random source driven by repeated scrambling of a seed."""

    def __init__(self, seed: int) -> None:
        self.seed = seed

    def integer(self, low: int, high: int) -> int:
        """A value in [low, high], advancing the seed."""
        if high < low:
            raise ValueError("Values out of range.")
        self.seed = scramble(self.seed)
        alpha = self.seed / float(0x80000000)
        return int(low + alpha * (float(high) + 1 - low))

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle a sequence in place."""
        count = len(items)
        for i in range(count):
            j = self.integer(i, count - 1)
            items[i], items[j] = items[j], items[i]


def _cycle_lengths(values: MutableSequence[int]):
    """Yield (start, length) for every cycle of a permutation of range(len)."""
    seen: set[int] = set()
    for start in range(len(values)):
        if start in seen:
            continue
        length = 0
        current = start
        while True:
            length += 1
            seen.add(current)
            current = values[current]
            if current == start:
                break
        yield start, length


def shuffle_values(seed: int, values: MutableSequence[int], target: int) -> int:
    """Shuffle a permutation in place until it has a cycle of length
    ``target``, and return the smallest element of the first such cycle."""
    if sorted(values) != list(range(len(values))):
        raise ValueError("values must be a permutation of 0..n-1.")
    if not 1 <= target <= len(values):
        raise ValueError("target cycle length out of range.")
    scrambler = Scrambler(seed)
    while True:
        scrambler.shuffle(values)
        for start, length in _cycle_lengths(values):
            if length == target:
                return start