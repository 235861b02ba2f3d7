"""A DOOM-style fire simulation on a grid of temperatures."""

from __future__ import annotations

import random as _random
from collections.abc import MutableSequence, Sequence

from .color import Color

MAX_TEMP = 36
"""Maximum temperature of a cell in the fire."""

DEFAULT_ROWS = 80
DEFAULT_COLS = 150

_UPDATE_DELAY = 2
_FRAME_LIMIT = 0x7FFFFFFF

IGNITE_TEXT = "Ignite Fire"
EXTINGUISH_TEXT = "Extinguish Fire"

PALETTE: tuple[Color, ...] = tuple(
    Color.from_hex(value)
    for value in (
        0x000000, 0x1F0707, 0x2F0F07, 0x470F07, 0x571707, 0x671F07, 0x771F07,
        0x8F2707, 0x9F2F07, 0xAF3F07, 0xBF4707, 0xC74707, 0xDF4F07, 0xDF5707,
        0xDF5707, 0xD75F07, 0xD75F07, 0xD7670F, 0xCF6F0F, 0xCF770F, 0xCF7F0F,
        0xCF8717, 0xC78717, 0xC78F17, 0xC7971F, 0xBF9F1F, 0xBF9F1F, 0xBFA727,
        0xBFA727, 0xBFAF2F, 0xB7AF2F, 0xB7B72F, 0xB7B737, 0xCFCF6F, 0xDFDF9F,
        0xEFEFC7, 0xFFFFFF,
    )
)
"""Colour of each temperature from 0 to MAX_TEMP."""


def update_fire(
    fire: MutableSequence[MutableSequence[int]],
    rng: _random.Random | None = None,
) -> None:
    """Advance the fire one step in place.

    Each cell above the bottom row receives heat copied from a cell below it,
    shifted at random one column left, straight up or one column right, and
    then cooled by one with probability 2/3.
    """
    source = rng if rng is not None else _random
    num_cols = len(fire[0]) if fire else 0
    for row in range(1, len(fire)):
        below = fire[row]
        above = fire[row - 1]
        for col, heat in enumerate(below):
            direction = source.randint(0, 2)
            target = col
            if direction == 0 and col > 0:
                target = col - 1
            elif direction == 2 and col < num_cols - 1:
                target = col + 1

            above[target] = heat
            if source.random() < 2.0 / 3 and above[target] > 0:
                above[target] -= 1


def validate_fire(fire: Sequence[Sequence[int]]) -> None:
    """Raise ValueError if any temperature lies outside [0, MAX_TEMP]."""
    for row in fire:
        for value in row:
            if value < 0:
                raise ValueError("Negative temperature occurred in the fire.")
            if value > MAX_TEMP:
                raise ValueError("Fire temperature exceeds MAX_TEMP.")


class FireSimulation:
    """An animated fire whose base drifts toward a target temperature."""

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        rng: _random.Random | None = None,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("Fire dimensions must be non-negative.")
        self.world: list[list[int]] = [[0] * cols for _ in range(rows)]
        self.rng = rng if rng is not None else _random.Random()
        self.target_temp = 0
        self.frame = 0

    @property
    def button_label(self) -> str:
        """Text of the control that toggles the fire."""
        return IGNITE_TEXT if self.target_temp == 0 else EXTINGUISH_TEXT

    def toggle(self) -> str:
        """Ignite an extinguished fire or put out a burning one.

        Returns the new label for the toggle control.
        """
        self.target_temp = MAX_TEMP if self.target_temp == 0 else 0
        return self.button_label

    def step(self) -> None:
        """Advance one animation frame."""
        self.frame += 1
        if self.frame == _FRAME_LIMIT:
            self.frame = 0

        update_fire(self.world, self.rng)
        validate_fire(self.world)

        if self.frame % _UPDATE_DELAY == 0 and self.world:
            base = self.world[-1]
            for col, temp in enumerate(base):
                if temp < self.target_temp:
                    base[col] = temp + 1
                elif temp > self.target_temp:
                    base[col] = temp - 1

    def color_at(self, row: int, col: int) -> Color:
        """The display colour of one cell."""
        return PALETTE[self.world[row][col]]