"""Console prompts for choosing an option or a file."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

_INTEGER_PROMPT = "Your choice: "
_BAD_INTEGER = "Illegal integer format. Try again."


def _read_integer(prompt: str, input_fn: Callable[[str], str], output: TextIO) -> int:
    while True:
        line = input_fn(prompt)
        try:
            return int(line.strip())
        except ValueError:
            print(_BAD_INTEGER, file=output)


def make_selection_from(
    title: str,
    options: Sequence[str],
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> int:
    """List the options and prompt until one is chosen; return its index."""
    out = output if output is not None else sys.stdout
    if not options:
        raise ValueError(
            "Internal error: Requesting the user to pick an item from an empty list."
        )

    print(title, file=out)
    for index, option in enumerate(options):
        print(f"{index} {option}", file=out)

    while True:
        choice = _read_integer(_INTEGER_PROMPT, input_fn, out)
        if 0 <= choice < len(options):
            return choice
        print(f"Please enter a number between 0 and {len(options) - 1}", file=out)


def make_file_selection(
    suffix: str,
    directory: str = "res/",
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> str:
    """Ask the user to pick a file in ``directory`` ending in ``suffix``;
    return its path."""
    listing_dir = directory or "."
    options = [name for name in sorted(os.listdir(listing_dir)) if name.endswith(suffix)]

    prefix = listing_dir if listing_dir.endswith("/") else listing_dir + "/"
    choice = make_selection_from(
        "Please choose a demo file from this list:", options, input_fn, output
    )
    return prefix + options[choice]