"""Menu configuration and the console driver that runs the demos."""

from __future__ import annotations

import argparse
import os
import sys
import zlib
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from .menu import make_selection_from
from .story import StackOverflow, initiate_stack_overflow, story_text

PLACEHOLDER_NAME = "(Your Name Here)"
TESTING_FILE = "TestingGUI.cpp"

Callback = Callable[[], None]
Barrier = Callable[[frozenset, Callback], Callback]


@dataclass(frozen=True)
class MenuOption:
    """A named entry in the main menu."""

    name: str
    callback: Callback


@dataclass(frozen=True)
class Handler:
    """A demo registered from a source file at a given line."""

    filename: str
    line: int
    name: str
    callback: Callback

    @property
    def tail(self) -> str:
        return os.path.basename(self.filename)


@dataclass(frozen=True)
class AppConfig:
    """Program title, demo ordering, test ordering and test barriers."""

    title: str = "Welcome to C++!"
    menu_order: tuple[str, ...] = (
        "CallStackStorytellingGUI.cpp",
        "StackOverflowGUI.cpp",
        "FireGUI.cpp",
        "OnlyConnectGUI.cpp",
    )
    test_order: tuple[str, ...] = (
        "PredictivePolicing.cpp",
        "Fire.cpp",
        "OnlyConnect.cpp",
    )
    test_barriers: Mapping[str, frozenset] = field(
        default_factory=lambda: {
            "FireGUI.cpp": frozenset({"Fire.cpp"}),
            "OnlyConnectGUI.cpp": frozenset({"OnlyConnect.cpp"}),
        }
    )
    initial_handler: str = ""
    run_tests_option: bool = True
    barrier: Barrier | None = None

    @property
    def demo_file_order(self) -> tuple[str, ...]:
        """All demo files in menu order, the test runner first if enabled."""
        prefix = (TESTING_FILE,) if self.run_tests_option else ()
        return prefix + tuple(self.menu_order)

    def file_index(self, filename: str) -> int:
        """Position of ``filename`` in the demo order, or past the end if absent."""
        order = self.demo_file_order
        try:
            return order.index(filename)
        except ValueError:
            return len(order)

    def compare_files(self, lhs: str, rhs: str) -> int:
        """Order two filenames by demo order, then by name; returns -1, 0 or 1."""
        left, right = self.file_index(lhs), self.file_index(rhs)
        if left != right:
            return -1 if left < right else 1
        if lhs != rhs:
            return -1 if lhs < rhs else 1
        return 0

    def is_public(self, filename: str) -> bool:
        """Whether a demo from ``filename`` belongs in the menu."""
        return os.path.basename(filename) in self.demo_file_order

    def sort_handlers(self, handlers: Iterable[Handler]) -> list[Handler]:
        """Handlers ordered by file, then by line."""
        return sorted(
            handlers,
            key=lambda h: (self.file_index(h.tail), h.tail, h.line),
        )

    def menu_options(self, handlers: Iterable[Handler]) -> list[MenuOption]:
        """Menu entries for the public handlers, guarded by any test barriers."""
        options = []
        for handler in self.sort_handlers(handlers):
            if not self.is_public(handler.filename):
                continue
            callback = handler.callback
            required = self.test_barriers.get(handler.tail)
            if required is not None and self.barrier is not None:
                callback = self.barrier(frozenset(required), callback)
            options.append(MenuOption(handler.name, callback))
        return options

    def initial_demo(self, handlers: Iterable[Handler]) -> Callback | None:
        """The first handler from the configured initial file, if any."""
        for handler in self.sort_handlers(handlers):
            if handler.tail == self.initial_handler:
                return handler.callback
        return None


DEFAULT_CONFIG = AppConfig()


def _ask_yes_no(prompt: str, input_fn: Callable[[str], str], output: TextIO) -> bool:
    while True:
        answer = input_fn(prompt).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        print("Please type a word that starts with 'Y' or 'N'.", file=output)


def console_main(
    options: Sequence[MenuOption],
    initial_demo: Callback | None = None,
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> None:
    """Run the interactive console menu until the user quits."""
    out = output if output is not None else sys.stdout
    print("You have switched to the console window. Press ENTER to continue.", file=out)
    input_fn("")

    while True:
        if initial_demo is not None:
            demo, initial_demo = initial_demo, None
            demo()
            if not options:
                break
        else:
            print(DEFAULT_CONFIG.title, file=out)
            names = [option.name for option in options] + ["Quit"]
            selection = make_selection_from(
                "Please make a selection:", names, input_fn, out
            )
            if selection == len(options):
                break
            options[selection].callback()

        print(file=out)
        if not _ask_yes_no(
            "You are back at the main menu. Would you like to pick again?",
            input_fn,
            out,
        ):
            break

    print(file=out)
    print("Exiting...", file=out)


def _name_seed(name: str) -> int:
    if name == PLACEHOLDER_NAME:
        raise ValueError("Please supply your name with --name before running a demo.")
    return zlib.crc32(name.encode("utf-8")) & 0x7FFFFFFF


def _console_handlers(
    name: str, input_fn: Callable[[str], str], output: TextIO
) -> list[Handler]:
    def storytelling() -> None:
        input_fn("Press ENTER to call the function that tells a story. ")
        print(story_text(_name_seed(name)), file=output)

    def stack_overflows() -> None:
        if _ask_yes_no("Do you want to trigger a stack overflow? ", input_fn, output):
            initiate_stack_overflow(_name_seed(name))

    return [
        Handler("CallStackStorytellingGUI.cpp", 1, "Storytelling", storytelling),
        Handler("StackOverflowGUI.cpp", 1, "Stack Overflows", stack_overflows),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: run the console demo menu."""
    parser = argparse.ArgumentParser(description=DEFAULT_CONFIG.title)
    parser.add_argument("--name", default=PLACEHOLDER_NAME, help="your name")
    args = parser.parse_args(argv)

    out = sys.stdout
    handlers = _console_handlers(args.name, input, out)
    try:
        console_main(
            DEFAULT_CONFIG.menu_options(handlers),
            DEFAULT_CONFIG.initial_demo(handlers),
            input,
            out,
        )
    except StackOverflow as overflow:
        print(f"Stack overflow: {overflow}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(str(error), file=sys.stderr)
        return 1
    return 0