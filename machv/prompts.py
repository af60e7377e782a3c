"""Interactive prompting on standard input and output."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")

BOOL_CHOICES = ("No", "Yes")


class SelectionError(ValueError):
    """Raised when the user's choice is not a valid option."""


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line.endswith("\n"):
        raise EOFError("reading input: unexpected end of input")
    return line.strip()


def get_input(prompt_text: str) -> str:
    """Print a prompt and return the user's reply, stripped of whitespace."""
    print(prompt_text, end="", flush=True)
    return _read_line()


def read_files_in_directory(directory: str | Path) -> list[Path]:
    """Return the entries of a directory, sorted by name."""
    return sorted(Path(directory).iterdir(), key=lambda entry: entry.name)


def display_options(options: Sequence[object], prompt_text: str) -> None:
    """Print a numbered list of options followed by an input marker."""
    print(prompt_text)
    for index, option in enumerate(options):
        print(f"  {index}) {option}")
    print("\n$ ", end="", flush=True)


def display_bool(prompt_text: str) -> None:
    """Print a No/Yes choice."""
    display_options(BOOL_CHOICES, prompt_text)


def select_option(options: Sequence[T]) -> T:
    """Read an index from standard input and return the matching option."""
    text = _read_line()
    try:
        index = int(text)
    except ValueError as exc:
        raise SelectionError(f"converting {text!r} to int") from exc
    if not 0 <= index < len(options):
        raise SelectionError(f"index {index} out of range")
    return options[index]


def select_bool() -> bool:
    """Read a No/Yes choice from standard input."""
    return select_option(BOOL_CHOICES) == "Yes"