"""Generic algorithm exercises on strings and sequences, and a simple book record."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def check_size(s: str, sz: int) -> bool:
    """Tell whether ``s`` is at least ``sz`` characters long."""
    return len(s) >= sz


def absolute_values(values: Iterable[int]) -> list[int]:
    """Return the absolute value of each value."""
    return [abs(value) for value in values]


def join_words(words: Iterable[str], sep: str = " ") -> str:
    """Write each word followed by ``sep``."""
    return "".join(f"{word}{sep}" for word in words)


def first_field(line: str) -> str:
    """Return the text before the first comma, or the whole line."""
    return line.partition(",")[0]


def reverse_last_field(line: str) -> str:
    """Return the text after the last comma, read backwards."""
    return last_field(line)[::-1]


def last_field(line: str) -> str:
    """Return the text after the last comma, or the whole line."""
    return line.rpartition(",")[2]


@dataclass
class Book:
    """A book with a name and a price."""

    name: str = ""
    price: float = 0.0

    def display(self) -> list[str]:
        """Return the lines describing the book."""
        return ["PIMPL模式", f"book name: {self.name}", f"book price: {self.price:g}"]