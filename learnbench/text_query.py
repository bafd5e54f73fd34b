"""Word lookup over the lines of a text."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class QueryResult:
    """The word searched for, the 0-based lines it occurs on, and the whole text."""

    sought: str
    lines: tuple[int, ...]
    file: tuple[str, ...]


class TextQuery:
    """Index of which lines each whitespace-separated word appears on."""

    def __init__(self, lines: Iterable[str]):
        text: list[str] = []
        index: defaultdict[str, set[int]] = defaultdict(set)
        for number, line in enumerate(lines):
            line = line.removesuffix("\n")
            text.append(line)
            for word in line.split():
                index[word].add(number)
        self._file = tuple(text)
        self._index = dict(index)

    def query(self, sought: str) -> QueryResult:
        """Look ``sought`` up; a missing word gives a result with no lines."""
        found = self._index.get(sought, ())
        return QueryResult(sought, tuple(sorted(found)), self._file)


def format_result(result: QueryResult) -> str:
    """Render a result: a count line, then each matching line numbered from 1."""
    parts = [f"{result.sought} occors {len(result.lines)}  times \n"]
    parts.extend(f" \t(line {num + 1}){result.file[num]}\n" for num in result.lines)
    return "".join(parts)