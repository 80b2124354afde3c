"""Whitespace-separated scoreboard file of score, time and player name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class ScoreEntry:
    """One scoreboard record."""

    score: int
    time: str
    name: str

    def __str__(self) -> str:
        return f"{self.score} {self.time} {self.name}"


class ScoreBoard:
    """Reads, appends to and sorts a scoreboard file."""

    def __init__(self, path: str | Path = "../Resource/scoreboard.txt") -> None:
        self.path = Path(path)

    def _entries(self) -> Iterator[ScoreEntry]:
        try:
            tokens = self.path.read_text(encoding="utf-8").split()
        except FileNotFoundError:
            return
        for start in range(0, len(tokens), 3):
            triple = tokens[start:start + 3]
            if len(triple) < 3 or not _INT_RE.fullmatch(triple[0]):
                return
            yield ScoreEntry(int(triple[0]), triple[1], triple[2])

    def write(self, fields: Iterable[str]) -> None:
        """Append each field, preceded by a space, to the end of the file."""
        with open(self.path, "a", encoding="utf-8") as fh:
            fh.write("".join(" " + field for field in fields))

    def sort(self, descending: bool = True) -> None:
        """Rewrite the file with one record per line, ordered by score."""
        entries = []
        for entry in self._entries():
            print(entry)
            entries.append(entry)
        entries.sort(key=lambda e: e.score, reverse=bool(descending))
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.writelines(f"{entry}\n" for entry in entries)

    def read(self) -> list[ScoreEntry]:
        """Return every record in the file, in file order."""
        return list(self._entries())