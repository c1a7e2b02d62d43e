"""
Record types and the positional score format.

A score is stored as five consecutive lines with no delimiters or escaping::

    name
    score
    bulletsShot
    shipsDestroyed
    level
"""
from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import IO, Any, Iterable, Iterator, List, Optional

from .errors import RecordFormatError

_INT_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

SCORE_FIELDS = ("name", "score", "bulletsShot", "shipsDestroyed", "level")


def parse_int(text: Optional[str], *, field: str, source: Optional[str] = None, line: Optional[int] = None) -> int:
    """Parse a persisted integer: optional sign and ASCII digits, 32-bit range."""
    if text is None:
        raise RecordFormatError(f"Missing value for {field}", source, line)
    if not _INT_RE.fullmatch(text):
        raise RecordFormatError(f"Invalid integer {text!r} for {field}", source, line)
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise RecordFormatError(f"Integer out of range for {field}: {text}", source, line)
    return value


def format_int(value: Any, *, field: str) -> str:
    """Render an integer for writing; anything parse_int would reject is refused."""
    try:
        number = operator.index(value)
    except TypeError:
        raise TypeError(f"{field} must be an integer, got {type(value).__name__}") from None
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"Integer out of range for {field}: {number}")
    return str(number)


@dataclass
class Score:
    """One high-score entry. Sorting puts the highest score first."""
    name: str
    score: int
    bullets_shot: int = 0
    ships_destroyed: int = 0
    level: int = 0

    def __lt__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self.score > other.score

    def to_lines(self) -> List[str]:
        return score_lines(self)

    @classmethod
    def from_lines(cls, lines: List[str], *, source: Optional[str] = None, first_line: int = 1) -> "Score":
        if len(lines) != len(SCORE_FIELDS):
            raise RecordFormatError(
                f"Score record needs {len(SCORE_FIELDS)} lines, got {len(lines)}", source, first_line
            )
        ints = [
            parse_int(text, field=field, source=source, line=first_line + k)
            for k, (field, text) in enumerate(zip(SCORE_FIELDS[1:], lines[1:]), start=1)
        ]
        return cls(lines[0], *ints)


@dataclass
class Statistics:
    """Lifetime player statistics; one record per user."""
    ships_destruction_streak: int = 0
    played_game_number: int = 0
    clear_achievement_number: int = 0


def score_lines(score: Any) -> List[str]:
    """Render any object with Score's attributes as its five wire lines."""
    name = str(score.name)
    if "\n" in name or "\r" in name:
        raise ValueError(f"Score name cannot contain a line break: {name!r}")
    return [
        name,
        format_int(score.score, field="score"),
        format_int(score.bullets_shot, field="bulletsShot"),
        format_int(score.ships_destroyed, field="shipsDestroyed"),
        format_int(score.level, field="level"),
    ]


def read_lines(stream: IO[str]) -> Iterator[str]:
    # Streams are opened with universal newlines, so every line ends in "\n"
    for raw in stream:
        yield raw[:-1] if raw.endswith("\n") else raw


def parse_scores(stream: IO[str], source: Optional[str] = None) -> List[Score]:
    """Read score records until no further name line exists.

    A record that starts but does not complete is corruption and raises
    :class:`RecordFormatError`; the list is never silently truncated.
    """
    scores: List[Score] = []
    lines = read_lines(stream)
    lineno = 0
    for name in lines:
        lineno += 1
        record = [name]
        for field in SCORE_FIELDS[1:]:
            text = next(lines, None)
            if text is None:
                raise RecordFormatError(f"Truncated score record for {name!r}: missing {field}", source, lineno + 1)
            lineno += 1
            record.append(text)
        scores.append(Score.from_lines(record, source=source, first_line=lineno - len(SCORE_FIELDS) + 1))
    return scores


def format_scores(scores: Iterable[Any]) -> str:
    """Render scores as file text. Every record is validated before any is returned."""
    return "".join(line + "\n" for score in scores for line in score_lines(score))
