"""
Player statistics in ``key=value`` properties format.

Written files look like::

    #PlayerGameStatistics
    #Sat Oct 17 12:00:00 UTC 2026
    shipsDestructionStreak=5
    playedGameNumber=12
    clearAchievementNumber=3
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional, Sequence

from .fallback import load_with_fallback
from .paths import BaseDirStrategy, resolve_base_dir, user_file
from .errors import RecordFormatError
from .records import Statistics, format_int, parse_int, read_lines
from .resources import BundledResources

logger = logging.getLogger(__name__)

STATISTICS_FILE = "Statistic.properties"
STATISTICS_COMMENT = "PlayerGameStatistics"

# wire key -> Statistics attribute, in write order
STATISTICS_KEYS = {
    "shipsDestructionStreak": "ships_destruction_streak",
    "playedGameNumber": "played_game_number",
    "clearAchievementNumber": "clear_achievement_number",
}

_SEPARATORS = "=: \t\f"


def _logical_lines(stream: IO[str]):
    """Yield (line number, text) with comments dropped and continuations joined."""
    pending = None
    start = 0
    for lineno, raw in enumerate(read_lines(stream), start=1):
        text = raw.lstrip(" \t\f")
        if pending is None:
            if not text or text[0] in "#!":
                continue
            start = lineno
            pending = ""
        # an odd number of trailing backslashes continues the line
        trailing = len(text) - len(text.rstrip("\\"))
        if trailing % 2 == 1:
            pending += text[:-1]
            continue
        yield start, pending + text
        pending = None
    if pending is not None:
        yield start, pending


def _split_entry(text: str):
    i = 0
    while i < len(text) and text[i] not in _SEPARATORS:
        i += 2 if text[i] == "\\" else 1
    key = text[:i]
    rest = text[i:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return _unescape(key), _unescape(rest)


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text
    out = []
    chars = iter(text)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        if nxt == "u":
            digits = "".join(next(chars, "") for _ in range(4))
            try:
                out.append(chr(int(digits, 16)))
            except ValueError:
                raise RecordFormatError(f"Malformed \\uxxxx escape: {digits!r}") from None
            continue
        out.append({"t": "\t", "n": "\n", "r": "\r", "f": "\f"}.get(nxt, nxt))
    return "".join(out)


def parse_properties(stream: IO[str], source: Optional[str] = None) -> Dict[str, tuple]:
    """Return key -> (value, line number) for every entry in the stream."""
    props: Dict[str, tuple] = {}
    for lineno, text in _logical_lines(stream):
        try:
            key, value = _split_entry(text)
        except RecordFormatError as exc:
            raise RecordFormatError(exc.message, source, lineno) from exc
        props[key] = (value, lineno)
    return props


def parse_statistics(stream: IO[str], source: Optional[str] = None) -> Statistics:
    props = parse_properties(stream, source)
    values = {}
    for key, attr in STATISTICS_KEYS.items():
        value, lineno = props.get(key, (None, None))
        values[attr] = parse_int(value, field=key, source=source, line=lineno)
    return Statistics(**values)


def format_statistics(stats: Optional[Any], now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now(timezone.utc)).strftime("%a %b %d %H:%M:%S %Z %Y")
    lines = [f"#{STATISTICS_COMMENT}", f"#{stamp}"]
    if stats is not None:
        for key, attr in STATISTICS_KEYS.items():
            lines.append(f"{key}={format_int(getattr(stats, attr), field=key)}")
    return "\n".join(lines) + "\n"


def load_default_statistics(resources: Optional[BundledResources] = None) -> Statistics:
    res = resources or BundledResources()
    with res.open_text(STATISTICS_FILE) as fh:
        return parse_statistics(fh, source=f"bundled {STATISTICS_FILE}")


def load_statistics(
    get_base_dir: BaseDirStrategy = resolve_base_dir,
    resources: Optional[BundledResources] = None,
) -> Statistics:
    res = resources or BundledResources()
    path = user_file(STATISTICS_FILE, get_base_dir)
    return load_with_fallback(
        lambda: open(path, "r", encoding="utf-8"),
        lambda: res.open_text(STATISTICS_FILE),
        lambda fh: parse_statistics(fh, source=str(path)),
        "user statistics",
    )


def save_statistics(stats: Sequence[Any], get_base_dir: BaseDirStrategy = resolve_base_dir) -> None:
    """Overwrite the statistics file with the first record of ``stats``.

    An empty sequence writes the header only, leaving every key unset.
    """
    text = format_statistics(stats[0] if stats else None)
    path = user_file(STATISTICS_FILE, get_base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Saving user statistics.")
    with open(path, "w", encoding="utf-8", newline="\n") as fh:
        fh.write(text)
