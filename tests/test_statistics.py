from __future__ import annotations

import io
from datetime import datetime, timezone
from pathlib import Path

import pytest

from arcadestore.persistence.errors import RecordFormatError
from arcadestore.persistence.records import Statistics
from arcadestore.persistence.stats_io import (
    STATISTICS_FILE,
    format_statistics,
    load_default_statistics,
    load_statistics,
    parse_properties,
    parse_statistics,
    save_statistics,
)


def test_save_then_load_round_trips(tmp_path: Path):
    save_statistics([Statistics(5, 12, 3)], lambda: tmp_path)
    assert load_statistics(lambda: tmp_path) == Statistics(5, 12, 3)


def test_only_first_record_is_saved(tmp_path: Path):
    save_statistics([Statistics(1, 2, 3), Statistics(7, 8, 9)], lambda: tmp_path)
    assert load_statistics(lambda: tmp_path) == Statistics(1, 2, 3)


def test_missing_file_loads_bundled_default(tmp_path: Path):
    assert load_statistics(lambda: tmp_path) == load_default_statistics()
    assert load_default_statistics() == Statistics(0, 0, 0)


def test_written_format(tmp_path: Path):
    text = format_statistics(Statistics(5, 12, 3), now=datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc))
    assert text == (
        "#PlayerGameStatistics\n"
        "#Sat Oct 17 09:30:00 UTC 2026\n"
        "shipsDestructionStreak=5\n"
        "playedGameNumber=12\n"
        "clearAchievementNumber=3\n"
    )


def test_empty_save_omits_keys_and_then_fails_to_load(tmp_path: Path):
    save_statistics([], lambda: tmp_path)
    text = (tmp_path / STATISTICS_FILE).read_text(encoding="utf-8")
    assert "=" not in text
    with pytest.raises(RecordFormatError):
        load_statistics(lambda: tmp_path)


def test_missing_key_is_fatal(tmp_path: Path):
    (tmp_path / STATISTICS_FILE).write_text("shipsDestructionStreak=1\nplayedGameNumber=2\n", encoding="utf-8")
    with pytest.raises(RecordFormatError) as info:
        load_statistics(lambda: tmp_path)
    assert "clearAchievementNumber" in info.value.message


def test_malformed_value_is_fatal(tmp_path: Path):
    (tmp_path / STATISTICS_FILE).write_text(
        "shipsDestructionStreak=1\nplayedGameNumber=two\nclearAchievementNumber=3\n", encoding="utf-8"
    )
    with pytest.raises(RecordFormatError) as info:
        load_statistics(lambda: tmp_path)
    assert info.value.line == 2


def test_properties_syntax_variants():
    src = io.StringIO(
        "# comment\n"
        "! another comment\n"
        "\n"
        "   shipsDestructionStreak = 4\n"
        "playedGameNumber:10\n"
        "clearAchievementNumber \\\n"
        "    2\n"
    )
    assert parse_statistics(src) == Statistics(4, 10, 2)


def test_properties_escapes_and_separators():
    props = parse_properties(io.StringIO("a\\ b=c\nkey  value\nu=\\u0041x\n"))
    assert props["a b"][0] == "c"
    assert props["key"][0] == "value"
    assert props["u"][0] == "Ax"


def test_user_statistics_directory_is_not_defaulted(tmp_path: Path):
    (tmp_path / STATISTICS_FILE).mkdir()
    with pytest.raises(OSError):
        load_statistics(lambda: tmp_path)


def test_out_of_range_value_is_rejected_before_writing(tmp_path: Path):
    save_statistics([Statistics(1, 1, 1)], lambda: tmp_path)
    with pytest.raises(ValueError):
        save_statistics([Statistics(2 ** 31, 1, 1)], lambda: tmp_path)
    assert load_statistics(lambda: tmp_path) == Statistics(1, 1, 1)


def test_malformed_unicode_escape_reports_location():
    src = io.StringIO("# header\nshipsDestructionStreak=\\uZZ12\n")
    with pytest.raises(RecordFormatError) as info:
        parse_statistics(src, source="Statistic.properties")
    assert info.value.source == "Statistic.properties"
    assert info.value.line == 2
