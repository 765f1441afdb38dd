# tests/test_models.py

from __future__ import annotations

from pathlib import Path

import pytest

from models import load_tasks, parse_flag, parse_line, save_tasks
from store import Task, TaskStore


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    assert load_tasks(tmp_path / "nope.txt") == []


def test_save_writes_flag_and_text_per_line(tasks_path: Path) -> None:
    save_tasks([Task("Buy milk", True), Task("Walk dog", False)], tasks_path)
    assert tasks_path.read_text(encoding="utf-8") == "1;Buy milk\n0;Walk dog\n"


def test_save_overwrites_previous_content(tasks_path: Path) -> None:
    save_tasks([Task("a"), Task("b"), Task("c")], tasks_path)
    save_tasks([Task("z")], tasks_path)
    assert tasks_path.read_text(encoding="utf-8") == "0;z\n"


def test_save_empty_list_truncates(tasks_path: Path) -> None:
    save_tasks([Task("a")], tasks_path)
    save_tasks([], tasks_path)
    assert tasks_path.read_text(encoding="utf-8") == ""
    assert load_tasks(tasks_path) == []


def test_save_to_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        save_tasks([Task("a")], tmp_path / "missing" / "tasks.txt")


def test_round_trip_preserves_order_and_flags(tasks_path: Path) -> None:
    seq = [("Write report", True), ("Call Bob", False), ("Ünïcødé ✓", True), ("x", False)]
    save_tasks(TaskStore(seq).enumerate(), tasks_path)
    assert load_tasks(tasks_path) == seq


def test_text_with_delimiter_round_trips(tasks_path: Path) -> None:
    seq = [("a;b;c", False), ("1;looks like a flag", True)]
    save_tasks(TaskStore(seq).enumerate(), tasks_path)
    assert load_tasks(tasks_path) == seq


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1;Buy milk\n", ("Buy milk", True)),
        ("0;Walk dog\n", ("Walk dog", False)),
        ("hello world\n", ("hello world", False)),
        ("hello world", ("hello world", False)),
        ("2;Two\n", ("Two", False)),
        ("x;Not a number\n", ("Not a number", False)),
        (";empty flag\n", ("empty flag", False)),
        ("1;windows line\r\n", ("windows line", True)),
        ("1;\n", ("", True)),
    ],
)
def test_parse_line(line: str, expected: tuple[str, bool]) -> None:
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "token, expected",
    [("1", True), (" 1", True), ("+1", True), ("1abc", True), ("01", True),
     ("0", False), ("-1", False), ("11", False), ("", False), ("abc", False)],
)
def test_parse_flag_follows_leading_integer(token: str, expected: bool) -> None:
    assert parse_flag(token) is expected


def test_load_mixed_file(tasks_path: Path) -> None:
    tasks_path.write_text("1;Buy milk\nhello world\n0;Walk dog", encoding="utf-8")
    assert load_tasks(tasks_path) == [
        ("Buy milk", True),
        ("hello world", False),
        ("Walk dog", False),
    ]


def test_load_tolerates_invalid_utf8(tasks_path: Path) -> None:
    tasks_path.write_bytes(b"1;caf\xe9\n0;ok\n")
    loaded = load_tasks(tasks_path)
    assert [done for _, done in loaded] == [True, False]
    assert loaded[1] == ("ok", False)
