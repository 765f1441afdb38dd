# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from controller import Controller


class FakePage:
    """Stands in for ft.Page: records update() calls, nothing is rendered."""

    def __init__(self) -> None:
        self.updates = 0
        self.web = False

    def update(self, *controls) -> None:
        self.updates += 1


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"


@pytest.fixture()
def controller(tasks_path: Path) -> Controller:
    ctl = Controller(tasks_path)
    ctl.start()
    return ctl


@pytest.fixture()
def page() -> FakePage:
    return FakePage()
