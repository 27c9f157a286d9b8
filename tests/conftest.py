from __future__ import annotations

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep a developer's `.env` or DRILLS_* variables out of the tests."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DRILLS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DRILLS_FIBONACCI_SLOW_THRESHOLD", raising=False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
