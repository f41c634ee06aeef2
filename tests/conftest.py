from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner

from lift_cli.core.parser import InputParser, default_recognizers

FIXED_TIME = datetime(2026, 2, 14, 7, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("LIFT_CONFIG_FILE", str(path))
    monkeypatch.delenv("LIFT_OUTPUT_DIR", raising=False)
    return path


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_TIME


@pytest.fixture()
def parser(fixed_clock: Callable[[], datetime]) -> InputParser:
    return InputParser(default_recognizers(clock=fixed_clock))


@pytest.fixture()
def write_temp_text(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write
