from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_LINES = [
    "2024-01-15 10:23:45 INFO User login successful from 192.168.1.100",
    "2024-01-15 10:24:12 ERROR Database connection failed",
    "2024-01-15 10:25:33 WARNING High memory usage detected",
    "2024-01-15 10:26:01 INFO Request processed from 10.0.0.50",
]


@pytest.fixture
def write_log() -> Callable[[Path, list[str]], Path]:
    def _write(path: Path, lines: list[str]) -> Path:
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_log(tmp_path: Path, write_log) -> Path:
    return write_log(tmp_path / "app.log", SAMPLE_LINES)
