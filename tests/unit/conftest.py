"""Unit test fixtures: config files written under tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """Write ``text`` to a config file under tmp_path and return its path."""

    def _write(text: str, name: str = "app.conf") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
