"""Shared pytest fixtures and configuration for the caesar-stream test suite.

Guidelines
----------
* Files are created under ``tmp_path`` only.
* Standard input is replaced via ``monkeypatch``; standard output is
  captured with ``capsysbinary`` whenever it carries data.
* Tests must never block on a real terminal.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Factory writing *data* to ``tmp_path / name``."""

    def _make(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[bytes], None]:
    """Replace ``sys.stdin`` with one whose binary buffer yields *data*."""

    def _feed(data: bytes) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _feed
