"""Shared fixtures for skip-rm tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from skip_rm.config import Config


@pytest.fixture
def write_list(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Return a helper writing patterns to a list file, one per line."""

    def _write(patterns: list[str], name: str = "patterns.list") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{p}\n" for p in patterns), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def protected_tree(tmp_path: Path) -> Path:
    """Tree with files a user would not want removed.

    Structure::

        root/
        ├── home/
        │   ├── .ssh/
        │   │   └── id_rsa
        │   └── notes.txt
        ├── build/
        │   └── out.o
        └── -rf
    """
    (tmp_path / "home" / ".ssh").mkdir(parents=True)
    (tmp_path / "home" / ".ssh" / "id_rsa").write_text("key")
    (tmp_path / "home" / "notes.txt").write_text("notes")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "out.o").write_bytes(b"\x00")
    (tmp_path / "-rf").write_text("dash")
    return tmp_path


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a JSON ``skip-rm.conf``."""

    def _write(name: str = "skip-rm.conf", **fields: str) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(fields), encoding="utf-8")
        return path

    return _write


def make_config(list_path: Path, matcher: str = "glob", mode: str = "blacklist") -> Config:
    """Build a config that points both lists at ``list_path``."""
    return Config(
        command="rm",
        matcher=matcher,
        mode=mode,
        blacklist=str(list_path),
        whitelist=str(list_path),
    )
