"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep GOMAKE_* variables and the root log level from leaking between tests."""
    for key in list(os.environ):
        if key.startswith("GOMAKE_"):
            monkeypatch.delenv(key)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


def write_script(path: Path, body: str = "exit 0\n") -> Path:
    """Write an executable POSIX shell script."""
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def work_path(temp_dir: Path) -> Path:
    """Create a work path whose scripts directory mixes commands and noise."""
    scripts = temp_dir / "scripts"
    scripts.mkdir()
    write_script(scripts / "command-build.sh")
    write_script(scripts / "command-test")
    write_script(scripts / "notacommand-x")
    (scripts / "command-dir").mkdir()
    return temp_dir


@pytest.fixture
def make_script():
    """Factory for executable shell scripts: make_script(path, body)."""
    return write_script
