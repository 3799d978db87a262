"""Shared test fixtures for carrots tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Generator

import pytest

from carrots.scanner import Scanner

# Never a real directory name inside the test trees unless a test creates it.
FAKE_HOME = os.path.join(os.sep, "nonexistent", "carrots-home")


def make_file(path: Path, mode: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("fixture\n")
    os.chmod(path, mode)
    return path


def make_dir(path: Path, mode: int) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    os.chmod(path, mode)
    return path


@pytest.fixture
def home() -> str:
    return FAKE_HOME


@pytest.fixture
def scanner(home) -> Scanner:
    return Scanner(home)


@pytest.fixture
def ssh_tree(tmp_path) -> Generator[Callable[..., Path], None, None]:
    """Build ``<tmp>/.ssh`` with the given files, each ``name=mode``."""

    def build(dir_mode: int = 0o700, **files: int) -> Path:
        ssh = make_dir(tmp_path / ".ssh", dir_mode)
        for name, mode in files.items():
            make_file(ssh / name, mode)
        return ssh

    yield build

    # restore traversable modes so tmp_path cleanup can proceed
    for root, dirs, _ in os.walk(tmp_path):
        for d in dirs:
            os.chmod(os.path.join(root, d), 0o700)
