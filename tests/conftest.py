"""Shared fixtures for vcsuri tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def real_dir(tmp_path: Path) -> Path:
    """Directory holding a tracked file ``a.txt``."""
    d = tmp_path / "real"
    d.mkdir()
    (d / "a.txt").write_text("hello\n")
    return d


@pytest.fixture
def link_dir(tmp_path: Path, real_dir: Path) -> Path:
    """Symlink pointing at ``real_dir``."""
    link = tmp_path / "link"
    link.symlink_to(real_dir, target_is_directory=True)
    return link


@pytest.fixture
def canonical_file(real_dir: Path) -> str:
    """Canonical path of ``a.txt`` (tmp_path itself may sit behind a symlink)."""
    return os.path.realpath(real_dir / "a.txt")


@pytest.fixture
def linked_file(link_dir: Path) -> str:
    """Path of ``a.txt`` reached through ``link_dir``."""
    return str(link_dir / "a.txt")
