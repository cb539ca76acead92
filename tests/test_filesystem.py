"""Tests for the single-level directory creator."""

from __future__ import annotations

import os
from pathlib import Path

from adapters.filesystem import OsDirectoryCreator
from core.interfaces.filesystem import DirectoryCreator


def test_satisfies_protocol() -> None:
    assert isinstance(OsDirectoryCreator(), DirectoryCreator)


def test_creates_directory(isolated_env: Path) -> None:
    outcome = OsDirectoryCreator().create("mydir")
    assert outcome.created is True
    assert outcome.error is None
    assert (isolated_env / "mydir").is_dir()


def test_path_is_used_verbatim(isolated_env: Path) -> None:
    OsDirectoryCreator().create("mydir\n")
    assert os.listdir(isolated_env) == ["mydir\n"]


def test_existing_directory_is_reported_not_raised(isolated_env: Path) -> None:
    (isolated_env / "mydir").mkdir()
    outcome = OsDirectoryCreator().create("mydir")
    assert outcome.created is False
    assert outcome.error


def test_missing_parent_is_not_created(isolated_env: Path) -> None:
    outcome = OsDirectoryCreator().create("missing/child")
    assert outcome.created is False
    assert not (isolated_env / "missing").exists()


def test_nul_byte_is_reported_not_raised() -> None:
    outcome = OsDirectoryCreator().create("bad\x00name")
    assert outcome.created is False
    assert outcome.error
