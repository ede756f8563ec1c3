"""Shared test fixtures for the Obsidian symlinker tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from obsidian_symlinker.constants import MARKER_FOLDER
from obsidian_symlinker.core.linking import SymlinkCreator
from obsidian_symlinker.session import SymlinkerSession, set_session
from obsidian_symlinker.settings_store import InMemorySettingsStore

requires_symlinks = pytest.mark.skipif(
    os.name == "nt", reason="Symlink creation requires admin or Developer Mode on Windows"
)


def make_vault(path: Path) -> Path:
    """Create ``path`` as an Obsidian vault (a folder holding ``.obsidian``)."""
    (path / MARKER_FOLDER).mkdir(parents=True)
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """A folder with two markdown files to link."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.md").write_text("# A\n", encoding="utf-8")
    (src / "b.md").write_text("# B\n", encoding="utf-8")
    return src


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    return make_vault(tmp_path / "vault")


@pytest.fixture
def session() -> Generator[SymlinkerSession, None, None]:
    """A fresh in-memory session installed as the one the MCP tools use."""
    s = SymlinkerSession(InMemorySettingsStore(), link_creator=SymlinkCreator())
    set_session(s)
    try:
        yield s
    finally:
        set_session(None)
