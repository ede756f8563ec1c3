"""Tests for the MCP tool layer."""

from __future__ import annotations

import asyncio
import json
import os

import pytest

from conftest import make_vault, requires_symlinks
from obsidian_symlinker.models import (
    CreateLinksInput,
    DiscoverVaultsInput,
    RecentLinksInput,
    SelectVaultInput,
    VaultPathInput,
)
from obsidian_symlinker.tools.link_tools import (
    clear_recent_links,
    create_obsidian_symlinks,
    list_recent_links,
)
from obsidian_symlinker.tools.vault_tools import (
    discover_obsidian_vaults,
    get_selected_vault,
    select_vault,
    validate_vault_path,
)


class TestVaultTools:
    def test_discover_reports_vaults_and_selection(self, session, tmp_path):
        vault = make_vault(tmp_path / "Notes")
        config = tmp_path / "obsidian.json"
        config.write_text(json.dumps({"vaults": {"n": {"path": str(vault), "name": "Notes"}}}), encoding="utf-8")
        session.obsidian_config_path = config
        session.select_vault_path(str(vault))

        payload = asyncio.run(discover_obsidian_vaults(DiscoverVaultsInput()))

        assert payload == {
            "vaults": [
                {"id": "n", "name": "Notes", "path": str(vault), "is_valid": True, "is_accessible": True}
            ],
            "selected": str(vault),
        }

    def test_validate_vault_path(self, session, vault_dir, tmp_path):
        payload = asyncio.run(validate_vault_path(VaultPathInput(path=str(vault_dir))))
        assert payload == {"path": str(vault_dir), "is_valid": True, "is_accessible": True, "is_vault": True}

        missing = asyncio.run(validate_vault_path(VaultPathInput(path=str(tmp_path / "gone"))))
        assert missing["is_valid"] is False
        assert missing["is_vault"] is False

    def test_select_vault_persists_selection(self, session, vault_dir):
        payload = asyncio.run(select_vault(SelectVaultInput(path=str(vault_dir))))
        assert payload == {"vault_path": str(vault_dir), "is_vault": True, "status": "selected"}
        assert asyncio.run(get_selected_vault()) == {"vault_path": str(vault_dir)}

    def test_select_missing_folder_raises(self, session, tmp_path):
        with pytest.raises(FileNotFoundError):
            asyncio.run(select_vault(SelectVaultInput(path=str(tmp_path / "gone"))))

    def test_select_non_vault_requires_opt_in(self, session, tmp_path):
        with pytest.raises(ValueError, match="allow_non_vault"):
            asyncio.run(select_vault(SelectVaultInput(path=str(tmp_path))))

        payload = asyncio.run(select_vault(SelectVaultInput(path=str(tmp_path), allow_non_vault=True)))
        assert payload["is_vault"] is False
        assert session.vault_path == str(tmp_path)

    def test_select_regular_file_is_rejected_even_with_opt_in(self, session, tmp_path):
        note = tmp_path / "note.md"
        note.write_text("x", encoding="utf-8")

        with pytest.raises(NotADirectoryError, match="not a folder"):
            asyncio.run(select_vault(SelectVaultInput(path=str(note), allow_non_vault=True)))
        assert session.vault_path is None


class TestLinkTools:
    def test_create_without_vault_raises(self, session, source_dir):
        with pytest.raises(ValueError, match="No vault selected"):
            asyncio.run(
                create_obsidian_symlinks(CreateLinksInput(files=[{"source_path": str(source_dir / "a.md")}]))
            )

    @requires_symlinks
    def test_create_reports_each_file(self, session, source_dir, vault_dir):
        session.select_vault_path(str(vault_dir))
        request = CreateLinksInput(
            files=[
                {"source_path": str(source_dir / "a.md")},
                {"source_path": str(source_dir / "b.md"), "custom_name": "B.md"},
            ]
        )

        payload = asyncio.run(create_obsidian_symlinks(request))

        assert payload["vault_path"] == str(vault_dir)
        assert payload["created"] == 2
        assert payload["failed"] == 0
        assert [r["file"] for r in payload["results"]] == ["a.md", "B.md"]
        assert payload["results"][1]["symlink_path"] == os.path.join(str(vault_dir), "B.md")
        assert [r["file_name"] for r in payload["recent_links"]] == ["B.md", "a.md"]

    @requires_symlinks
    def test_recent_links_list_and_clear(self, session, source_dir, vault_dir):
        asyncio.run(
            create_obsidian_symlinks(
                CreateLinksInput(files=[{"source_path": str(source_dir / "a.md")}], vault_path=str(vault_dir))
            )
        )

        listed = asyncio.run(list_recent_links(RecentLinksInput()))
        assert [r["file_name"] for r in listed["recent_links"]] == ["a.md"]

        assert asyncio.run(clear_recent_links(RecentLinksInput())) == {"recent_links": []}
        assert asyncio.run(list_recent_links(RecentLinksInput())) == {"recent_links": []}
        assert (vault_dir / "a.md").is_symlink()
