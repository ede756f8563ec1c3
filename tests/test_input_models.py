"""Tests for Pydantic input models.

This test suite validates the input validation logic for MCP tools,
ensuring that:
- Valid inputs are accepted and normalized correctly
- Invalid inputs raise ValidationError with descriptive messages
"""

import pytest
from pydantic import ValidationError

from obsidian_symlinker.data_models import LinkRequest
from obsidian_symlinker.models import (
    CreateLinksInput,
    LinkFileInput,
    SelectVaultInput,
    VaultPathInput,
)


class TestLinkFileInput:
    """Test suite for LinkFileInput model validation."""

    def test_valid_source_path(self):
        model = LinkFileInput(source_path="/src/a.md")
        assert model.source_path == "/src/a.md"
        assert model.custom_name is None

    def test_source_path_uri_is_normalized(self):
        model = LinkFileInput(source_path="file:///src/My%20Note.md")
        assert model.source_path == "/src/My Note.md"

    def test_blank_custom_name_means_original_name(self):
        assert LinkFileInput(source_path="/src/a.md", custom_name="   ").custom_name is None

    def test_custom_name_is_stripped(self):
        assert LinkFileInput(source_path="/src/a.md", custom_name=" B.md ").custom_name == "B.md"

    @pytest.mark.parametrize("name", ["sub/B.md", "..\\B.md", "..", "."])
    def test_custom_name_must_be_a_filename(self, name):
        with pytest.raises(ValidationError):
            LinkFileInput(source_path="/src/a.md", custom_name=name)

    def test_empty_source_path_raises_error(self):
        with pytest.raises(ValidationError):
            LinkFileInput(source_path="")

    def test_whitespace_source_path_raises_error(self):
        with pytest.raises(ValidationError) as exc_info:
            LinkFileInput(source_path="   ")
        assert "empty" in str(exc_info.value).lower()

    def test_to_request(self):
        model = LinkFileInput(source_path="/src/b.md", custom_name="B.md")
        assert model.to_request() == LinkRequest("/src/b.md", "B.md")


class TestCreateLinksInput:
    """Test suite for CreateLinksInput model validation."""

    def test_files_are_converted_in_order(self):
        model = CreateLinksInput(
            files=[{"source_path": "/src/a.md"}, {"source_path": "/src/b.md", "custom_name": "B.md"}],
            vault_path="/vault",
        )
        assert model.to_requests() == [
            LinkRequest("/src/a.md"),
            LinkRequest("/src/b.md", "B.md"),
        ]
        assert model.vault_path == "/vault"

    def test_empty_file_list_raises_error(self):
        with pytest.raises(ValidationError):
            CreateLinksInput(files=[])

    def test_blank_vault_path_means_selected_vault(self):
        model = CreateLinksInput(files=[{"source_path": "/src/a.md"}], vault_path="  ")
        assert model.vault_path is None

    def test_vault_path_uri_is_normalized(self):
        model = CreateLinksInput(files=[{"source_path": "/a.md"}], vault_path="file:///My%20Vault")
        assert model.vault_path == "/My Vault"


class TestVaultPathInputs:
    """Test suite for vault path input models."""

    def test_path_is_normalized(self):
        assert VaultPathInput(path=" file:///Notes%20Vault ").path == "/Notes Vault"

    def test_whitespace_path_raises_error(self):
        with pytest.raises(ValidationError):
            VaultPathInput(path="   ")

    def test_select_defaults_to_vaults_only(self):
        assert SelectVaultInput(path="/Notes").allow_non_vault is False
