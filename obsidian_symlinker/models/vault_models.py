"""Pydantic input models for vault discovery and selection.

This module defines input models for vault tools:
- Discover candidate vaults
- Validate a path
- Select the vault links are created in
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from obsidian_symlinker.core.paths import normalize_path


class DiscoverVaultsInput(BaseModel):
    """Input model for discover_obsidian_vaults tool.

    Takes no parameters, but using a model maintains API consistency.

    Examples:
        >>> DiscoverVaultsInput()
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }


class VaultPathInput(BaseModel):
    """Input model for tools that take a vault directory.

    Accepts plain paths or ``file://`` URIs as stored by Obsidian; URIs are
    normalized to plain paths during validation.

    Examples:
        >>> VaultPathInput(path="/Users/me/Notes")
        >>> VaultPathInput(path="file:///Users/me/My%20Notes")
    """

    path: str = Field(
        min_length=1,
        description=(
            "Absolute path of the vault directory. "
            "file:// URIs (percent-encoded) are accepted."
        ),
        examples=["/Users/me/Notes", "C:\\Users\\me\\Documents\\Vault"]
    )

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Strip whitespace and decode ``file://`` URIs.

        Raises:
            ValueError: If the path is empty after stripping
        """
        cleaned = normalize_path(v.strip())
        if not cleaned:
            raise ValueError(
                "Vault path cannot be empty. "
                "Use discover_obsidian_vaults() to find candidate vaults."
            )
        return cleaned


class SelectVaultInput(VaultPathInput):
    """Input model for select_vault tool.

    Examples:
        >>> SelectVaultInput(path="/Users/me/Notes")
        >>> SelectVaultInput(path="/tmp/scratch", allow_non_vault=True)
    """

    allow_non_vault: bool = Field(
        False,
        description=(
            "Select the folder even though it has no .obsidian directory. "
            "Links will be created, but Obsidian may not pick them up."
        )
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"path": "/Users/me/Notes"},
                {"path": "/tmp/scratch", "allow_non_vault": True}
            ]
        }
