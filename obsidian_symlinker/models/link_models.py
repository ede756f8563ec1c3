"""Pydantic input models for link creation and link history.

This module defines input models for link tools:
- Create links for a batch of files
- List or clear recent links
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from obsidian_symlinker.core.paths import normalize_path
from obsidian_symlinker.data_models import LinkRequest


class LinkFileInput(BaseModel):
    """One file to link into the vault.

    Examples:
        >>> LinkFileInput(source_path="/src/a.md")
        >>> LinkFileInput(source_path="/src/b.md", custom_name="B.md")
    """

    source_path: str = Field(
        min_length=1,
        description="Absolute path of the file the link points to.",
        examples=["/Users/me/projects/README.md"]
    )

    custom_name: Optional[str] = Field(
        None,
        description=(
            "Filename for the link inside the vault (omit to keep the source name). "
            "Must be a bare filename, no folders."
        ),
        examples=["Project README.md"]
    )

    @field_validator('source_path')
    @classmethod
    def validate_source_path(cls, v: str) -> str:
        """Strip whitespace and decode ``file://`` URIs.

        Raises:
            ValueError: If the path is empty
        """
        cleaned = normalize_path(v.strip())
        if not cleaned:
            raise ValueError("Source path cannot be empty.")
        return cleaned

    @field_validator('custom_name')
    @classmethod
    def validate_custom_name(cls, v: Optional[str]) -> Optional[str]:
        """Validate the link filename.

        Enforces:
        - Blank names fall back to the source filename (returns None)
        - No folder separators
        - Not '.' or '..'

        Raises:
            ValueError: If the name would place the link outside the vault folder
        """
        if v is None:
            return None

        cleaned = v.strip()
        if not cleaned:
            return None

        if "/" in cleaned or "\\" in cleaned:
            raise ValueError(
                "Custom name must be a filename, not a path. "
                f"Invalid name: '{cleaned}'"
            )

        if cleaned in {".", ".."}:
            raise ValueError(f"Custom name cannot be '{cleaned}'.")

        return cleaned

    def to_request(self) -> LinkRequest:
        """Convert to the core :class:`LinkRequest`."""
        return LinkRequest(source_path=self.source_path, custom_name=self.custom_name)


class CreateLinksInput(BaseModel):
    """Input model for create_obsidian_symlinks tool.

    Examples:
        >>> CreateLinksInput(files=[{"source_path": "/src/a.md"}])
        >>> CreateLinksInput(
        ...     files=[{"source_path": "/src/b.md", "custom_name": "B.md"}],
        ...     vault_path="/vault",
        ... )
    """

    files: list[LinkFileInput] = Field(
        min_length=1,
        description="Files to link, processed in order.",
    )

    vault_path: Optional[str] = Field(
        None,
        description=(
            "Vault directory to create the links in (omit to use the selected vault). "
            "Use discover_obsidian_vaults() or select_vault() first."
        )
    )

    @field_validator('vault_path')
    @classmethod
    def validate_vault_path(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the vault path; blank means "use the selected vault"."""
        if v is None:
            return None
        cleaned = normalize_path(v.strip())
        return cleaned or None

    def to_requests(self) -> list[LinkRequest]:
        return [item.to_request() for item in self.files]


class RecentLinksInput(BaseModel):
    """Input model for list_recent_links and clear_recent_links tools.

    Examples:
        >>> RecentLinksInput()
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }
