"""MCP tools for vault discovery and selection."""

import logging
import os
from typing import Any

from obsidian_symlinker.server import mcp
from obsidian_symlinker.models import DiscoverVaultsInput, SelectVaultInput, VaultPathInput
from obsidian_symlinker.core.paths import is_vault_directory, validate_path
from obsidian_symlinker.session import get_session

logger = logging.getLogger(__name__)


@mcp.tool()
async def discover_obsidian_vaults(input: DiscoverVaultsInput) -> dict[str, Any]:
    """Find Obsidian vaults on this machine.

    Reads Obsidian's own obsidian.json first. Only when it lists no vault that
    exists on disk are common folders (Documents, Dropbox, OneDrive, ...) and
    their immediate subfolders scanned for an .obsidian directory.

    Args:
        input (DiscoverVaultsInput): Validated input (no fields required)

    Returns:
        {
            "vaults": [
                {
                    "id": str,            # "manual-N" for scanned folders
                    "name": str,
                    "path": str,
                    "is_valid": bool,
                    "is_accessible": bool  # False: exists but could not be read
                }
            ],
            "selected": str | None  # Vault currently selected for linking
        }

    Examples:
        - Use when: Starting out, need to know where links can go
        - Don't use: The user already named the vault folder → use select_vault()
    """
    session = get_session()
    vaults = session.refresh_vaults()
    return {
        "vaults": [vault.as_payload() for vault in vaults],
        "selected": session.vault_path,
    }


@mcp.tool()
async def validate_vault_path(input: VaultPathInput) -> dict[str, Any]:
    """Check whether a folder exists, is readable, and looks like a vault.

    Args:
        input (VaultPathInput): Validated input containing:
            - path (str): Folder to check, plain path or file:// URI

    Returns:
        {"path": str, "is_valid": bool, "is_accessible": bool, "is_vault": bool}
    """
    validation = validate_path(input.path)
    return {
        "path": input.path,
        "is_valid": validation.is_valid,
        "is_accessible": validation.is_accessible,
        "is_vault": validation.is_valid and is_vault_directory(input.path),
    }


@mcp.tool()
async def select_vault(input: SelectVaultInput) -> dict[str, Any]:
    """Select the vault that links are created in.

    The selection is saved and reused by create_obsidian_symlinks() calls that
    omit vault_path, also across restarts.

    Args:
        input (SelectVaultInput): Validated input containing:
            - path (str): Vault folder, plain path or file:// URI
            - allow_non_vault (bool): Accept folders without .obsidian

    Returns:
        {"vault_path": str, "is_vault": bool, "status": "selected"}

    Error Handling:
        - Folder missing → FileNotFoundError with the path
        - Path is a file → NotADirectoryError, even with allow_non_vault
        - No .obsidian folder and allow_non_vault false → ValueError
    """
    validation = validate_path(input.path)
    if not validation.is_valid:
        raise FileNotFoundError(f"Vault folder not found at {input.path}")
    if not os.path.isdir(input.path):
        raise NotADirectoryError(f"{input.path} is not a folder")

    is_vault = is_vault_directory(input.path)
    if not is_vault and not input.allow_non_vault:
        raise ValueError(
            f"{input.path} does not appear to be an Obsidian vault (no .obsidian folder). "
            "Pass allow_non_vault=true to use it anyway."
        )

    get_session().select_vault_path(input.path)
    return {"vault_path": input.path, "is_vault": is_vault, "status": "selected"}


@mcp.tool()
async def get_selected_vault() -> dict[str, Any]:
    """Return the vault currently selected for linking.

    Returns:
        {"vault_path": str | None}
    """
    return {"vault_path": get_session().vault_path}
