"""Pydantic input models for MCP tool validation.

Each model represents the input schema for one or more tools, with
field-level validation and descriptive error messages.

Architecture:
- vault_models: Input models for vault discovery and selection
- link_models: Input models for link creation and link history

Usage:
    from obsidian_symlinker.models import CreateLinksInput, SelectVaultInput
"""

from .vault_models import (
    DiscoverVaultsInput,
    VaultPathInput,
    SelectVaultInput,
)
from .link_models import (
    LinkFileInput,
    CreateLinksInput,
    RecentLinksInput,
)

__all__ = [
    # Vault models
    "DiscoverVaultsInput",
    "VaultPathInput",
    "SelectVaultInput",
    # Link models
    "LinkFileInput",
    "CreateLinksInput",
    "RecentLinksInput",
]
