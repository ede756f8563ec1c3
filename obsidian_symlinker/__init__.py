"""Obsidian Symlinker MCP Server

Links markdown files from anywhere on disk into an Obsidian vault, and finds
the vaults to link into.
"""

from obsidian_symlinker.config import AppConfig, load_app_config
from obsidian_symlinker.data_models import (
    LinkRequest,
    LinkResult,
    RecentLinkRecord,
    VaultCandidate,
)
from obsidian_symlinker.core.discovery import discover_vaults
from obsidian_symlinker.core.linking import create_links
from obsidian_symlinker.core.paths import normalize_path, validate_path
from obsidian_symlinker.core.recent_links import RecentLinksLedger
from obsidian_symlinker.session import SymlinkerSession, get_session, set_session
from obsidian_symlinker.server import mcp, run_server

# Import tools to register them with the MCP server
from obsidian_symlinker import tools  # noqa: F401

__version__ = "1.0.0"
__all__ = [
    "AppConfig",
    "load_app_config",
    "LinkRequest",
    "LinkResult",
    "RecentLinkRecord",
    "VaultCandidate",
    "discover_vaults",
    "create_links",
    "normalize_path",
    "validate_path",
    "RecentLinksLedger",
    "SymlinkerSession",
    "get_session",
    "set_session",
    "mcp",
    "run_server",
]
