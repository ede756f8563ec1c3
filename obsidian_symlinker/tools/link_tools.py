"""MCP tools for creating links and reviewing link history.

All tools delegate to the session in obsidian_symlinker.session, which runs
the core link executor and keeps the recent-links ledger up to date.
"""
from __future__ import annotations

import logging
from typing import Any

from obsidian_symlinker.server import mcp
from obsidian_symlinker.models import CreateLinksInput, RecentLinksInput
from obsidian_symlinker.session import get_session

logger = logging.getLogger(__name__)


# Links each file into the vault. One result per file, in input order; failures
# are reported in the result list instead of aborting the batch.
@mcp.tool()
async def create_obsidian_symlinks(input: CreateLinksInput) -> dict[str, Any]:
    """Create symlinks inside a vault pointing at markdown files elsewhere on disk.

    An existing file or link with the same name in the vault is replaced, so
    repeating a call is safe. On Windows, folders are linked with junctions.

    Args:
        input (CreateLinksInput): Validated input containing:
            - files (list): Each {"source_path": str, "custom_name": str | None}
                custom_name renames the link, e.g. "Project README.md"
            - vault_path (str, optional): Target vault (omit to use selected vault)

    Returns:
        {
            "vault_path": str,
            "results": [
                {"success": True, "file": str, "target_path": str, "symlink_path": str}
                | {"success": False, "file": str, "error": str}
            ],
            "created": int,
            "failed": int,
            "recent_links": [...]   # History after recording the new links
        }

    Error Handling:
        - ValidationError: Empty file list, empty source path, custom name with folders
        - No vault given or selected → ValueError, use select_vault()
    """
    session = get_session()
    vault_path = session.resolve_vault_path(input.vault_path)
    results = session.create_links(input.to_requests(), vault_path)
    created = sum(1 for result in results if result.success)
    logger.info("Created %d of %d link(s) in %s", created, len(results), vault_path)

    return {
        "vault_path": vault_path,
        "results": [result.as_payload() for result in results],
        "created": created,
        "failed": len(results) - created,
        "recent_links": [record.as_payload() for record in session.ledger.list()],
    }


@mcp.tool()
async def list_recent_links(input: RecentLinksInput) -> dict[str, Any]:
    """List the most recently created links, newest first (at most 10).

    Returns:
        {"recent_links": [{"file_name", "target_path", "symlink_path", "date"}]}
    """
    return {"recent_links": [record.as_payload() for record in get_session().ledger.list()]}


@mcp.tool()
async def clear_recent_links(input: RecentLinksInput) -> dict[str, Any]:
    """Forget the recent-links history. Links on disk are left alone.

    Returns:
        {"recent_links": []}
    """
    get_session().ledger.clear()
    return {"recent_links": []}
