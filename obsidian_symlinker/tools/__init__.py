"""MCP tool definitions for the Obsidian symlinker.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from obsidian_symlinker.tools import vault_tools
from obsidian_symlinker.tools import link_tools

__all__ = [
    "vault_tools",
    "link_tools",
]
