"""FastMCP server initialization and tool registration."""

import logging
from mcp.server.fastmcp import FastMCP

from obsidian_symlinker.config import load_app_config

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("obsidian_symlinker")

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Start the MCP server with stdio transport."""
    config = load_app_config()
    logging.basicConfig(level=config.log_level)
    logger.info("Starting Obsidian Symlinker MCP Server (settings: %s)", config.settings_path)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
