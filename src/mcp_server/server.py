"""
Main MCP server setup and entry point.

This module initializes the FastMCP server and registers all tools and resources.
"""

import sys
from pathlib import Path

# Project modules (path_resolver, cleanup, ...) live directly under src/
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastmcp import FastMCP  # noqa: E402

from mcp_server.resources import register_resources  # noqa: E402
from mcp_server.tools import register_all_tools  # noqa: E402

# Initialize FastMCP server
mcp = FastMCP(
    "Torrent Maker",
    instructions="Prepares new torrents from local files. "
    "Use the available tools to resolve a file selection, build a torrent creation request, and clean up app state.",
)

# Register all tools and resources
register_all_tools(mcp)
register_resources(mcp)


def main() -> None:
    """Run the MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
