"""MCP tools for the torrent maker."""

from .cleanup_tools import register_cleanup_tools
from .selection_tools import register_selection_tools


def register_all_tools(mcp) -> None:
    """Register all MCP tools with the server."""
    register_selection_tools(mcp)
    register_cleanup_tools(mcp)
