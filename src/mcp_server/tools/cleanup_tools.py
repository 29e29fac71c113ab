"""App state cleanup tools."""

from cleanup import CleanupReport, clean


def clean_app_state() -> CleanupReport:
    """
    Remove the app's config and temp directories and uninstall its handlers.

    Every step is attempted even when an earlier one fails.

    Returns:
        Report of each attempted step and any errors.
    """
    return clean()


def register_cleanup_tools(mcp) -> None:
    """Register cleanup tools with the MCP server."""
    mcp.tool()(clean_app_state)
