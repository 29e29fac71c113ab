"""MCP resources for torrent defaults and app locations."""

import config
from torrent_request import DEFAULT_ANNOUNCE_LIST


def resource_default_trackers() -> str:
    """List the trackers new torrents announce to by default."""
    lines = ["# Default Trackers\n"]
    for url in DEFAULT_ANNOUNCE_LIST:
        lines.append(f"- `{url}`")
    return "\n".join(lines)


def resource_app_locations() -> str:
    """Show where the app keeps its config and temp files."""
    lines = ["# App Locations\n"]
    lines.append(f"- **Config:** `{config.CONFIG_PATH}`")
    lines.append(f"- **Temp:** `{config.TMP_PATH}`")
    lines.append(f"- **Desktop entry:** `{config.DESKTOP_FILE_PATH}`")
    return "\n".join(lines)


def register_resources(mcp) -> None:
    """Register all MCP resources with the server."""
    mcp.resource("trackers://default")(resource_default_trackers)
    mcp.resource("app://locations")(resource_app_locations)
