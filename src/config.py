"""Application-wide settings and well-known locations."""

import os
import sys
import tempfile
from pathlib import Path

APP_NAME = "WebTorrent"
APP_ID = "webtorrent-desktop"

# Longest file listing shown on the create-torrent page
MAX_FILE_ELEMS = 100


def _default_config_path(platform: str | None = None) -> Path:
    platform = platform or sys.platform
    home = Path.home()
    if platform == "darwin":
        return home / "Library" / "Application Support" / APP_NAME
    if platform == "win32":
        return Path(os.environ.get("APPDATA", home / "AppData" / "Roaming")) / APP_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME", home / ".config")) / APP_NAME


PREFERRED_TMP_ROOT = Path("/tmp")


def _default_tmp_root(preferred: Path = PREFERRED_TMP_ROOT) -> Path:
    # Prefer /tmp where it exists, the platform temp dir otherwise
    if preferred.is_dir():
        return preferred
    return Path(tempfile.gettempdir())


CONFIG_PATH = Path(os.environ.get("TORRENT_MAKER_CONFIG_PATH") or _default_config_path())
TMP_ROOT = Path(os.environ.get("TORRENT_MAKER_TMP_DIR") or _default_tmp_root())
TMP_PATH = TMP_ROOT / "webtorrent"

# Handler files installed on Linux desktops
XDG_DATA_HOME = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")
DESKTOP_FILE_PATH = XDG_DATA_HOME / "applications" / f"{APP_ID}.desktop"
ICON_FILE_PATH = XDG_DATA_HOME / "icons" / f"{APP_ID}.png"
