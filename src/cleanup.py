"""
Remove all traces of the app from the system (config and temp files).
Useful for developers.
"""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, Field, computed_field

import config

logger = logging.getLogger(__name__)


class CleanupStep(BaseModel):
    """Outcome of one teardown step."""

    name: str
    target: str | None = None
    removed: bool = False
    error: str | None = None


class CleanupReport(BaseModel):
    """Every step that was attempted, in order."""

    steps: list[CleanupStep] = Field(default_factory=list)

    @computed_field
    @property
    def errors(self) -> list[str]:
        return [f"{s.name}: {s.error}" for s in self.steps if s.error]

    @computed_field
    @property
    def ok(self) -> bool:
        return not self.errors


def remove_tree(path: Path) -> bool:
    """
    Recursively delete a file or directory.

    Returns:
        True if something was deleted, False if the path didn't exist
    """
    if not path.exists() and not path.is_symlink():
        return False
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
    return True


def uninstall_handlers(platform: str | None = None) -> list[Path]:
    """
    Deregister the .torrent file and magnet link handlers.

    On Linux the handlers are a desktop entry plus its icon. Other platforms
    register them through the installer, so there is nothing to remove here.

    Args:
        platform: Platform to uninstall for. Defaults to sys.platform.

    Returns:
        Files that were removed

    Raises:
        OSError: If any handler file couldn't be removed, after trying all of them
    """
    platform = platform or sys.platform
    if not platform.startswith("linux"):
        logger.debug(f"No handlers to uninstall on {platform}")
        return []

    removed = []
    failures = []
    for path in (config.DESKTOP_FILE_PATH, config.ICON_FILE_PATH):
        try:
            if remove_tree(path):
                removed.append(path)
        except OSError as e:
            logger.warning(f"Failed to remove {path}: {e}")
            failures.append(str(e))

    # Every handler file is attempted before a failure is reported
    if failures:
        raise OSError("; ".join(failures))
    return removed


def _attempt(report: CleanupReport, name: str, target: Path | None, action: Callable[[], object]) -> None:
    step = CleanupStep(name=name, target=str(target) if target else None)
    try:
        step.removed = bool(action())
    except OSError as e:
        logger.warning(f"Failed to {name}: {e}")
        step.error = str(e)
    else:
        if step.removed:
            logger.info(f"Done: {name}")
        else:
            logger.debug(f"Nothing to do: {name}")
    report.steps.append(step)


def clean(config_path: Path | None = None, tmp_path: Path | None = None) -> CleanupReport:
    """
    Delete the config directory, the temp directory and the OS handlers.

    Each step is attempted even if an earlier one failed. Nothing is rolled
    back.

    Args:
        config_path: Config directory. Defaults to config.CONFIG_PATH.
        tmp_path: Temp directory. Defaults to config.TMP_PATH.

    Returns:
        CleanupReport describing every attempted step
    """
    config_path = config_path or config.CONFIG_PATH
    tmp_path = tmp_path or config.TMP_PATH

    report = CleanupReport()
    _attempt(report, "remove config directory", config_path, lambda: remove_tree(config_path))
    _attempt(report, "remove temp directory", tmp_path, lambda: remove_tree(tmp_path))
    _attempt(report, "uninstall handlers", None, uninstall_handlers)
    return report
