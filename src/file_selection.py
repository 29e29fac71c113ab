"""
Build a file selection from paths on disk.
"""

import logging
import os
from pathlib import Path

from path_resolver import FileDescriptor, FileSet

logger = logging.getLogger(__name__)


class FileSelectionError(Exception):
    """Exception raised when a selected path can't be used."""

    pass


def describe_file(path: Path) -> FileDescriptor:
    """Create a FileDescriptor for a single file."""
    path = Path(os.path.abspath(path))
    return FileDescriptor(name=path.name, path=str(path), size=path.stat().st_size)


def collect_files(paths: list[str]) -> FileSet:
    """
    Expand files and folders into an ordered file selection.

    Folders are walked recursively in sorted order. Selecting exactly one
    folder records it as the selection's folder_path.

    Args:
        paths: Files and/or folders picked by the user

    Returns:
        FileSet with every regular file found, hidden ones included

    Raises:
        FileSelectionError: If a path doesn't exist
    """
    files: list[FileDescriptor] = []
    folder_path: str | None = None

    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileSelectionError(f"File not found: {raw}")

        if path.is_dir():
            found = sorted(p for p in path.rglob("*") if p.is_file())
            logger.debug(f"Found {len(found)} files in {path}")
            files.extend(describe_file(p) for p in found)
        else:
            files.append(describe_file(path))

    if len(paths) == 1 and Path(paths[0]).is_dir():
        folder_path = os.path.abspath(paths[0])

    return FileSet(files=files, folder_path=folder_path)
