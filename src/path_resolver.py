"""
Path-prefix resolution for new torrents.

Works out the common folder of a file selection, the default torrent name,
the base path the torrent lives under, and every file's path relative to
the common folder. All path arithmetic is plain string work on both '/' and
'\\' separators so results don't depend on the host OS.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field, computed_field

logger = logging.getLogger(__name__)

SEPARATORS = ("/", "\\")
HIDDEN_FILE_MARKER = "."


class EmptySelectionError(Exception):
    """Exception raised when no visible files are left to build a torrent from."""

    pass


class FileDescriptor(BaseModel):
    """A single file picked by the user."""

    name: str = Field(min_length=1, description="Leaf file name")
    path: str = Field(min_length=1, description="Absolute path of the file")
    size: int = Field(ge=0, description="File size in bytes")

    model_config = {"frozen": True}

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(HIDDEN_FILE_MARKER)


class FileSet(BaseModel):
    """Ordered file selection, optionally rooted at a folder the user picked."""

    files: list[FileDescriptor] = Field(default_factory=list, description="Selected files in order")
    folder_path: str | None = Field(default=None, description="Folder the user selected, if any")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.files)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]


class ResolvedMetadata(BaseModel):
    """Everything derived from a file selection before the user edits anything."""

    common_prefix: str = Field(description="Folder shared by every selected file")
    default_name: str = Field(description="Suggested torrent name")
    base_path: str = Field(description="Folder the torrent's top-level entry lives in")
    relative_paths: list[str] = Field(description="Each file's path relative to common_prefix")
    total_bytes: int = Field(ge=0, description="Sum of all file sizes")

    model_config = {"frozen": True}

    @computed_field
    @property
    def file_count(self) -> int:
        """Number of files in the torrent."""
        return len(self.relative_paths)


def _last_separator(path: str) -> int:
    return max(path.rfind(sep) for sep in SEPARATORS)


def _is_root(path: str) -> bool:
    """True for '/', '\\' and drive roots like 'C:\\'."""
    if not path.endswith(SEPARATORS):
        return False
    head = path[:-1]
    return head == "" or (len(head) == 2 and head[1] == ":")


def strip_trailing_separators(path: str) -> str:
    """Drop trailing separators, leaving roots intact."""
    while path.endswith(SEPARATORS) and not _is_root(path):
        path = path[:-1]
    return path


def parent_dir(path: str) -> str:
    """
    Get the folder containing a path.

    '/a/b' -> '/a', '/a' -> '/', 'C:\\x' -> 'C:\\'. A path with no separator
    has no parent and gives ''.
    """
    path = strip_trailing_separators(path)
    if _is_root(path):
        return path
    index = _last_separator(path)
    if index < 0:
        return ""
    head = path[:index]
    if head == "" or (len(head) == 2 and head[1] == ":"):
        # Keep the separator of a root
        return path[: index + 1]
    return head


def base_name(path: str) -> str:
    """Get the last segment of a path ('' for a root)."""
    path = strip_trailing_separators(path)
    if _is_root(path):
        return ""
    return path[_last_separator(path) + 1 :]


def find_common_prefix(a: str, b: str) -> str:
    """Longest common leading substring of two strings, compared code unit by code unit."""
    i = 0
    limit = min(len(a), len(b))
    while i < limit and a[i] == b[i]:
        i += 1
    return a[:i]


def filter_visible(file_set: FileSet) -> FileSet:
    """Remove hidden files (names starting with '.') keeping the original order."""
    visible = [f for f in file_set.files if not f.is_hidden]
    if len(visible) != len(file_set.files):
        logger.debug(f"Skipped {len(file_set.files) - len(visible)} hidden file(s)")
    return FileSet(files=visible, folder_path=file_set.folder_path)


def common_prefix(paths: Sequence[str]) -> str:
    """
    Find the folder shared by every path.

    The raw prefix is computed character by character, so it may stop in the
    middle of a name. In that case it is walked up to the enclosing folder.

    Args:
        paths: Absolute paths, at least one

    Returns:
        Common folder, without a trailing separator unless it is a root

    Raises:
        EmptySelectionError: If no paths are given
    """
    if not paths:
        raise EmptySelectionError("Cannot find a common prefix of zero paths")

    prefix = paths[0]
    for path in paths[1:]:
        prefix = find_common_prefix(prefix, path)

    if prefix.endswith(SEPARATORS):
        return strip_trailing_separators(prefix)
    return parent_dir(prefix)


def relative_path(path: str, prefix: str, fallback: str) -> str:
    """Make a path relative to a folder, or return the fallback if it isn't under it."""
    if not prefix or not path.startswith(prefix):
        return fallback
    # '/a/b' is not a folder of '/a/bc/x'
    if not _is_root(prefix) and not path[len(prefix) :].startswith(SEPARATORS):
        return fallback
    rest = path[len(prefix) :].lstrip("".join(SEPARATORS))
    return rest or fallback


def derive_metadata(file_set: FileSet, folder_path: str | None = None) -> ResolvedMetadata:
    """
    Derive torrent metadata from a file selection.

    A single file is added in place: /a/b/foo.jpg gives name "foo.jpg" and
    base path "/a/b". Several files become a folder torrent: /a/b/{foo,bar}.jpg
    gives name "b" and base path "/a".

    Args:
        file_set: Files picked by the user; hidden files are ignored
        folder_path: Explicit folder overriding the computed common prefix.
                     Defaults to file_set.folder_path.

    Returns:
        ResolvedMetadata for the visible files

    Raises:
        EmptySelectionError: If no visible files remain
    """
    files = filter_visible(file_set).files
    if not files:
        raise EmptySelectionError("Select at least one file that is not hidden")

    override = folder_path or file_set.folder_path
    if override:
        prefix = strip_trailing_separators(override)
    else:
        prefix = common_prefix([f.path for f in files])

    total_bytes = sum(f.size for f in files)

    if len(files) == 1:
        default_name = files[0].name
        base_path = prefix
    else:
        default_name = base_name(prefix)
        base_path = parent_dir(prefix)

    relative_paths = [relative_path(f.path, prefix, f.name) for f in files]

    return ResolvedMetadata(
        common_prefix=prefix,
        default_name=default_name,
        base_path=base_path,
        relative_paths=relative_paths,
        total_bytes=total_bytes,
    )
