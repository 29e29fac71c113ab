"""
Assembly of the request handed to the torrent-creation library.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from path_resolver import FileDescriptor, ResolvedMetadata

# Trackers pre-filled in the trackers field
DEFAULT_ANNOUNCE_LIST = [
    "udp://tracker.leechers-paradise.org:6969",
    "udp://tracker.coppersurfer.tk:6969",
    "udp://tracker.opentrackr.org:1337",
    "udp://explodie.org:6969",
    "udp://tracker.empire-js.us:1337",
    "wss://tracker.btorrent.xyz",
    "wss://tracker.openwebtorrent.com",
    "wss://tracker.fastcast.nz",
]


class TorrentCreationRequest(BaseModel):
    """Options for creating a new torrent from files on disk."""

    name: str = Field(description="Torrent name (file or top-level folder)")
    path: str = Field(description="Folder the named entry lives in")
    files: list[FileDescriptor] = Field(description="Files to include, in order")
    announce: list[str] = Field(default_factory=list, description="Tracker URLs")
    private: bool = Field(default=False, description="Private torrent flag")
    comment: str = Field(default="", description="Free-form comment")


def parse_announce_list(text: str) -> list[str]:
    """Split a trackers text field into URLs, one per non-blank line."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def parse_comment(text: str) -> str:
    return text.strip()


def default_trackers_text() -> str:
    return "\n".join(DEFAULT_ANNOUNCE_LIST)


def build_request(
    metadata: ResolvedMetadata,
    files: list[FileDescriptor],
    trackers: str = "",
    comment: str = "",
    private: bool = False,
) -> TorrentCreationRequest:
    """
    Combine resolved metadata with the user-edited fields.

    The name always comes from the metadata: files are used in place, so a
    different name would not match the folder on disk.

    Args:
        metadata: Output of derive_metadata for these files
        files: The visible files metadata was derived from
        trackers: Raw trackers field, one URL per line
        comment: Raw comment field
        private: Whether the torrent is private

    Returns:
        TorrentCreationRequest ready for dispatch
    """
    return TorrentCreationRequest(
        name=metadata.default_name,
        path=metadata.base_path,
        files=list(files),
        announce=parse_announce_list(trackers),
        private=private,
        comment=parse_comment(comment),
    )
