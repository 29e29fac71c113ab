"""File selection and torrent request tools."""

from create_torrent import CreateTorrentForm, CreateTorrentInfo, CreateTorrentPage, render_create_torrent
from file_selection import FileSelectionError, collect_files
from path_resolver import EmptySelectionError, ResolvedMetadata, derive_metadata
from torrent_request import TorrentCreationRequest


def resolve_selection(
    paths: list[str],
) -> ResolvedMetadata:
    """
    Work out the default name, base path and relative file paths for a selection.

    Hidden files (names starting with '.') are ignored.

    Args:
        paths: Files or a single folder to build a torrent from.

    Returns:
        Common folder, default torrent name, base path, relative paths and total size.
    """
    try:
        return derive_metadata(collect_files(paths))
    except (FileSelectionError, EmptySelectionError) as e:
        raise ValueError(f"Cannot resolve selection: {e}") from e


def prepare_torrent(
    paths: list[str],
    trackers: list[str] | None = None,
    comment: str = "",
    private: bool = False,
) -> TorrentCreationRequest:
    """
    Build the request a torrent-creation library needs to create a torrent in place.

    Args:
        paths: Files or a single folder to include.
        trackers: Tracker URLs. Defaults to the built-in tracker list.
        comment: Comment stored in the torrent.
        private: Whether the torrent is private.

    Returns:
        Torrent name, base path, files, trackers, private flag and comment.
    """
    try:
        file_set = collect_files(paths)
    except FileSelectionError as e:
        raise ValueError(f"Cannot prepare torrent: {e}") from e

    page = render_create_torrent(CreateTorrentInfo(files=file_set.files, folder_path=file_set.folder_path))
    if not isinstance(page, CreateTorrentPage):
        raise ValueError(" ".join(page.messages))

    form = CreateTorrentForm(comment=comment, private=private)
    if trackers is not None:
        form.trackers = "\n".join(trackers)

    requests: list[TorrentCreationRequest] = []
    page.submit(form, lambda action, *payload: requests.extend(payload))
    return requests[0]


def register_selection_tools(mcp) -> None:
    """Register selection-related tools with the MCP server."""
    mcp.tool()(resolve_selection)
    mcp.tool()(prepare_torrent)
