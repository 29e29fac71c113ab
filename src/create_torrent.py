"""
Create-torrent page model.

Turns the current file selection into what the create-torrent page shows,
and into a createTorrent action once the user confirms.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field, computed_field

from config import MAX_FILE_ELEMS
from formatters import format_torrent_info, truncate_listing
from path_resolver import EmptySelectionError, FileDescriptor, FileSet, ResolvedMetadata, derive_metadata, filter_visible
from torrent_request import TorrentCreationRequest, build_request, default_trackers_text

logger = logging.getLogger(__name__)

Dispatch = Callable[..., Any]

ERROR_MESSAGES = [
    "Sorry, you must select at least one file that is not a hidden file.",
    "Hidden files, starting with a . character, are not included.",
]


class CreateTorrentInfo(BaseModel):
    """Location state for the create-torrent page."""

    files: list[FileDescriptor] = Field(default_factory=list)
    folder_path: str | None = None
    show_advanced: bool = False


class CreateTorrentForm(BaseModel):
    """Values the user typed into the advanced panel."""

    trackers: str = Field(default_factory=default_trackers_text)
    comment: str = ""
    private: bool = False


class CreateTorrentErrorPage(BaseModel):
    """Shown when nothing but hidden files was selected."""

    title: str = "Create torrent"
    messages: list[str] = Field(default_factory=lambda: list(ERROR_MESSAGES))

    def cancel(self, dispatch: Dispatch) -> None:
        dispatch("back")


class CreateTorrentPage(BaseModel):
    """Everything the create-torrent page displays for a valid selection."""

    metadata: ResolvedMetadata
    files: list[FileDescriptor]
    show_advanced: bool = False
    trackers: str = Field(default_factory=default_trackers_text)

    @computed_field
    @property
    def title(self) -> str:
        return f"Create torrent {self.metadata.default_name}"

    @computed_field
    @property
    def torrent_info(self) -> str:
        return format_torrent_info(len(self.files), self.metadata.total_bytes)

    @computed_field
    @property
    def path(self) -> str:
        """Folder shown next to the 'Path:' label."""
        return self.metadata.common_prefix

    @computed_field
    @property
    def toggle_label(self) -> str:
        return "Basic" if self.show_advanced else "Advanced"

    @computed_field
    @property
    def file_listing(self) -> list[str]:
        """Relative paths to display, cut down to MAX_FILE_ELEMS entries."""
        return truncate_listing(self.metadata.relative_paths, MAX_FILE_ELEMS)

    def submit(self, form: CreateTorrentForm, dispatch: Dispatch) -> TorrentCreationRequest:
        """Build the creation request from the form and dispatch it."""
        request = build_request(
            self.metadata,
            self.files,
            trackers=form.trackers,
            comment=form.comment,
            private=form.private,
        )
        logger.info(f"Creating torrent {request.name} in {request.path} ({len(request.files)} files)")
        dispatch("createTorrent", request)
        return request

    def toggle_advanced(self, dispatch: Dispatch) -> None:
        dispatch("toggleCreateTorrentAdvanced")

    def cancel(self, dispatch: Dispatch) -> None:
        dispatch("back")


def render_create_torrent(info: CreateTorrentInfo) -> CreateTorrentPage | CreateTorrentErrorPage:
    """
    Build the page for the current selection.

    Hidden files are dropped first; if nothing is left the error page is
    returned instead of raising.
    """
    file_set = filter_visible(FileSet(files=info.files, folder_path=info.folder_path))
    try:
        metadata = derive_metadata(file_set)
    except EmptySelectionError as e:
        logger.warning(f"Nothing to create a torrent from: {e}")
        return CreateTorrentErrorPage()

    return CreateTorrentPage(
        metadata=metadata,
        files=file_set.files,
        show_advanced=info.show_advanced,
    )
