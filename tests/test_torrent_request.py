"""Tests for torrent creation request assembly."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from formatters import format_size, format_torrent_info, truncate_listing
from path_resolver import FileDescriptor, FileSet, derive_metadata
from torrent_request import (
    DEFAULT_ANNOUNCE_LIST,
    build_request,
    default_trackers_text,
    parse_announce_list,
    parse_comment,
)


class TestFormFields:
    """Tests for parsing user-edited fields."""

    def test_announce_list_split_and_trimmed(self) -> None:
        """Test trackers are split on newlines and trimmed."""
        text = "  udp://a.example:6969  \n\n wss://b.example \n   \n"
        assert parse_announce_list(text) == ["udp://a.example:6969", "wss://b.example"]

    def test_announce_list_empty(self) -> None:
        """Test an empty field gives no trackers."""
        assert parse_announce_list("") == []

    def test_comment_trimmed(self) -> None:
        """Test comments lose surrounding whitespace only."""
        assert parse_comment("  my  comment \n") == "my  comment"

    def test_default_trackers_round_trip(self) -> None:
        """Test the pre-filled trackers parse back to the default list."""
        assert parse_announce_list(default_trackers_text()) == DEFAULT_ANNOUNCE_LIST


class TestBuildRequest:
    """Tests for build_request()."""

    def test_multi_file_request(self) -> None:
        """Test the request uses resolved name and base path."""
        files = [
            FileDescriptor(name="foo.jpg", path="/a/b/foo.jpg", size=5),
            FileDescriptor(name="bar.jpg", path="/a/b/bar.jpg", size=7),
        ]
        metadata = derive_metadata(FileSet(files=files))

        request = build_request(
            metadata,
            files,
            trackers="udp://t.example:1337\n",
            comment=" hello ",
            private=True,
        )

        assert request.name == "b"
        assert request.path == "/a"
        assert request.files == files
        assert request.announce == ["udp://t.example:1337"]
        assert request.private is True
        assert request.comment == "hello"

    def test_serialized_keys(self) -> None:
        """Test the request serializes with the library's option names."""
        files = [FileDescriptor(name="foo.jpg", path="/a/b/foo.jpg", size=5)]
        request = build_request(derive_metadata(FileSet(files=files)), files)

        data = request.model_dump()
        assert set(data) == {"name", "path", "files", "announce", "private", "comment"}
        assert data["files"] == [{"name": "foo.jpg", "path": "/a/b/foo.jpg", "size": 5}]
        assert data["name"] == "foo.jpg"
        assert data["path"] == "/a/b"


class TestFormatters:
    """Tests for summary formatting."""

    def test_format_size(self) -> None:
        """Test size formatting."""
        assert format_size(512) == "512.00 B"
        assert format_size(1536) == "1.50 KB"

    def test_torrent_info(self) -> None:
        """Test the files/size summary line."""
        assert format_torrent_info(3, 1536) == "3 files, 1.50 KB"
        assert format_torrent_info(1, 10) == "1 file, 10.00 B"

    def test_truncate_listing_short(self) -> None:
        """Test short listings are kept whole."""
        assert truncate_listing(["a", "b"], 2) == ["a", "b"]

    def test_truncate_listing_long(self) -> None:
        """Test long listings end with a count of the rest."""
        assert truncate_listing(["a", "b", "c", "d"], 2) == ["a", "b", "+ 2 more"]
