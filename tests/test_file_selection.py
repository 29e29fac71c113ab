"""Tests for building selections from disk."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from file_selection import FileSelectionError, collect_files
from path_resolver import derive_metadata


@pytest.fixture
def album(tmp_path: Path) -> Path:
    folder = tmp_path / "album"
    (folder / "disc2").mkdir(parents=True)
    (folder / "01.flac").write_bytes(b"abc")
    (folder / "disc2" / "01.flac").write_bytes(b"defgh")
    (folder / ".DS_Store").write_bytes(b"x")
    return folder


class TestCollectFiles:
    """Tests for collect_files()."""

    def test_single_folder(self, album: Path) -> None:
        """Test a folder is walked and recorded as folder_path."""
        file_set = collect_files([str(album)])
        assert file_set.folder_path == str(album.absolute())
        assert sorted(f.name for f in file_set.files) == [".DS_Store", "01.flac", "01.flac"]

    def test_single_folder_metadata(self, album: Path) -> None:
        """Test a folder selection resolves to a folder torrent."""
        metadata = derive_metadata(collect_files([str(album)]))
        assert metadata.default_name == "album"
        assert metadata.base_path == str(album.parent)
        assert metadata.relative_paths == ["01.flac", "disc2/01.flac"]
        assert metadata.total_bytes == 8

    def test_single_file(self, album: Path) -> None:
        """Test a single file keeps its size and has no folder_path."""
        file_set = collect_files([str(album / "01.flac")])
        assert file_set.folder_path is None
        assert len(file_set) == 1
        assert file_set.files[0].size == 3
        assert file_set.files[0].path == str((album / "01.flac").absolute())

    def test_loose_files(self, album: Path) -> None:
        """Test loose files keep the given order."""
        paths = [str(album / "disc2" / "01.flac"), str(album / "01.flac")]
        file_set = collect_files(paths)
        assert file_set.paths == paths

    def test_missing_path(self, tmp_path: Path) -> None:
        """Test a missing path is reported."""
        with pytest.raises(FileSelectionError, match="not found"):
            collect_files([str(tmp_path / "nope")])

    def test_parent_folder_is_normalized(self, album: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test selecting '..' names the torrent after the real folder."""
        monkeypatch.chdir(album / "disc2")

        file_set = collect_files([".."])
        metadata = derive_metadata(file_set)

        assert file_set.folder_path == str(album.resolve())
        assert all(".." not in f.path for f in file_set.files)
        assert metadata.default_name == "album"
        assert metadata.base_path == str(album.resolve().parent)
        assert metadata.relative_paths == ["01.flac", "disc2/01.flac"]
