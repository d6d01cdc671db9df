from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from ghrel.core.result import Err, Ok
from ghrel.release.assets import (
    DEFAULT_CONTENT_TYPE,
    content_type_for,
    read_asset,
    sanitize_asset_name,
    scan_asset_dir,
)


class TestContentType:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("app.zip", "application/zip"),
            ("manifest.json", "application/json"),
            ("latest.yml", "application/x-yaml"),
            ("latest-mac.yaml", "application/x-yaml"),
            ("notes.txt", "text/plain"),
            ("setup.exe", "application/octet-stream"),
            ("app.deb", "application/octet-stream"),
            ("app.rpm", "application/octet-stream"),
            ("app.snap", "application/octet-stream"),
            ("app.dmg", "application/octet-stream"),
            ("app.pkg", "application/octet-stream"),
            ("App-1.0.AppImage", "application/octet-stream"),
            ("checksums.sha256", "application/octet-stream"),
            ("LICENSE", "application/octet-stream"),
            ("app.tar.gz", "application/octet-stream"),
        ],
    )
    def test_by_extension(self, name: str, expected: str) -> None:
        assert content_type_for(name) == expected

    def test_case_sensitive(self) -> None:
        assert content_type_for("APP.ZIP") == DEFAULT_CONTENT_TYPE
        assert content_type_for("notes.TXT") == DEFAULT_CONTENT_TYPE

    def test_only_last_extension_counts(self) -> None:
        assert content_type_for("data.json.zip") == "application/zip"


class TestSanitizeName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("My File.zip", "My-File.zip"),
            ("a b c.zip", "a-b c.zip"),
            ("plain.zip", "plain.zip"),
            (" lead.txt", "-lead.txt"),
        ],
    )
    def test_first_space_only(self, name: str, expected: str) -> None:
        assert sanitize_asset_name(name) == expected


class TestScanAssetDir:
    def test_missing_dir(self, tmp_path: Path) -> None:
        assert scan_asset_dir(tmp_path / "nope") == []

    def test_none(self) -> None:
        assert scan_asset_dir(None) == []

    def test_file_path_is_not_a_dir(self, tmp_path: Path) -> None:
        f = tmp_path / "app.zip"
        f.write_bytes(b"PK")
        assert scan_asset_dir(f) == []

    def test_empty_dir(self, tmp_path: Path) -> None:
        assert scan_asset_dir(tmp_path) == []

    def test_skips_subdirectories(self, tmp_path: Path) -> None:
        (tmp_path / "notes.txt").write_text("hi", encoding="utf-8")
        (tmp_path / "extra").mkdir()
        (tmp_path / "extra" / "nested.zip").write_bytes(b"PK")

        assert scan_asset_dir(tmp_path) == [tmp_path / "notes.txt"]

    def test_sorted_by_name(self, tmp_path: Path) -> None:
        for name in ("b.zip", "a.txt", "c.json"):
            (tmp_path / name).write_bytes(b"x")
        assert [p.name for p in scan_asset_dir(tmp_path)] == ["a.txt", "b.zip", "c.json"]

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes need POSIX")
    def test_skips_fifo(self, tmp_path: Path) -> None:
        (tmp_path / "app.zip").write_bytes(b"PK")
        os.mkfifo(tmp_path / "pipe")

        assert scan_asset_dir(tmp_path) == [tmp_path / "app.zip"]

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test_symlinks(self, tmp_path: Path) -> None:
        target = tmp_path / "real.zip"
        target.write_bytes(b"PK")
        dist = tmp_path / "dist"
        dist.mkdir()
        (dist / "linked.zip").symlink_to(target)
        (dist / "dangling.zip").symlink_to(tmp_path / "gone.zip")

        assert scan_asset_dir(dist) == [dist / "linked.zip"]


class TestReadAsset:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "My Notes.txt"
        path.write_bytes(b"hello world")

        result = read_asset(path)

        assert isinstance(result, Ok)
        asset = result.value
        assert asset.name == "My-Notes.txt"
        assert asset.content == b"hello world"
        assert asset.content_type == "text/plain"
        assert asset.content_length == 11

    def test_missing_file(self, tmp_path: Path) -> None:
        result = read_asset(tmp_path / "gone.zip")
        assert isinstance(result, Err)
        assert result.error.kind == "io"
        assert "gone.zip" in result.error.message
