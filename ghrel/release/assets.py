"""Local asset discovery and content-type inference."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.release.errors import ReleaseError

__all__ = [
    "AssetFile",
    "CONTENT_TYPES",
    "DEFAULT_CONTENT_TYPE",
    "content_type_for",
    "read_asset",
    "sanitize_asset_name",
    "scan_asset_dir",
]

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Keys are matched case-sensitively against the file suffix.
CONTENT_TYPES: dict[str, str] = {
    ".zip": "application/zip",
    ".json": "application/json",
    ".yml": "application/x-yaml",
    ".yaml": "application/x-yaml",
    ".txt": "text/plain",
    ".exe": DEFAULT_CONTENT_TYPE,
    ".deb": DEFAULT_CONTENT_TYPE,
    ".rpm": DEFAULT_CONTENT_TYPE,
    ".snap": DEFAULT_CONTENT_TYPE,
    ".dmg": DEFAULT_CONTENT_TYPE,
    ".pkg": DEFAULT_CONTENT_TYPE,
    ".AppImage": DEFAULT_CONTENT_TYPE,
}


def content_type_for(name: str) -> str:
    """MIME type for a file name, from its last extension only."""
    return CONTENT_TYPES.get(Path(name).suffix, DEFAULT_CONTENT_TYPE)


def sanitize_asset_name(name: str) -> str:
    """Replace the first space with a hyphen: ``a b c.zip`` -> ``a-b c.zip``."""
    return name.replace(" ", "-", 1)


@dataclass(frozen=True, slots=True)
class AssetFile:
    path: Path
    name: str
    content: bytes
    content_type: str

    @property
    def content_length(self) -> int:
        return len(self.content)


def scan_asset_dir(directory: Path | None) -> list[Path]:
    """Regular files directly under ``directory``, sorted by name.

    A missing path or a path that is not a directory yields no files.
    Subdirectories are skipped, never descended into. So are FIFOs, sockets
    and dangling symlinks; a symlink to a regular file counts as a file.
    """
    if directory is None or not directory.is_dir():
        return []
    return sorted((p for p in directory.iterdir() if p.is_file()), key=lambda p: p.name)


def read_asset(path: Path) -> Result[AssetFile, ReleaseError]:
    try:
        content = path.read_bytes()
    except OSError as e:
        return Err(ReleaseError(kind="io", message=f"cannot read asset {path.name}: {e}"))
    return Ok(
        AssetFile(
            path=path,
            name=sanitize_asset_name(path.name),
            content=content,
            content_type=content_type_for(path.name),
        )
    )
