from __future__ import annotations

from pathlib import Path

from ghrel.core.result import Err, Ok
from ghrel.release.model import ReleaseHandle
from ghrel.release.outputs import release_outputs, write_outputs

HANDLE = ReleaseHandle(
    id=42,
    upload_url="https://uploads.example.test/releases/42/assets{?name,label}",
    is_new=True,
    html_url="https://github.example.test/releases/42",
)


def test_release_outputs() -> None:
    assert release_outputs(HANDLE) == {
        "id": "42",
        "html_url": "https://github.example.test/releases/42",
        "upload_url": "https://uploads.example.test/releases/42/assets{?name,label}",
    }


def test_write_outputs_appends(tmp_path: Path) -> None:
    out = tmp_path / "github_output"
    out.write_text("previous=1\n", encoding="utf-8")

    assert write_outputs(out, HANDLE) == Ok(None)

    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "previous=1"
    assert "id=42" in lines
    assert "html_url=https://github.example.test/releases/42" in lines


def test_write_outputs_without_path() -> None:
    assert write_outputs(None, HANDLE) == Ok(None)


def test_write_outputs_error(tmp_path: Path) -> None:
    result = write_outputs(tmp_path / "missing" / "out", HANDLE)
    assert isinstance(result, Err)
    assert result.error.kind == "io"
