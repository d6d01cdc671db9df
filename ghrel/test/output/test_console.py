"""Tests for ghrel.output - console capture and error presentation."""

from __future__ import annotations

import pytest

from ghrel.core.errors import ErrorCode
from ghrel.output.console import MockConsole, RichConsole, Style
from ghrel.output.errors import print_release_error, release_error_exit_code
from ghrel.release.errors import ReleaseError


class TestMockConsole:
    def test_captures_styles(self) -> None:
        console = MockConsole()
        console.header("Release v1")
        console.info("found release 3")
        console.success("uploaded app.zip")
        console.warning("slow")
        console.print("dim", Style.DIM)

        assert console.messages == [
            "Release v1",
            "info: found release 3",
            "OK uploaded app.zip",
            "warning: slow",
            "dim",
        ]
        assert console.count(Style.SUCCESS) == 1
        assert not console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.success("uploaded a.zip")
        console.success("uploaded b.zip")
        assert len(console.find("uploaded")) == 2
        assert console.text == "OK uploaded a.zip\nOK uploaded b.zip"


class TestRichConsole:
    def test_escapes_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.success("uploaded [linux] build.zip")
        console.error("bad [input]")

        captured = capsys.readouterr()
        assert "[linux]" in captured.out
        assert "bad [input]" in captured.err


class TestReleaseErrorPresentation:
    def test_message_and_hint(self) -> None:
        console = MockConsole()
        error = ReleaseError(kind="upload", message="b.zip: timed out", hint="1 of 3 asset uploads failed")

        print_release_error(error, console)

        assert console.messages == ["error: b.zip: timed out", "hint: 1 of 3 asset uploads failed"]
        assert console.has_error()

    def test_without_hint(self) -> None:
        console = MockConsole()
        print_release_error(ReleaseError(kind="api", message="HTTP 401"), console)
        assert console.messages == ["error: HTTP 401"]

    @pytest.mark.parametrize(
        ("kind", "code"),
        [
            ("config", ErrorCode.CONFIG_ERROR),
            ("api", ErrorCode.API_ERROR),
            ("io", ErrorCode.UPLOAD_ERROR),
            ("upload", ErrorCode.UPLOAD_ERROR),
        ],
    )
    def test_exit_codes(self, kind: str, code: ErrorCode) -> None:
        error = ReleaseError(kind=kind, message="x")  # type: ignore[arg-type]
        assert release_error_exit_code(error) == int(code)
