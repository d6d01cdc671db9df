"""Error presentation: console formatting and exit code mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghrel.core.errors import ErrorCode
from ghrel.output.console import Style

if TYPE_CHECKING:
    from ghrel.output.console import ConsoleProtocol
    from ghrel.release.errors import ReleaseError

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    match error.kind:
        case "config":
            return int(ErrorCode.CONFIG_ERROR)
        case "api":
            return int(ErrorCode.API_ERROR)
        case "io" | "upload":
            return int(ErrorCode.UPLOAD_ERROR)
