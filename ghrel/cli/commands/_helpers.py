"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from ghrel.output.errors import print_release_error, release_error_exit_code
from ghrel.release.errors import ReleaseError

if TYPE_CHECKING:
    from ghrel.cli.context import CLIContext
    from ghrel.core.config import ConfigError


def exit_on_release_error(error: ReleaseError, ctx: CLIContext) -> NoReturn:
    """Report a failed run as a single message and exit non-zero."""
    print_release_error(error, ctx.console)
    raise typer.Exit(code=release_error_exit_code(error))


def exit_on_config_error(error: ConfigError, ctx: CLIContext) -> NoReturn:
    exit_on_release_error(ReleaseError.from_config(error), ctx)
