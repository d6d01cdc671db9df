"""Typed access to the CI runner environment.

Runner metadata (token, repository, commit) comes from the usual
``GITHUB_*`` variables. Action inputs (``INPUT_*``) reach the CLI as typer
options and are validated in ``ghrel.release.inputs``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "DEFAULT_API_URL",
    "ConfigError",
    "RunnerConfig",
    "load_runner_config",
    "parse_bool_input",
]

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when a required input is missing or invalid."""

    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class RunnerConfig:
    """Credentials and repository coordinates for the remote API."""

    token: str
    repository: str  # owner/name
    api_url: str = DEFAULT_API_URL
    sha: str | None = None
    output_path: Path | None = None


def parse_bool_input(value: str) -> bool:
    # Only the literal "true" enables a flag; "TRUE", "1" or "yes" do not.
    return value == "true"


def load_runner_config(env: Mapping[str, str]) -> Result[RunnerConfig, ConfigError]:
    """Load token and repository coordinates from the environment.

    Args:
        env: Environment mapping (usually ``os.environ``)

    Returns:
        Ok(RunnerConfig) on success, Err(ConfigError) when the token or
        repository is missing or malformed
    """
    token = env.get("GITHUB_TOKEN", "").strip()
    if not token:
        return Err(
            ConfigError(
                "GITHUB_TOKEN is not set",
                hint="pass secrets.GITHUB_TOKEN through the step env",
            )
        )

    repository = env.get("GITHUB_REPOSITORY", "").strip()
    owner, sep, name = repository.partition("/")
    if not sep or not owner or not name or "/" in name:
        return Err(
            ConfigError(
                f"GITHUB_REPOSITORY must be 'owner/name', got: {repository!r}",
                hint="this is set automatically on GitHub runners",
            )
        )

    api_url = env.get("GITHUB_API_URL", "").strip().rstrip("/") or DEFAULT_API_URL
    sha = env.get("GITHUB_SHA", "").strip() or None
    output = env.get("GITHUB_OUTPUT", "").strip()

    return Ok(
        RunnerConfig(
            token=token,
            repository=repository,
            api_url=api_url,
            sha=sha,
            output_path=Path(output) if output else None,
        )
    )
