from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ghrel.core.config import RunnerConfig
from ghrel.github.api import GitHubReleaseApi, ReleaseApi
from ghrel.github.http import RealHttpClient
from ghrel.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    env: Mapping[str, str]
    console: ConsoleProtocol


def build_context() -> CLIContext:
    return CLIContext(env=os.environ, console=RichConsole())


def make_release_api(runner: RunnerConfig) -> ReleaseApi:
    http = RealHttpClient(token=runner.token)
    return GitHubReleaseApi(http, runner.repository, api_url=runner.api_url)
