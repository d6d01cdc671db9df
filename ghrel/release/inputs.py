"""Turn raw action inputs into a validated ReleaseRequest.

Validation runs before any remote call so a misconfigured workflow fails
fast.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

from ghrel.core.config import ConfigError, RunnerConfig, parse_bool_input
from ghrel.core.result import Err, Ok, Result
from ghrel.release.model import LookupStrategy, ReleaseRequest, normalize_tag

__all__ = [
    "ActionConfig",
    "ActionInputs",
    "build_action_config",
]


@dataclass(frozen=True, slots=True)
class ActionInputs:
    """Inputs exactly as supplied (strings, unvalidated).

    Values may carry the surrounding whitespace of a workflow file;
    ``build_action_config`` strips every field before use.
    """

    tag_name: str
    asset_dir_path: str
    release_name: str = ""
    body: str = ""
    body_path: str = ""
    draft: str = ""
    prerelease: str = ""
    commitish: str = ""
    lookup: str = ""


@dataclass(frozen=True, slots=True)
class ActionConfig:
    runner: RunnerConfig
    request: ReleaseRequest
    strategy: LookupStrategy


def _stripped(inputs: ActionInputs) -> ActionInputs:
    return ActionInputs(**{f.name: getattr(inputs, f.name).strip() for f in fields(inputs)})

def _parse_strategy(value: str) -> Result[LookupStrategy, ConfigError]:
    if not value:
        return Ok(LookupStrategy.DRAFT)
    try:
        return Ok(LookupStrategy(value.lower()))
    except ValueError:
        choices = ", ".join(s.value for s in LookupStrategy)
        return Err(ConfigError(f"Invalid lookup strategy: {value!r}", hint=f"one of: {choices}"))


def _read_body(inputs: ActionInputs) -> Result[str, ConfigError]:
    if inputs.body or not inputs.body_path:
        return Ok(inputs.body)
    path = Path(inputs.body_path)
    try:
        return Ok(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigError(f"Cannot read body_path {path}: {e}"))


def build_action_config(
    inputs: ActionInputs,
    runner: RunnerConfig,
) -> Result[ActionConfig, ConfigError]:
    """Validate inputs against the runner environment.

    Args:
        inputs: Raw inputs
        runner: Token, repository and triggering commit

    Returns:
        Ok(ActionConfig), or Err(ConfigError) naming the first bad input
    """
    inputs = _stripped(inputs)
    tag = normalize_tag(inputs.tag_name)
    if not tag:
        return Err(ConfigError("Input required and not supplied: tag_name", hint="set INPUT_TAG_NAME"))

    if not inputs.asset_dir_path:
        return Err(
            ConfigError(
                "Input required and not supplied: asset_dir_path",
                hint="set INPUT_ASSET_DIR_PATH",
            )
        )

    commitish = inputs.commitish or runner.sha
    if not commitish:
        return Err(
            ConfigError(
                "No commitish supplied and GITHUB_SHA is not set",
                hint="set INPUT_COMMITISH",
            )
        )

    strategy = _parse_strategy(inputs.lookup)
    if isinstance(strategy, Err):
        return strategy

    body = _read_body(inputs)
    if isinstance(body, Err):
        return body

    request = ReleaseRequest(
        tag=tag,
        release_name=normalize_tag(inputs.release_name),
        body=body.value,
        draft=parse_bool_input(inputs.draft),
        prerelease=parse_bool_input(inputs.prerelease),
        target_commitish=commitish,
        asset_dir=Path(inputs.asset_dir_path),
    )
    return Ok(ActionConfig(runner=runner, request=request, strategy=strategy.value))
