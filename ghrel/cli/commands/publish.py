from __future__ import annotations

import typer

from ghrel.cli.commands._helpers import exit_on_config_error, exit_on_release_error
from ghrel.cli.context import build_context, make_release_api
from ghrel.core.config import load_runner_config
from ghrel.core.result import Err
from ghrel.output.console import Style
from ghrel.release.inputs import ActionInputs, build_action_config
from ghrel.release.outputs import write_outputs
from ghrel.release.service import publish_release


def publish(
    tag_name: str = typer.Option(
        "", "--tag-name", envvar="INPUT_TAG_NAME", help="Release tag (refs/tags/ is stripped)."
    ),
    asset_dir_path: str = typer.Option(
        "", "--asset-dir", envvar="INPUT_ASSET_DIR_PATH", help="Directory of files to upload."
    ),
    release_name: str = typer.Option(
        "", "--release-name", envvar="INPUT_RELEASE_NAME", help="Release title."
    ),
    body: str = typer.Option("", "--body", envvar="INPUT_BODY", help="Release description."),
    body_path: str = typer.Option(
        "", "--body-path", envvar="INPUT_BODY_PATH", help="File to read the body from."
    ),
    draft: str = typer.Option("false", "--draft", envvar="INPUT_DRAFT", help="'true' or 'false'."),
    prerelease: str = typer.Option(
        "false", "--prerelease", envvar="INPUT_PRERELEASE", help="'true' or 'false'."
    ),
    commitish: str = typer.Option(
        "", "--commitish", envvar="INPUT_COMMITISH", help="Target commit (default: GITHUB_SHA)."
    ),
    lookup: str = typer.Option(
        "draft", "--lookup", envvar="INPUT_LOOKUP", help="How to find an existing release: draft|tag."
    ),
) -> None:
    """Create or update a release and upload every file in the asset directory."""
    ctx = build_context()

    runner = load_runner_config(ctx.env)
    if isinstance(runner, Err):
        exit_on_config_error(runner.error, ctx)

    inputs = ActionInputs(
        tag_name=tag_name,
        asset_dir_path=asset_dir_path,
        release_name=release_name,
        body=body,
        body_path=body_path,
        draft=draft,
        prerelease=prerelease,
        commitish=commitish,
        lookup=lookup,
    )
    config = build_action_config(inputs, runner.value)
    if isinstance(config, Err):
        exit_on_config_error(config.error, ctx)

    action = config.value
    ctx.console.print(f"repository: {action.runner.repository}", Style.DIM)

    api = make_release_api(action.runner)
    result = publish_release(api, action.request, console=ctx.console, strategy=action.strategy)
    if isinstance(result, Err):
        exit_on_release_error(result.error, ctx)

    outcome = result.value
    written = write_outputs(action.runner.output_path, outcome.handle)
    if isinstance(written, Err):
        exit_on_release_error(written.error, ctx)

    if outcome.handle.html_url:
        ctx.console.print(outcome.handle.html_url, Style.DIM)
    ctx.console.success(f"published {action.request.tag} with {len(outcome.assets)} asset(s)")
