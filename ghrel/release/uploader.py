"""Concurrent upload of every file in the asset directory."""

from __future__ import annotations

import concurrent.futures
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from ghrel.core.result import Err, Ok, Result
from ghrel.github.api import RemoteAsset
from ghrel.release.assets import read_asset, scan_asset_dir
from ghrel.release.errors import ReleaseError

if TYPE_CHECKING:
    from ghrel.github.api import ReleaseApi


def upload_file(
    api: ReleaseApi,
    upload_url: str,
    path: Path,
) -> Result[RemoteAsset, ReleaseError]:
    """Read one file and upload it. Not retried."""
    asset = read_asset(path)
    if isinstance(asset, Err):
        return asset

    file = asset.value
    result = api.upload_asset(upload_url, file.name, file.content, file.content_type)
    if isinstance(result, Err):
        return Err(ReleaseError(kind="upload", message=f"{file.name}: {result.error}"))
    return result


def upload_assets(
    api: ReleaseApi,
    upload_url: str,
    directory: Path | None,
    *,
    on_uploaded: Callable[[RemoteAsset], None] | None = None,
) -> Result[list[RemoteAsset], ReleaseError]:
    """Upload every regular file directly under ``directory``.

    One worker per file, no cap. All uploads are awaited; the run succeeds
    only if every upload succeeds. Uploads that completed before a failure
    stay attached to the release.

    Returns:
        Ok with uploaded assets in completion order, or Err describing the
        first failure seen and how many uploads failed overall
    """
    files = scan_asset_dir(directory)
    if not files:
        return Ok([])

    uploaded: list[RemoteAsset] = []
    failures: list[ReleaseError] = []

    with concurrent.futures.ThreadPoolExecutor(max_workers=len(files)) as executor:
        futures = {executor.submit(upload_file, api, upload_url, path): path for path in files}

        for future in concurrent.futures.as_completed(futures):
            path = futures[future]
            try:
                result = future.result()
            except Exception as e:
                result = Err(ReleaseError(kind="upload", message=f"{path.name}: {e}"))

            if isinstance(result, Err):
                failures.append(result.error)
                continue
            uploaded.append(result.value)
            if on_uploaded is not None:
                on_uploaded(result.value)

    if failures:
        first = failures[0]
        return Err(
            ReleaseError(
                kind=first.kind,
                message=first.message,
                hint=f"{len(failures)} of {len(files)} asset uploads failed",
            )
        )
    return Ok(uploaded)
