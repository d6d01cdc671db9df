"""Publish one release: resolve, write, then upload assets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ghrel.core.result import Err, Ok, Result
from ghrel.output.console import Style
from ghrel.release.model import LookupStrategy
from ghrel.release.resolver import Found, NotFound, resolve_release
from ghrel.release.uploader import upload_assets
from ghrel.release.writer import write_release

if TYPE_CHECKING:
    from ghrel.github.api import ReleaseApi, RemoteAsset
    from ghrel.output.console import ConsoleProtocol
    from ghrel.release.errors import ReleaseError
    from ghrel.release.model import ReleaseHandle, ReleaseRequest


@dataclass(frozen=True, slots=True)
class PublishOutcome:
    handle: ReleaseHandle
    assets: tuple[RemoteAsset, ...]


def publish_release(
    api: ReleaseApi,
    request: ReleaseRequest,
    *,
    console: ConsoleProtocol,
    strategy: LookupStrategy = LookupStrategy.DRAFT,
) -> Result[PublishOutcome, ReleaseError]:
    """Ensure the release exists with ``request``'s metadata, then attach assets.

    Stages run in order and the first failing stage aborts the run; no
    upload is attempted when the lookup or the write fails.
    """
    console.header(f"Release {request.tag}")
    console.print(f"lookup: {strategy}", Style.DIM)

    resolved = resolve_release(api, request.tag, strategy)
    if isinstance(resolved, Err):
        return resolved

    match resolved.value:
        case Found(release=release):
            console.info(f"found release {release.id} (tag: {release.tag_name or '-'})")
            existing = release
        case NotFound():
            console.info("no matching release, creating one")
            existing = None

    written = write_release(api, request, existing)
    if isinstance(written, Err):
        return written
    handle = written.value
    console.success(f"{'created' if handle.is_new else 'updated'} release {handle.id}")

    def _report(asset: RemoteAsset) -> None:
        console.success(f"uploaded {asset.name}")

    uploaded = upload_assets(api, handle.upload_url, request.asset_dir, on_uploaded=_report)
    if isinstance(uploaded, Err):
        return uploaded

    if not uploaded.value:
        console.print("no assets to upload", Style.DIM)
    return Ok(PublishOutcome(handle=handle, assets=tuple(uploaded.value)))
