"""Create or update the release record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghrel.core.result import Err, Ok, Result
from ghrel.release.errors import ReleaseError
from ghrel.release.model import ReleaseHandle

if TYPE_CHECKING:
    from ghrel.github.api import ReleaseApi, RemoteRelease
    from ghrel.release.model import ReleaseRequest


def write_release(
    api: ReleaseApi,
    request: ReleaseRequest,
    existing: RemoteRelease | None,
) -> Result[ReleaseHandle, ReleaseError]:
    """Issue exactly one create (no ``existing``) or one update call.

    Updates re-send every field. The update response may omit
    ``upload_url``, in which case the one from the lookup is kept.
    """
    fields = request.fields()

    if existing is None:
        created = api.create_release(fields)
        if isinstance(created, Err):
            return Err(ReleaseError.from_http(created.error, action=f"create release {request.tag}"))
        release = created.value
        if not release.upload_url:
            return Err(
                ReleaseError(
                    kind="api",
                    message=f"created release {release.id} has no upload_url",
                )
            )
        return Ok(
            ReleaseHandle(
                id=release.id,
                upload_url=release.upload_url,
                is_new=True,
                html_url=release.html_url,
            )
        )

    updated = api.update_release(existing.id, fields)
    if isinstance(updated, Err):
        return Err(ReleaseError.from_http(updated.error, action=f"update release {existing.id}"))
    release = updated.value
    upload_url = release.upload_url or existing.upload_url
    if not upload_url:
        return Err(
            ReleaseError(
                kind="api",
                message=f"release {existing.id} has no upload_url",
            )
        )
    return Ok(
        ReleaseHandle(
            id=existing.id,
            upload_url=upload_url,
            is_new=False,
            html_url=release.html_url or existing.html_url,
        )
    )
