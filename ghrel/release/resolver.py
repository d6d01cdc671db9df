"""Find the release this run should write to, if one exists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from ghrel.core.result import Err, Ok, Result
from ghrel.github.api import RemoteRelease
from ghrel.release.errors import ReleaseError
from ghrel.release.model import LookupStrategy

if TYPE_CHECKING:
    from ghrel.github.api import ReleaseApi


@dataclass(frozen=True, slots=True)
class Found:
    release: RemoteRelease


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


Resolution: TypeAlias = Found | NotFound


def first_draft(releases: list[RemoteRelease]) -> RemoteRelease | None:
    for release in releases:
        if release.draft:
            return release
    return None


def resolve_release(
    api: ReleaseApi,
    tag: str,
    strategy: LookupStrategy = LookupStrategy.DRAFT,
) -> Result[Resolution, ReleaseError]:
    """Look up an existing release.

    With ``LookupStrategy.TAG`` the release whose tag equals ``tag`` is
    returned; a 404 means NotFound. With ``LookupStrategy.DRAFT`` the first
    draft on the first page of releases is returned regardless of its tag,
    assuming at most one draft is open at a time.

    Any other API failure is an error, never NotFound.
    """
    match strategy:
        case LookupStrategy.TAG:
            by_tag = api.find_release_by_tag(tag)
            if isinstance(by_tag, Err):
                return Err(ReleaseError.from_http(by_tag.error, action=f"lookup of release {tag}"))
            if by_tag.value is None:
                return Ok(NotFound())
            return Ok(Found(by_tag.value))
        case LookupStrategy.DRAFT:
            listed = api.list_releases()
            if isinstance(listed, Err):
                return Err(ReleaseError.from_http(listed.error, action="listing releases"))
            draft = first_draft(listed.value)
            if draft is None:
                return Ok(NotFound())
            return Ok(Found(draft))
