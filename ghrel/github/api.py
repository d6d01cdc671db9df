"""GitHub Releases API.

``ReleaseApi`` is the narrow surface the release pipeline needs. The
pipeline only depends on the protocol; ``GitHubReleaseApi`` implements it
over an ``HttpClient`` so tests can inject either a fake API or a mock
HTTP client.
"""

from __future__ import annotations

import threading
import urllib.parse
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ghrel.core.config import DEFAULT_API_URL
from ghrel.core.result import Err, Ok, Result
from ghrel.core.structured import as_obj_list, as_str_dict, get_bool, get_int, get_str

from .http import HttpError

if TYPE_CHECKING:
    from ghrel.core.structured import StrDict

    from .http import HttpClient, HttpResponse

__all__ = [
    "GitHubReleaseApi",
    "MockReleaseApi",
    "ReleaseApi",
    "RemoteAsset",
    "RemoteRelease",
    "expand_upload_url",
]


@dataclass(frozen=True, slots=True)
class RemoteRelease:
    """A release record as returned by the platform."""

    id: int
    tag_name: str | None
    draft: bool
    upload_url: str | None
    html_url: str | None = None

    @classmethod
    def from_dict(cls, data: StrDict) -> RemoteRelease | None:
        """Parse a release object; None when it has no numeric id."""
        release_id = get_int(data, "id")
        if release_id is None:
            return None
        return cls(
            id=release_id,
            tag_name=get_str(data, "tag_name"),
            draft=get_bool(data, "draft"),
            upload_url=get_str(data, "upload_url"),
            html_url=get_str(data, "html_url"),
        )


@dataclass(frozen=True, slots=True)
class RemoteAsset:
    """An uploaded release asset."""

    id: int
    name: str
    browser_download_url: str | None = None


@runtime_checkable
class ReleaseApi(Protocol):
    """Remote operations used by the release pipeline."""

    def find_release_by_tag(self, tag: str) -> Result[RemoteRelease | None, HttpError]:
        """Return the release for ``tag``, Ok(None) when the platform says 404."""
        ...

    def list_releases(self) -> Result[list[RemoteRelease], HttpError]:
        """Return the first page of releases, newest first."""
        ...

    def create_release(self, fields: dict[str, object]) -> Result[RemoteRelease, HttpError]: ...

    def update_release(
        self, release_id: int, fields: dict[str, object]
    ) -> Result[RemoteRelease, HttpError]: ...

    def upload_asset(
        self,
        upload_url: str,
        name: str,
        content: bytes,
        content_type: str,
    ) -> Result[RemoteAsset, HttpError]: ...


def expand_upload_url(upload_url: str, name: str) -> str:
    """Expand an upload URL template for one asset.

    GitHub returns ``.../assets{?name,label}`` (RFC 6570); only ``name`` is
    filled in.

    Example:
        >>> expand_upload_url("https://uploads.github.com/r/1/assets{?name,label}", "a b.zip")
        'https://uploads.github.com/r/1/assets?name=a%20b.zip'
    """
    base = upload_url.split("{", 1)[0]
    return f"{base}?name={urllib.parse.quote(name, safe='')}"


def _release_from(response: HttpResponse) -> Result[RemoteRelease, HttpError]:
    obj = response.json()
    if isinstance(obj, Err):
        return obj
    data = as_str_dict(obj.value)
    release = RemoteRelease.from_dict(data) if data is not None else None
    if release is None:
        return Err(HttpError(url=response.url, status=0, message="Unexpected release payload"))
    return Ok(release)


class GitHubReleaseApi:
    """ReleaseApi over the GitHub REST API."""

    def __init__(
        self,
        http: HttpClient,
        repository: str,
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        self._http = http
        self.repository = repository
        self.api_url = api_url.rstrip("/")

    @property
    def releases_url(self) -> str:
        return f"{self.api_url}/repos/{self.repository}/releases"

    def find_release_by_tag(self, tag: str) -> Result[RemoteRelease | None, HttpError]:
        url = f"{self.releases_url}/tags/{urllib.parse.quote(tag, safe='')}"
        result = self._http.request("GET", url)
        if isinstance(result, Err):
            if result.error.is_not_found:
                return Ok(None)
            return result
        return _release_from(result.value)

    def list_releases(self) -> Result[list[RemoteRelease], HttpError]:
        url = self.releases_url
        result = self._http.request("GET", url)
        if isinstance(result, Err):
            return result

        obj = result.value.json()
        if isinstance(obj, Err):
            return obj
        items = as_obj_list(obj.value)
        if items is None:
            return Err(HttpError(url=url, status=0, message="Expected a JSON array of releases"))

        releases: list[RemoteRelease] = []
        for item in items:
            data = as_str_dict(item)
            release = RemoteRelease.from_dict(data) if data is not None else None
            if release is not None:
                releases.append(release)
        return Ok(releases)

    def create_release(self, fields: dict[str, object]) -> Result[RemoteRelease, HttpError]:
        result = self._http.request("POST", self.releases_url, json_body=fields)
        if isinstance(result, Err):
            return result
        return _release_from(result.value)

    def update_release(
        self, release_id: int, fields: dict[str, object]
    ) -> Result[RemoteRelease, HttpError]:
        url = f"{self.releases_url}/{release_id}"
        result = self._http.request("PATCH", url, json_body=fields)
        if isinstance(result, Err):
            return result
        return _release_from(result.value)

    def upload_asset(
        self,
        upload_url: str,
        name: str,
        content: bytes,
        content_type: str,
    ) -> Result[RemoteAsset, HttpError]:
        url = expand_upload_url(upload_url, name)
        result = self._http.request(
            "POST",
            url,
            data=content,
            headers={
                "content-type": content_type,
                "content-length": str(len(content)),
            },
        )
        if isinstance(result, Err):
            return result

        obj = result.value.json()
        if isinstance(obj, Err):
            return obj
        data = as_str_dict(obj.value)
        asset_id = get_int(data, "id") if data is not None else None
        if data is None or asset_id is None:
            return Err(HttpError(url=url, status=0, message="Unexpected asset payload"))
        return Ok(
            RemoteAsset(
                id=asset_id,
                name=get_str(data, "name") or name,
                browser_download_url=get_str(data, "browser_download_url"),
            )
        )


class MockReleaseApi:
    """In-memory ReleaseApi for testing.

    Records every call. Releases are served from ``releases``; uploads fail
    for names listed in ``failing_uploads``.

    Usage:
        api = MockReleaseApi()
        api.releases.append(RemoteRelease(id=1, tag_name="v1", draft=True, upload_url=URL))
        result = api.list_releases()
    """

    def __init__(
        self,
        upload_url: str = "https://uploads.example.test/releases/1/assets{?name,label}",
    ) -> None:
        self.releases: list[RemoteRelease] = []
        self.upload_url = upload_url
        self.errors: dict[str, HttpError] = {}
        self.failing_uploads: dict[str, HttpError] = {}
        self.omit_upload_url_on_update = False
        self.calls: list[tuple[str, object]] = []
        self.uploads: list[tuple[str, str, bytes, str]] = []
        self._lock = threading.Lock()
        self._next_id = 100

    def _record(self, name: str, arg: object) -> HttpError | None:
        with self._lock:
            self.calls.append((name, arg))
        return self.errors.get(name)

    def calls_to(self, name: str) -> list[object]:
        with self._lock:
            return [arg for call, arg in self.calls if call == name]

    def find_release_by_tag(self, tag: str) -> Result[RemoteRelease | None, HttpError]:
        error = self._record("find_release_by_tag", tag)
        if error is not None:
            if error.is_not_found:
                return Ok(None)
            return Err(error)
        for release in self.releases:
            if release.tag_name == tag:
                return Ok(release)
        return Ok(None)

    def list_releases(self) -> Result[list[RemoteRelease], HttpError]:
        error = self._record("list_releases", None)
        if error is not None:
            return Err(error)
        return Ok(list(self.releases))

    def create_release(self, fields: dict[str, object]) -> Result[RemoteRelease, HttpError]:
        error = self._record("create_release", fields)
        if error is not None:
            return Err(error)
        self._next_id += 1
        tag = fields.get("tag_name")
        release = RemoteRelease(
            id=self._next_id,
            tag_name=tag if isinstance(tag, str) else None,
            draft=fields.get("draft") is True,
            upload_url=self.upload_url,
            html_url=f"https://github.example.test/releases/{self._next_id}",
        )
        self.releases.append(release)
        return Ok(release)

    def update_release(
        self, release_id: int, fields: dict[str, object]
    ) -> Result[RemoteRelease, HttpError]:
        error = self._record("update_release", (release_id, fields))
        if error is not None:
            return Err(error)
        tag = fields.get("tag_name")
        release = RemoteRelease(
            id=release_id,
            tag_name=tag if isinstance(tag, str) else None,
            draft=fields.get("draft") is True,
            upload_url=None if self.omit_upload_url_on_update else self.upload_url,
        )
        return Ok(release)

    def upload_asset(
        self,
        upload_url: str,
        name: str,
        content: bytes,
        content_type: str,
    ) -> Result[RemoteAsset, HttpError]:
        self._record("upload_asset", name)
        failure = self.failing_uploads.get(name)
        if failure is not None:
            return Err(failure)
        with self._lock:
            self.uploads.append((upload_url, name, content, content_type))
            self._next_id += 1
            asset_id = self._next_id
        return Ok(RemoteAsset(id=asset_id, name=name))
