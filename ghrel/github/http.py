"""HTTP client abstraction for the GitHub REST API.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import json
import ssl
import threading
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ghrel import __version__
from ghrel.core.result import Err, Ok, Result
from ghrel.core.structured import as_str_dict, get_str

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "MockHttpClient",
    "RealHttpClient",
]

GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors and bad payloads)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """A successful (2xx) response."""

    url: str
    status: int
    body: bytes = b""

    def json(self) -> Result[object, HttpError]:
        """Decode the body as JSON."""
        try:
            return Ok(json.loads(self.body.decode("utf-8")))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=self.url, status=0, message=f"JSON parse error: {e}"))


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    Non-2xx responses are returned as Err(HttpError) carrying the status,
    so callers can tell a 404 apart from other failures.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        json_body: object | None = None,
        data: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> Result[HttpResponse, HttpError]:
        """Send a request.

        Args:
            method: HTTP method ("GET", "POST", "PATCH", ...)
            url: Absolute URL
            json_body: Object to send as a JSON body
            data: Raw body (ignored when json_body is given)
            headers: Extra request headers

        Returns:
            Ok with the response, or Err with HttpError
        """
        ...


def _error_message(body: bytes, fallback: str) -> str:
    # GitHub error payloads look like {"message": "...", "documentation_url": "..."}
    try:
        obj: object = json.loads(body.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return fallback
    data = as_str_dict(obj)
    if data is None:
        return fallback
    return get_str(data, "message") or fallback


class RealHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - Bearer token authentication
    - GitHub API media type and version headers
    - Timeout handling
    """

    def __init__(
        self,
        token: str,
        timeout: float = 60.0,
        user_agent: str = f"ghrel/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._token = token
        self._ssl_context = ssl.create_default_context()

    def _headers(self, extra: dict[str, str] | None) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self._token}",
            "User-Agent": self.user_agent,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if extra:
            headers.update(extra)
        return headers

    def request(
        self,
        method: str,
        url: str,
        *,
        json_body: object | None = None,
        data: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> Result[HttpResponse, HttpError]:
        extra = dict(headers or {})
        body = data
        if json_body is not None:
            body = json.dumps(json_body).encode("utf-8")
            extra["Content-Type"] = "application/json"

        try:
            req = urllib.request.Request(
                url,
                data=body,
                headers=self._headers(extra),
                method=method,
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(HttpResponse(url=url, status=response.status, body=response.read()))
        except urllib.error.HTTPError as e:
            message = _error_message(e.read(), fallback=str(e.reason))
            return Err(HttpError(url=url, status=e.code, message=message))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))


@dataclass(frozen=True, slots=True)
class RecordedCall:
    """A request seen by MockHttpClient."""

    method: str
    url: str
    json_body: object | None = None
    data: bytes | None = None
    headers: dict[str, str] = field(default_factory=lambda: {})


class MockHttpClient:
    """Mock HTTP client for testing.

    Responses are keyed by (method, url). Unknown keys answer 404.
    Safe to call from several threads at once.

    Usage:
        client = MockHttpClient()
        client.set_json("GET", "https://api.github.com/repos/o/r/releases", [])
        result = client.request("GET", "https://api.github.com/repos/o/r/releases")
    """

    def __init__(self) -> None:
        self._responses: dict[tuple[str, str], HttpResponse | HttpError] = {}
        self._lock = threading.Lock()
        self.calls: list[RecordedCall] = []

    def set_json(self, method: str, url: str, payload: object, status: int = 200) -> None:
        """Answer (method, url) with a JSON payload."""
        body = json.dumps(payload).encode("utf-8")
        self._responses[(method, url)] = HttpResponse(url=url, status=status, body=body)

    def set_error(self, method: str, url: str, error: HttpError) -> None:
        """Answer (method, url) with an error."""
        self._responses[(method, url)] = error

    def calls_for(self, method: str) -> list[RecordedCall]:
        with self._lock:
            return [c for c in self.calls if c.method == method]

    def request(
        self,
        method: str,
        url: str,
        *,
        json_body: object | None = None,
        data: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> Result[HttpResponse, HttpError]:
        with self._lock:
            self.calls.append(
                RecordedCall(
                    method=method,
                    url=url,
                    json_body=json_body,
                    data=data,
                    headers=dict(headers or {}),
                )
            )
            response = self._responses.get((method, url))

        if response is None:
            return Err(HttpError(url=url, status=404, message="Not Found (mock)"))
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
