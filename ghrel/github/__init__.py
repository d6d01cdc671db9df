"""GitHub REST API access."""

from .api import GitHubReleaseApi, MockReleaseApi, ReleaseApi
from .http import HttpClient, HttpError, HttpResponse, MockHttpClient, RealHttpClient

__all__ = [
    "GitHubReleaseApi",
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "MockReleaseApi",
    "MockHttpClient",
    "RealHttpClient",
    "ReleaseApi",
]
