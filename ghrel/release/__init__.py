"""Release pipeline: resolve, write, upload."""

from .errors import ReleaseError
from .model import LookupStrategy, ReleaseHandle, ReleaseRequest, normalize_tag
from .service import PublishOutcome, publish_release

__all__ = [
    "LookupStrategy",
    "PublishOutcome",
    "ReleaseError",
    "ReleaseHandle",
    "ReleaseRequest",
    "normalize_tag",
    "publish_release",
]
