from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

TAG_REF_PREFIX = "refs/tags/"


def normalize_tag(value: str) -> str:
    """Strip one leading ``refs/tags/`` prefix.

    ``refs/tags/v1.2.0`` becomes ``v1.2.0``; anything else is returned as is.
    """
    if value.startswith(TAG_REF_PREFIX):
        return value[len(TAG_REF_PREFIX) :]
    return value


class LookupStrategy(Enum):
    """How an existing release is found."""

    DRAFT = "draft"  # first draft on the first page, tag ignored
    TAG = "tag"  # exact tag match

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """What the release should look like after this run."""

    tag: str
    release_name: str = ""
    body: str = ""
    draft: bool = False
    prerelease: bool = False
    target_commitish: str = ""
    asset_dir: Path | None = None

    def fields(self) -> dict[str, object]:
        """Full payload sent on create and update (never merged)."""
        return {
            "tag_name": self.tag,
            "name": self.release_name,
            "body": self.body,
            "draft": self.draft,
            "prerelease": self.prerelease,
            "target_commitish": self.target_commitish,
        }


@dataclass(frozen=True, slots=True)
class ReleaseHandle:
    """The release this run ended up writing to."""

    id: int
    upload_url: str
    is_new: bool
    html_url: str | None = None
