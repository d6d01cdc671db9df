"""Error payload for the release pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from ghrel.core.config import ConfigError
    from ghrel.github.http import HttpError

ReleaseErrorKind = Literal["config", "api", "io", "upload"]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical release error.

    ``kind`` tells which stage failed:
    - config: bad or missing input, raised before any remote call
    - api: lookup, create or update answered with an error
    - io: a local asset could not be read
    - upload: one or more asset uploads failed
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

    @classmethod
    def from_config(cls, error: ConfigError) -> ReleaseError:
        return cls(kind="config", message=error.message, hint=error.hint)

    @classmethod
    def from_http(cls, error: HttpError, *, action: str) -> ReleaseError:
        return cls(kind="api", message=f"{action} failed: {error}")
