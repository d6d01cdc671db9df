"""Step outputs for later workflow steps."""

from __future__ import annotations

from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.release.errors import ReleaseError
from ghrel.release.model import ReleaseHandle


def release_outputs(handle: ReleaseHandle) -> dict[str, str]:
    return {
        "id": str(handle.id),
        "html_url": handle.html_url or "",
        "upload_url": handle.upload_url,
    }


def write_outputs(path: Path | None, handle: ReleaseHandle) -> Result[None, ReleaseError]:
    """Append ``key=value`` lines to the GITHUB_OUTPUT file; no-op without one."""
    if path is None:
        return Ok(None)
    lines = "".join(f"{key}={value}\n" for key, value in release_outputs(handle).items())
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(lines)
    except OSError as e:
        return Err(ReleaseError(kind="io", message=f"cannot write step outputs to {path}: {e}"))
    return Ok(None)
