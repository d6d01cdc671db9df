"""Exit codes for the ghrel CLI.

A publish run either succeeds or fails; the code only tells which stage
failed so CI logs can be scanned quickly.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are stable.

    - 0: Success
    - 1: Configuration error (missing or invalid input)
    - 4: Remote API error (lookup, create or update failed)
    - 5: Upload error (reading an asset or uploading it failed)
    """

    OK = 0
    CONFIG_ERROR = 1
    API_ERROR = 4
    UPLOAD_ERROR = 5
