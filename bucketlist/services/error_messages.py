"""
User-facing messages for bucket store errors.

Lookup is two-level: MESSAGES[status][code], then MESSAGES[status]["DEFAULT"],
then the caller's fallback.
"""

from __future__ import annotations

from collections.abc import Mapping

from bucketlist.client import TransportError

DEFAULT_MESSAGE = "Something went wrong. Please try again."
IMAGE_UPLOAD_FAILED = "Unable to upload the image."

MessageTable = Mapping[int | None, Mapping[str, str]]

# ---------------------------------------------------------------------------
# Message table
# ---------------------------------------------------------------------------

ERROR_MESSAGES: MessageTable = {
    None: {
        "DEFAULT": "Could not reach the server. Check your connection.",
    },
    400: {
        "INVALID_TITLE": "The title is not valid.",
        "INVALID_FILE": "The file could not be read as an image.",
        "DEFAULT": "The request was not valid.",
    },
    401: {
        "TOKEN_EXPIRED": "Your session has expired. Please log in again.",
        "DEFAULT": "Please log in again.",
    },
    403: {
        "DEFAULT": "You do not have permission to change this bucket.",
    },
    404: {
        "BUCKET_NOT_FOUND": "This bucket no longer exists.",
        "IMAGE_NOT_FOUND": "This bucket has no image.",
        "DEFAULT": "The requested item could not be found.",
    },
    413: {
        "DEFAULT": "Only images of 5MB or less can be uploaded.",
    },
}


def resolve_error_message(
    error: TransportError,
    table: MessageTable | None = None,
    fallback: str = DEFAULT_MESSAGE,
) -> str:
    """Map a store error to the message shown to the user."""
    table = ERROR_MESSAGES if table is None else table
    by_status = table.get(error.status) or {}
    if error.code is not None and error.code in by_status:
        return by_status[error.code]
    return by_status.get("DEFAULT") or fallback
