"""
Validation for user edits to a bucket.

Validation is local and happens before anything reaches the network.
Image checks run in order and stop at the first failure. An oversize
image is reported but not blocking: the caller warns and keeps the file.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from bucketlist.config import settings
from bucketlist.models.image import ImageFile


class ImageIssue(Enum):
    INVALID_FILENAME = "invalid_filename"
    UNSUPPORTED_TYPE = "unsupported_type"
    TOO_LARGE = "too_large"


ISSUE_MESSAGES: dict[ImageIssue, str] = {
    ImageIssue.INVALID_FILENAME: "File names cannot contain spaces.",
    ImageIssue.UNSUPPORTED_TYPE: "Only image files (jpg, jpeg, png, gif, webp) can be uploaded.",
    ImageIssue.TOO_LARGE: "Only images of 5MB or less can be uploaded.",
}


@dataclass(frozen=True)
class ValidationResult:
    issue: ImageIssue | None = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    @property
    def blocking(self) -> bool:
        """True when the file must not be accepted."""
        return self.issue is not None and self.issue is not ImageIssue.TOO_LARGE

    @property
    def message(self) -> str | None:
        return ISSUE_MESSAGES[self.issue] if self.issue else None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_image(
    file: ImageFile,
    max_size: int | None = None,
    allowed_extensions: Collection[str] | None = None,
) -> ValidationResult:
    """Check a selected image against the upload policy."""
    max_size = settings.MAX_FILE_SIZE if max_size is None else max_size
    allowed = settings.ALLOWED_IMAGE_EXTENSIONS if allowed_extensions is None else allowed_extensions

    if " " in file.filename:
        return ValidationResult(ImageIssue.INVALID_FILENAME)

    if not file.content_type.startswith("image/") or file.extension not in allowed:
        return ValidationResult(ImageIssue.UNSUPPORTED_TYPE)

    if file.size > max_size:
        return ValidationResult(ImageIssue.TOO_LARGE)

    return ValidationResult()


def validate_title(candidate: str, max_length: int | None = None) -> bool:
    """Return False if the title is too long. Empty titles are allowed."""
    max_length = settings.MAX_TITLE_LENGTH if max_length is None else max_length
    return len(candidate) <= max_length
