"""Image payload selected by the user."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImageFile:
    """A selected file: name, declared MIME type and raw bytes."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        """Lowercase substring after the final dot, or '' if there is none."""
        if "." not in self.filename:
            return ""
        return self.filename.rsplit(".", 1)[1].lower()

    @classmethod
    def from_path(cls, path: str | Path) -> ImageFile:
        """Read a file from disk, guessing its MIME type from the name."""
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content_type=content_type or "application/octet-stream",
            data=path.read_bytes(),
        )

    def __repr__(self) -> str:
        return f"ImageFile(filename={self.filename!r}, content_type={self.content_type!r}, size={self.size})"
