"""Edit buffer and the props handed to the child task list."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from bucketlist.models.bucket import BucketId, BucketRecord
from bucketlist.models.dialog import DialogRequest
from bucketlist.models.image import ImageFile

BufferListener = Callable[["EditBuffer"], None]


@dataclass
class EditBuffer:
    """
    Local draft of a bucket's editable fields.

    User edits go through set_title / set_pending_file and notify listeners.
    seed() replaces the draft with authoritative state and notifies no one.
    """

    title: str = ""
    pending_file: ImageFile | None = None
    _listeners: list[BufferListener] = field(default_factory=list, repr=False)

    def subscribe(self, listener: BufferListener) -> None:
        self._listeners.append(listener)

    def seed(self, record: BucketRecord) -> None:
        self.title = record.title
        self.pending_file = None

    def set_title(self, title: str) -> None:
        self.title = title
        self._notify()

    def set_pending_file(self, file: ImageFile | None) -> None:
        self.pending_file = file
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


@dataclass(frozen=True)
class TaskListProps:
    """Everything the child task list receives from its bucket."""

    bucket_id: BucketId
    fixed_todo_id: BucketId | None
    image_url: str | None
    is_toggled: bool
    open_dialog: Callable[[DialogRequest], None]
    close_dialog: Callable[..., None]
    refresh: Callable[[], Awaitable[None]]
