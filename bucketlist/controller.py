"""
Controller for one bucket on the board.

Owns the edit buffer, the local preview and the expand/collapse state of a
single bucket, and turns user edits into store writes:

- Every user change to the buffer (title or picked file) fires an update
  carrying the title and the pending file, unless the title is empty.
  Writes are fire-and-forget tasks: no debouncing, no cancellation.
- Leaving the title field sends an update with the title only.
- Deleting the bucket or its image goes through the confirmation gate.

Seeding from an authoritative record resets the buffer and preview and
never fires a write.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from bucketlist.client import BucketApi
from bucketlist.models.bucket import BoardContext, BucketId, BucketRecord
from bucketlist.models.dialog import Informational
from bucketlist.models.edit import EditBuffer, TaskListProps
from bucketlist.models.image import ImageFile
from bucketlist.services.confirmation import ConfirmationGate
from bucketlist.services.dialog import Dialog
from bucketlist.services.error_messages import IMAGE_UPLOAD_FAILED, MessageTable
from bucketlist.services.preview import LocalPreview
from bucketlist.services.progress import progress_percent
from bucketlist.services.sync_client import Refresh, SyncClient
from bucketlist.services.validation import ValidationResult, validate_image, validate_title

logger = logging.getLogger(__name__)

DELETE_BUCKET_PROMPT = "Delete this bucket?"
DELETE_IMAGE_PROMPT = "Delete this image?"


class BucketController:
    """One bucket on the board: its edit buffer, preview, toggle and gated deletes."""

    def __init__(
        self,
        record: BucketRecord,
        api: BucketApi,
        dialog: Dialog,
        refresh: Refresh | None = None,
        context: BoardContext | None = None,
        messages: MessageTable | None = None,
        discard_stale: bool | None = None,
    ) -> None:
        context = context or BoardContext()
        self.dialog = dialog
        self.sync = SyncClient(api, dialog, refresh, messages=messages, discard_stale=discard_stale)
        self.gate = ConfirmationGate(dialog)
        self.buffer = EditBuffer()
        self.preview = LocalPreview()
        self.is_toggled = context.just_created_id is not None and str(context.just_created_id) == str(record.id)
        self.closed = False
        self._tasks: set[asyncio.Task] = set()
        self.record = record
        self._apply(record)
        self.buffer.subscribe(self._write_through)

    # -----------------------------------------------------------------------
    # Authoritative state
    # -----------------------------------------------------------------------

    @property
    def bucket_id(self) -> BucketId:
        return self.record.id

    @property
    def progress(self) -> int:
        return progress_percent(self.record.todo_completed, self.record.todo_all)

    def seed(self, record: BucketRecord) -> None:
        """Take a record from the latest list fetch. Re-seeds only if it is a new object."""
        if record is self.record:
            return
        self.record = record
        self._apply(record)

    def _apply(self, record: BucketRecord) -> None:
        self.buffer.seed(record)
        self.preview.set_from_url(record.image_url)

    # -----------------------------------------------------------------------
    # Edits
    # -----------------------------------------------------------------------

    def change_title(self, value: str) -> bool:
        """A keystroke in the title field. Too-long values leave the buffer as is."""
        if not validate_title(value):
            return False
        self.buffer.set_title(value)
        return True

    def commit_title(self) -> asyncio.Task:
        """Title field lost focus: send the title alone."""
        return self._spawn(self.sync.update(self.bucket_id, title=self.buffer.title))

    async def select_file(self, file: ImageFile) -> ValidationResult:
        """
        The user picked an image.

        Blocking problems are reported and the buffer is left alone. An
        oversize file is reported but still taken. The preview is updated
        before the buffer, so it shows before any write can resolve.
        """
        result = validate_image(file)
        if result.blocking:
            self.dialog.open(Informational(content=result.message))
            return result
        if result.issue is not None:
            self.dialog.open(Informational(content=result.message))

        await self.preview.set_from_file(file)
        self.buffer.set_pending_file(file)
        return result

    def _write_through(self, buffer: EditBuffer) -> None:
        if self.closed or buffer.title == "":
            return
        self._spawn(
            self.sync.update(
                self.bucket_id,
                title=buffer.title,
                file=buffer.pending_file,
                fallback=IMAGE_UPLOAD_FAILED,
            )
        )

    # -----------------------------------------------------------------------
    # Destructive actions
    # -----------------------------------------------------------------------

    def request_delete_item(self) -> None:
        self.gate.request(DELETE_BUCKET_PROMPT, lambda: self.sync.delete_item(self.bucket_id))

    def request_delete_image(self) -> None:
        self.gate.request(
            DELETE_IMAGE_PROMPT,
            lambda: self.sync.delete_image(self.bucket_id),
            prepare=self.preview.clear,
            suppress_animation=True,
        )

    # -----------------------------------------------------------------------
    # Local state
    # -----------------------------------------------------------------------

    def toggle(self) -> bool:
        self.is_toggled = not self.is_toggled
        return self.is_toggled

    def task_list_props(self) -> TaskListProps:
        return TaskListProps(
            bucket_id=self.bucket_id,
            fixed_todo_id=self.record.fixed_todo_id,
            image_url=self.preview.value,
            is_toggled=self.is_toggled,
            open_dialog=self.dialog.open,
            close_dialog=self.dialog.close,
            refresh=self.sync.refresh,
        )

    # -----------------------------------------------------------------------
    # Task bookkeeping
    # -----------------------------------------------------------------------

    @property
    def pending_writes(self) -> int:
        return len(self._tasks)

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for every write started so far, including ones they start."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def close(self) -> None:
        """The bucket left the board. In-flight writes are left to finish."""
        self.closed = True
        self.buffer = EditBuffer()
        self.preview.clear()
        logger.debug("controller: closed bucket %s with %d writes in flight", self.bucket_id, len(self._tasks))
