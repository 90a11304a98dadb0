"""
Sync client: writes bucket edits to the store and triggers refreshes.

Every operation catches TransportError itself and reports it through the
dialog as a dismiss-only notice. Nothing is re-raised and nothing is
retried. A successful mutation calls the refresh callback; the response
body is never merged locally.

Ordering: writes are not sequenced, so the last refresh to resolve wins.
With discard_stale=True, an update that completes after a newer update was
issued skips its refresh.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from bucketlist.client import BucketApi, TransportError
from bucketlist.config import settings
from bucketlist.models.bucket import BucketId, BucketRecord
from bucketlist.models.dialog import Informational
from bucketlist.models.image import ImageFile
from bucketlist.services.dialog import Dialog
from bucketlist.services.error_messages import DEFAULT_MESSAGE, MessageTable, resolve_error_message

logger = logging.getLogger(__name__)

Refresh = Callable[[], Awaitable[None]]


async def _no_refresh() -> None:
    return None


class SyncClient:
    """
    Store calls with error reporting and refresh-on-success.

    Transport failures open an informational dialog and return False; they are
    never raised to the caller.
    """

    def __init__(
        self,
        api: BucketApi,
        dialog: Dialog,
        refresh: Refresh | None = None,
        messages: MessageTable | None = None,
        discard_stale: bool | None = None,
    ) -> None:
        self.api = api
        self.dialog = dialog
        self.refresh = refresh or _no_refresh
        self.messages = messages
        self.discard_stale = settings.DISCARD_STALE_WRITES if discard_stale is None else discard_stale
        self._issued = 0

    def report(self, error: TransportError, fallback: str = DEFAULT_MESSAGE) -> None:
        """Show a store error to the user."""
        message = resolve_error_message(error, self.messages, fallback)
        logger.warning("sync: %s (status=%s, code=%s)", error, error.status, error.code)
        self.dialog.open(Informational(content=message))

    async def fetch_all(self) -> list[BucketRecord] | None:
        """Read the whole list. Returns None if the read failed."""
        try:
            return await self.api.get_all()
        except TransportError as e:
            self.report(e)
            return None

    async def update(
        self,
        bucket_id: BucketId,
        title: str | None = None,
        file: ImageFile | None = None,
        fallback: str = DEFAULT_MESSAGE,
    ) -> bool:
        """Write title and/or image. Returns True on success."""
        self._issued += 1
        seq = self._issued
        try:
            await self.api.update(bucket_id, title=title, file=file)
        except TransportError as e:
            self.report(e, fallback)
            return False

        logger.info("sync: updated bucket %s (seq=%d, file=%s)", bucket_id, seq, file is not None)
        if self.discard_stale and seq != self._issued:
            logger.debug("sync: skipping refresh for stale update seq=%d (latest=%d)", seq, self._issued)
            return True
        await self.refresh()
        return True

    async def delete_item(self, bucket_id: BucketId) -> bool:
        """Delete the whole bucket. Returns True on success."""
        try:
            await self.api.delete_item(bucket_id)
        except TransportError as e:
            self.report(e)
            return False

        logger.info("sync: deleted bucket %s", bucket_id)
        await self.refresh()
        return True

    async def delete_image(self, bucket_id: BucketId) -> bool:
        """Delete only the bucket's image. Returns True on success."""
        try:
            await self.api.delete_image(bucket_id)
        except TransportError as e:
            self.report(e)
            return False

        logger.info("sync: deleted image of bucket %s", bucket_id)
        await self.refresh()
        return True
