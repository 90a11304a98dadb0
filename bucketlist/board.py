"""
The bucket board: the full list of buckets and one controller per bucket.

The board is the refresh target for every controller. A refresh refetches
the whole list and hands each record to its controller; there is no
incremental patching.
"""

from __future__ import annotations

import logging

from bucketlist.client import BucketApi
from bucketlist.controller import BucketController
from bucketlist.models.bucket import BoardContext, BucketId
from bucketlist.services.dialog import Dialog
from bucketlist.services.error_messages import MessageTable
from bucketlist.services.sync_client import SyncClient

logger = logging.getLogger(__name__)


class BucketBoard:
    """Owns the bucket list and keeps one controller per bucket id."""

    def __init__(
        self,
        api: BucketApi,
        dialog: Dialog,
        context: BoardContext | None = None,
        messages: MessageTable | None = None,
        discard_stale: bool | None = None,
    ) -> None:
        self.api = api
        self.dialog = dialog
        self.context = context or BoardContext()
        self.messages = messages
        self.discard_stale = discard_stale
        self.sync = SyncClient(api, dialog, messages=messages)
        self.controllers: dict[BucketId, BucketController] = {}

    @property
    def buckets(self) -> list[BucketController]:
        return list(self.controllers.values())

    def get(self, bucket_id: BucketId) -> BucketController | None:
        return self.controllers.get(bucket_id)

    async def refresh(self) -> None:
        """Refetch every bucket and re-seed, create or drop controllers."""
        records = await self.sync.fetch_all()
        if records is None:
            return

        seen: dict[BucketId, BucketController] = {}
        for record in records:
            controller = self.controllers.get(record.id)
            if controller is None:
                controller = BucketController(
                    record,
                    self.api,
                    self.dialog,
                    refresh=self.refresh,
                    context=self.context,
                    messages=self.messages,
                    discard_stale=self.discard_stale,
                )
            else:
                controller.seed(record)
            seen[record.id] = controller

        for bucket_id, controller in self.controllers.items():
            if bucket_id not in seen:
                controller.close()

        self.controllers = seen
        logger.info("board: refreshed %d buckets", len(seen))

    async def drain(self) -> None:
        """Wait for in-flight writes on every bucket."""
        for controller in list(self.controllers.values()):
            await controller.drain()
