"""
Dialog collaborator contract and an in-memory single-slot implementation.

Only one dialog is meaningful at a time. Opening a new request supersedes
the current one; an unconfirmed prompt that gets superseded is dismissed.
"""

from __future__ import annotations

import inspect
import logging
from collections import deque
from typing import Protocol

from bucketlist.models.dialog import Confirmable, DialogRequest

logger = logging.getLogger(__name__)


class Dialog(Protocol):
    def open(self, request: DialogRequest) -> None: ...

    def close(self, suppress_animation: bool = False) -> None: ...


class DialogSlot:
    """
    Holds the current dialog request.

    The presentation layer reads `current` and calls confirm() or cancel()
    when the user answers. `history` keeps the most recent requests.
    """

    HISTORY_LIMIT = 20

    def __init__(self) -> None:
        self.current: DialogRequest | None = None
        self.history: deque[DialogRequest] = deque(maxlen=self.HISTORY_LIMIT)
        self.last_close_suppressed_animation = False

    @property
    def is_open(self) -> bool:
        return self.current is not None

    def open(self, request: DialogRequest) -> None:
        previous = self.current
        self.current = request
        self.history.append(request)
        if isinstance(previous, Confirmable) and previous.on_dismiss:
            previous.on_dismiss()

    def close(self, suppress_animation: bool = False) -> None:
        self.current = None
        self.last_close_suppressed_animation = suppress_animation

    async def confirm(self) -> None:
        """Run the confirm action of the open prompt."""
        request = self.current
        if not isinstance(request, Confirmable):
            logger.warning("dialog: confirm with no confirmable prompt open")
            return
        result = request.on_confirm()
        if inspect.isawaitable(result):
            await result

    def cancel(self) -> None:
        """Dismiss whatever is open without running anything."""
        request = self.current
        self.close()
        if isinstance(request, Confirmable) and request.on_dismiss:
            request.on_dismiss()
