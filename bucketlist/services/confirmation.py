"""
Confirmation gate for destructive bucket actions.

    IDLE -> AWAITING_CONFIRMATION -> EXECUTING -> IDLE
                  |
                  +-- cancel / superseded --> IDLE

The dialog is closed before the action runs, so it never waits on the
network.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from bucketlist.models.dialog import CANCEL_TEXT, CONFIRM_TEXT, Confirmable
from bucketlist.services.dialog import Dialog

logger = logging.getLogger(__name__)


class GateState(Enum):
    IDLE = "idle"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    EXECUTING = "executing"


class ConfirmationGate:
    """
    Runs a destructive action only after the user confirms it.

    Each request carries its own token. Only the newest request may move
    the gate: a superseded prompt's dismissal, or the completion of an
    action that started before a newer prompt opened, leaves the state
    of the newer request alone.
    """

    def __init__(self, dialog: Dialog) -> None:
        self.dialog = dialog
        self.state = GateState.IDLE
        self._pending: object | None = None

    def _settle(self, token: object) -> None:
        if self._pending is token:
            self._pending = None
            self.state = GateState.IDLE

    def request(
        self,
        content: str,
        action: Callable[[], Awaitable[object]],
        prepare: Callable[[], None] | None = None,
        suppress_animation: bool = False,
    ) -> None:
        """
        Ask the user to confirm, then run `action` exactly once.

        `prepare` runs right after the dialog closes and before the action
        starts; use it for optimistic local changes.
        """
        token = object()

        async def execute() -> None:
            if self._pending is not token or self.state is not GateState.AWAITING_CONFIRMATION:
                logger.warning("confirmation: ignoring confirm of a stale prompt in state %s", self.state.value)
                return
            self.state = GateState.EXECUTING
            try:
                self.dialog.close(suppress_animation)
                if prepare:
                    prepare()
                await action()
            finally:
                self._settle(token)

        def dismiss() -> None:
            if self.state is GateState.AWAITING_CONFIRMATION:
                self._settle(token)

        self.dialog.open(
            Confirmable(
                content=content,
                on_confirm=execute,
                cancel_text=CANCEL_TEXT,
                confirm_text=CONFIRM_TEXT,
                on_dismiss=dismiss,
            )
        )
        # Opening may dismiss the previous prompt, so the new token is taken after.
        self._pending = token
        self.state = GateState.AWAITING_CONFIRMATION
