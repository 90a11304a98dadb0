"""
Dialog request variants.

The dialog is a single shared slot. A request is either a dismiss-only
notice (Informational) or a prompt whose confirm button runs an action
(Confirmable).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

CANCEL_TEXT = "Cancel"
CONFIRM_TEXT = "OK"
ACKNOWLEDGE_TEXT = "OK"


@dataclass(frozen=True)
class Informational:
    """A notice with a single dismiss button."""

    content: str
    cancel_text: str = ACKNOWLEDGE_TEXT


@dataclass(frozen=True)
class Confirmable:
    """A prompt with cancel and confirm buttons."""

    content: str
    on_confirm: Callable[[], Awaitable[None] | None]
    cancel_text: str = CANCEL_TEXT
    confirm_text: str = CONFIRM_TEXT
    # Called when the prompt is cancelled or superseded without confirmation.
    on_dismiss: Callable[[], None] | None = None


DialogRequest = Informational | Confirmable
