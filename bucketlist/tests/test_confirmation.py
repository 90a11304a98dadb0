"""Tests for the dialog slot and the confirmation gate."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from bucketlist.models.dialog import Confirmable, Informational
from bucketlist.services.confirmation import ConfirmationGate, GateState
from bucketlist.services.dialog import DialogSlot


async def test_request_opens_confirmable_prompt(dialog):
    gate = ConfirmationGate(dialog)
    gate.request("Delete this bucket?", AsyncMock())

    assert gate.state is GateState.AWAITING_CONFIRMATION
    assert isinstance(dialog.current, Confirmable)
    assert dialog.current.content == "Delete this bucket?"
    assert dialog.current.cancel_text == "Cancel"
    assert dialog.current.confirm_text == "OK"


async def test_confirm_closes_then_runs_action_once(dialog):
    events = []
    action = AsyncMock(side_effect=lambda: events.append(("action", dialog.is_open)))
    gate = ConfirmationGate(dialog)

    gate.request("Delete?", action)
    await dialog.confirm()

    action.assert_awaited_once()
    # The dialog was already closed when the action started.
    assert events == [("action", False)]
    assert gate.state is GateState.IDLE


async def test_prepare_runs_after_close_before_action(dialog):
    order = []
    prepare = MagicMock(side_effect=lambda: order.append("prepare"))
    action = AsyncMock(side_effect=lambda: order.append("action"))
    gate = ConfirmationGate(dialog)

    gate.request("Delete image?", action, prepare=prepare, suppress_animation=True)
    await dialog.confirm()

    assert order == ["prepare", "action"]
    assert dialog.last_close_suppressed_animation is True


async def test_cancel_runs_nothing(dialog):
    action = AsyncMock()
    gate = ConfirmationGate(dialog)

    gate.request("Delete?", action)
    dialog.cancel()

    action.assert_not_called()
    assert gate.state is GateState.IDLE
    assert not dialog.is_open


async def test_superseded_prompt_returns_to_idle(dialog):
    action = AsyncMock()
    gate = ConfirmationGate(dialog)

    gate.request("Delete?", action)
    dialog.open(Informational(content="Something else happened"))

    assert gate.state is GateState.IDLE
    await dialog.confirm()  # informational: nothing to confirm
    action.assert_not_called()


async def test_failed_action_still_resets_state(dialog):
    gate = ConfirmationGate(dialog)
    gate.request("Delete?", AsyncMock(side_effect=RuntimeError("boom")))

    with pytest.raises(RuntimeError):
        await dialog.confirm()

    assert gate.state is GateState.IDLE


async def test_second_confirm_of_stale_prompt_is_ignored(dialog):
    action = AsyncMock()
    gate = ConfirmationGate(dialog)

    gate.request("Delete?", action)
    prompt = dialog.current
    await dialog.confirm()
    await prompt.on_confirm()

    action.assert_awaited_once()


async def test_newer_prompt_survives_superseding_an_older_one(dialog):
    first = AsyncMock()
    second = AsyncMock()
    gate = ConfirmationGate(dialog)

    gate.request("Delete image?", first)
    stale = dialog.current
    gate.request("Delete bucket?", second)

    assert gate.state is GateState.AWAITING_CONFIRMATION
    await dialog.confirm()
    await stale.on_confirm()

    second.assert_awaited_once()
    first.assert_not_called()
    assert not dialog.is_open
    assert gate.state is GateState.IDLE


async def test_prompt_opened_while_executing_can_be_confirmed(dialog):
    release = asyncio.Event()
    first = AsyncMock(side_effect=release.wait)
    second = AsyncMock()
    gate = ConfirmationGate(dialog)

    gate.request("Delete image?", first)
    running = asyncio.create_task(dialog.confirm())
    for _ in range(50):
        if first.await_count:
            break
        await asyncio.sleep(0)
    assert gate.state is GateState.EXECUTING

    gate.request("Delete bucket?", second)
    release.set()
    await running

    # The earlier action finishing leaves the newer prompt pending.
    assert gate.state is GateState.AWAITING_CONFIRMATION
    await dialog.confirm()

    second.assert_awaited_once()
    assert gate.state is GateState.IDLE


def test_dialog_history_is_bounded(dialog):
    for n in range(DialogSlot.HISTORY_LIMIT + 5):
        dialog.open(Informational(content=f"notice {n}"))

    assert len(dialog.history) == DialogSlot.HISTORY_LIMIT
    assert dialog.history[-1].content == f"notice {DialogSlot.HISTORY_LIMIT + 4}"
    assert dialog.history[0].content == "notice 5"
