"""Tests for the update handler."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from electivebot.bot.handlers import handle_update
from electivebot.core.actions import AddToDo, ShowItems


def make_context():
    dispatcher = SimpleNamespace(dispatch=AsyncMock())
    return SimpleNamespace(bot_data={"dispatcher": dispatcher}), dispatcher


@pytest.mark.asyncio
async def test_text_message_is_dispatched():
    """Test free text reaches the dispatcher for its chat."""
    update = SimpleNamespace(
        update_id=1,
        effective_chat=SimpleNamespace(id=42),
        message=SimpleNamespace(text="Physics HW"),
        callback_query=None,
    )
    context, dispatcher = make_context()

    await handle_update(update, context)

    dispatcher.dispatch.assert_awaited_once()
    chat_id, action, _, origin = dispatcher.dispatch.await_args.args
    assert chat_id == 42
    assert action == AddToDo("Physics HW")
    assert origin is None


@pytest.mark.asyncio
async def test_button_press_is_answered_and_edits_origin():
    """Test callback queries are answered and keep their message id."""
    query = SimpleNamespace(data=ShowItems(), message=SimpleNamespace(message_id=7), answer=AsyncMock())
    update = SimpleNamespace(
        update_id=2,
        effective_chat=SimpleNamespace(id=42),
        message=None,
        callback_query=query,
    )
    context, dispatcher = make_context()

    await handle_update(update, context)

    query.answer.assert_awaited_once()
    _, action, _, origin = dispatcher.dispatch.await_args.args
    assert action == ShowItems()
    assert origin == 7


@pytest.mark.asyncio
async def test_undecodable_update_is_ignored():
    """Test updates without an action are dropped silently."""
    update = SimpleNamespace(
        update_id=3,
        effective_chat=SimpleNamespace(id=42),
        message=SimpleNamespace(text=None),
        callback_query=None,
    )
    context, dispatcher = make_context()

    await handle_update(update, context)

    dispatcher.dispatch.assert_not_awaited()


@pytest.mark.asyncio
async def test_inline_message_button_is_answered_without_chat():
    """Test presses on inline messages without a chat still clear the spinner."""
    query = SimpleNamespace(data=ShowItems(), message=None, answer=AsyncMock())
    update = SimpleNamespace(
        update_id=4,
        effective_chat=None,
        message=None,
        callback_query=query,
    )
    context, dispatcher = make_context()

    await handle_update(update, context)

    query.answer.assert_awaited_once()
    dispatcher.dispatch.assert_not_awaited()
