"""Tests for the dispatcher."""

import asyncio
from datetime import timedelta

import pytest
from telegram.error import NetworkError

from conftest import NOW, UTC
from electivebot.core.actions import AddItem, AddReminder, RemoveItem, SetReminderIn, Start
from electivebot.core.effects import SendMenu, SendText
from electivebot.core.store import ConversationStore
from electivebot.engine.dispatcher import Dispatcher


class FakeTransport:
    """Records delivered effects, optionally failing on every send."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []

    async def send(self, chat_id, effect, origin_message_id=None):
        if self.fail:
            raise NetworkError("connection reset")
        self.sent.append((chat_id, effect, origin_message_id))


@pytest.fixture
def store(catalog):
    return ConversationStore(catalog, UTC)


@pytest.mark.asyncio
async def test_start_runs_follow_ups_in_order(store):
    """Test follow-up actions run in emission order before dispatch returns."""
    transport = FakeTransport()
    dispatcher = Dispatcher(store, transport)
    later = NOW + timedelta(seconds=5)

    await dispatcher.dispatch(1, Start(later), NOW)

    effects = [effect for _, effect, _ in transport.sent]
    assert isinstance(effects[0], SendText)
    assert effects[0].text.startswith("Welcome")
    assert isinstance(effects[1], SendMenu)
    assert effects[1].text == "List of available elective courses"
    assert len(effects) == 2

    # SetTime(now) from /start was applied too
    assert store.get(1).current_time == later


@pytest.mark.asyncio
async def test_remove_item_shows_updated_list(store):
    """Test RemoveItem is followed by the refreshed selected list."""
    transport = FakeTransport()
    dispatcher = Dispatcher(store, transport)

    await dispatcher.dispatch(1, AddItem("Algebra"), NOW)
    await dispatcher.dispatch(1, AddItem("Physics"), NOW)
    transport.sent.clear()

    await dispatcher.dispatch(1, RemoveItem("Physics"), NOW, origin_message_id=99)

    effects = [effect for _, effect, _ in transport.sent]
    assert effects[0] == SendText("Course Physics removed from your list")
    assert [b.label for b in effects[1].buttons] == ["Algebra"]
    assert transport.sent[1][2] == 99


@pytest.mark.asyncio
async def test_transport_failure_keeps_model(store):
    """Test a failed send does not roll back the committed state."""
    dispatcher = Dispatcher(store, FakeTransport(fail=True))

    await dispatcher.dispatch(1, AddItem("Algebra"), NOW)

    assert [c.name for c in store.get(1).my_courses] == ["Algebra"]


@pytest.mark.asyncio
async def test_run_sweep_notifies_each_chat(store):
    """Test the sweep fires due reminders per chat."""
    transport = FakeTransport()
    dispatcher = Dispatcher(store, transport)

    await dispatcher.dispatch(1, AddReminder("Call", NOW + timedelta(minutes=1)), NOW)
    await dispatcher.dispatch(2, AddReminder("Read", NOW + timedelta(hours=1)), NOW)
    await dispatcher.dispatch(3, AddItem("Algebra"), NOW)
    await dispatcher.dispatch(3, SetReminderIn("Algebra"), NOW)
    transport.sent.clear()

    fired = await dispatcher.run_sweep(NOW + timedelta(hours=2, minutes=30))

    assert fired == 3
    assert sorted((chat_id, effect.text) for chat_id, effect, _ in transport.sent) == [
        (1, "Reminder: Call"),
        (2, "Reminder: Read"),
        (3, "Reminder: Algebra 1 Wed 04 Mar 14:00-15:30, 108"),
    ]
    assert store.get(3).reminders[1].due_at is not None

    # Fired reminders do not fire again
    transport.sent.clear()
    assert await dispatcher.run_sweep(NOW + timedelta(hours=3)) == 0
    assert transport.sent == []


@pytest.mark.asyncio
async def test_run_sweep_failure_does_not_refire(store):
    """Test reminders whose notification failed are still marked fired."""
    dispatcher = Dispatcher(store, FakeTransport(fail=True))
    await dispatcher.dispatch(1, AddReminder("Call", NOW), NOW)

    await dispatcher.run_sweep(NOW)

    assert store.get(1).reminders[0].due_at is None


@pytest.mark.asyncio
async def test_concurrent_dispatches_are_serialized(store):
    """Test concurrent updates to one chat are all applied."""
    dispatcher = Dispatcher(store, FakeTransport())

    await asyncio.gather(
        dispatcher.dispatch(1, AddItem("Algebra"), NOW),
        dispatcher.dispatch(1, AddItem("Physics"), NOW),
        dispatcher.dispatch(1, AddItem("Chemistry"), NOW),
        dispatcher.run_sweep(NOW),
    )

    assert sorted(c.name for c in store.get(1).my_courses) == ["Algebra", "Chemistry", "Physics"]
