"""Dispatcher - runs actions through the reducer and executes their effects."""

import logging
from collections import deque
from datetime import datetime
from typing import Protocol

from telegram.error import TelegramError

from electivebot.core.actions import Action
from electivebot.core.effects import Effect, Enqueue
from electivebot.core.reducer import handle_action
from electivebot.core.store import ConversationStore
from electivebot.engine.sweep import sweep_reminders

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Delivers reply effects to a chat."""

    async def send(self, chat_id: int, effect: Effect, origin_message_id: int | None = None) -> None:
        ...


class Dispatcher:
    """Applies actions to the chats in a ConversationStore."""

    def __init__(self, store: ConversationStore, transport: Transport):
        self.store = store
        self.transport = transport

    async def dispatch(
        self,
        chat_id: int,
        action: Action,
        now: datetime,
        origin_message_id: int | None = None,
    ) -> None:
        """Handle an action and all the follow-up actions it enqueues.

        Follow-ups run in the order they were emitted, before this returns.
        Each new Model is stored before its effects are executed, so a failed
        send never rolls the chat back.
        """
        pending: deque[Action] = deque([action])

        async with self.store.lock(chat_id):
            while pending:
                current = pending.popleft()
                model = self.store.get_or_create(chat_id, now)
                model, effects = handle_action(current, model)
                self.store.put(chat_id, model)

                for effect in effects:
                    if isinstance(effect, Enqueue):
                        pending.append(effect.action)
                    else:
                        await self._deliver(chat_id, effect, origin_message_id)

    async def run_sweep(self, now: datetime) -> int:
        """Run the reminder sweep over every known chat.

        Returns:
            Number of reminder notifications emitted
        """
        fired = 0

        for chat_id in self.store.chat_ids():
            try:
                async with self.store.lock(chat_id):
                    model = self.store.get(chat_id)
                    if model is None:
                        continue

                    model, effects = sweep_reminders(model, now)
                    self.store.put(chat_id, model)

                    for effect in effects:
                        await self._deliver(chat_id, effect)
                    fired += len(effects)

            except Exception as e:
                logger.error(f"Error sweeping reminders of chat {chat_id}: {e}")
                continue

        if fired:
            logger.info(f"Sweep: {fired} reminders fired")

        return fired

    async def _deliver(
        self, chat_id: int, effect: Effect, origin_message_id: int | None = None
    ) -> None:
        try:
            await self.transport.send(chat_id, effect, origin_message_id)
        except TelegramError as e:
            # Not retried, the Model already moved on
            logger.error(f"Failed to deliver {type(effect).__name__} to chat {chat_id}: {e}")
