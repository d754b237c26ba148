"""Conversation store - one Model per chat."""

import asyncio
import logging
from datetime import datetime, tzinfo

from electivebot.core.models import Course, Model, new_model

logger = logging.getLogger(__name__)


class ConversationStore:
    """In-memory mapping from chat id to that chat's Model.

    Entries are created on first contact and live as long as the process.
    Callers must hold lock(chat_id) across a read-modify-write of a chat.
    """

    def __init__(self, catalog: tuple[Course, ...], time_zone: tzinfo):
        self.catalog = catalog
        self.time_zone = time_zone
        self._models: dict[int, Model] = {}
        self._locks: dict[int, asyncio.Lock] = {}

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, chat_id: int) -> bool:
        return chat_id in self._models

    def get(self, chat_id: int) -> Model | None:
        """Get the Model of a chat, if it exists."""
        return self._models.get(chat_id)

    def get_or_create(self, chat_id: int, now: datetime) -> Model:
        """Get the Model of a chat, creating a fresh one on first contact."""
        model = self._models.get(chat_id)
        if model is None:
            model = new_model(self.catalog, now, self.time_zone)
            self._models[chat_id] = model
            logger.info(f"New chat: {chat_id}")
        return model

    def put(self, chat_id: int, model: Model) -> None:
        """Replace the stored Model of a chat."""
        self._models[chat_id] = model

    def chat_ids(self) -> list[int]:
        """Snapshot of the known chat ids."""
        return list(self._models)

    def lock(self, chat_id: int) -> asyncio.Lock:
        """Get the lock serializing updates of a chat."""
        lock = self._locks.get(chat_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[chat_id] = lock
        return lock
