"""Telegram delivery of reply effects."""

import logging

from telegram import Bot
from telegram.error import BadRequest

from electivebot.bot.keyboards import menu_keyboard
from electivebot.core.effects import Effect, SendMenu, SendText

logger = logging.getLogger(__name__)


class TelegramTransport:
    """Sends SendText and SendMenu effects through the Bot API."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send(self, chat_id: int, effect: Effect, origin_message_id: int | None = None) -> None:
        if isinstance(effect, SendText):
            await self.bot.send_message(chat_id=chat_id, text=effect.text)

        elif isinstance(effect, SendMenu):
            markup = menu_keyboard(effect.buttons)

            if effect.edit and origin_message_id is not None:
                try:
                    await self.bot.edit_message_text(
                        text=effect.text,
                        chat_id=chat_id,
                        message_id=origin_message_id,
                        reply_markup=markup,
                    )
                    return
                except BadRequest as e:
                    if "not modified" in str(e):
                        return
                    logger.warning(f"Could not edit message {origin_message_id}: {e}")

            await self.bot.send_message(chat_id=chat_id, text=effect.text, reply_markup=markup)

        else:
            raise TypeError(f"Cannot deliver effect: {effect!r}")
