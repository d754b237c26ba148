"""Update handlers."""

import logging
from datetime import datetime

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from electivebot.bot.decoders import decode_update
from electivebot.engine.dispatcher import Dispatcher
from electivebot.utils.time_utils import UTC

logger = logging.getLogger(__name__)


async def handle_update(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle text messages and button presses."""
    now = datetime.now(UTC)
    query = update.callback_query
    origin_message_id = None

    # Every button press is answered, even ones that lead nowhere
    if query:
        if query.message:
            origin_message_id = query.message.message_id
        try:
            await query.answer()
        except TelegramError as e:
            logger.warning(f"Failed to answer callback query: {e}")

    if not update.effective_chat:
        return

    action = decode_update(update, now)
    if action is None:
        logger.debug(f"Ignoring update {update.update_id}")
        return

    dispatcher: Dispatcher = context.bot_data["dispatcher"]
    await dispatcher.dispatch(update.effective_chat.id, action, now, origin_message_id)
