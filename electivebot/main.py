"""Main entry point for the elective course bot."""

import logging
import sys
from datetime import datetime

from telegram.ext import (
    Application,
    CallbackQueryHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from electivebot.bot.handlers import handle_update
from electivebot.bot.transport import TelegramTransport
from electivebot.catalog.loader import load_catalog
from electivebot.config import Config
from electivebot.core.store import ConversationStore
from electivebot.engine.dispatcher import Dispatcher
from electivebot.utils.error_handler import error_handler
from electivebot.utils.time_utils import UTC

# Configure logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, Config.LOG_LEVEL),
    stream=sys.stdout,
)

logger = logging.getLogger(__name__)


async def sweep_job(context: "ContextTypes.DEFAULT_TYPE") -> None:
    """Job callback for the reminder sweep."""
    dispatcher: Dispatcher = context.bot_data["dispatcher"]
    await dispatcher.run_sweep(datetime.now(UTC))


async def post_init(application: Application) -> None:
    """Initialize bot resources after application is created."""
    catalog = load_catalog(Config.CATALOG_PATH, Config.time_zone())

    store = ConversationStore(catalog, Config.time_zone())
    application.bot_data["store"] = store
    application.bot_data["dispatcher"] = Dispatcher(store, TelegramTransport(application.bot))

    # Start the reminder sweep
    job_queue = application.job_queue
    if job_queue:
        job_queue.run_repeating(
            sweep_job,
            interval=Config.SWEEP_INTERVAL,
            first=Config.SWEEP_FIRST,
            name="reminder_sweep",
        )
        logger.info(f"Reminder sweep scheduled (interval: {Config.SWEEP_INTERVAL}s)")
    else:
        logger.warning("No job queue available, reminders will not fire")

    logger.info("Elective course bot initialized successfully")


def main() -> None:
    """Start the bot.

    Usage: electivebot [TELEGRAM_BOT_TOKEN]
    """
    if len(sys.argv) > 1:
        Config.TELEGRAM_BOT_TOKEN = sys.argv[1]

    # Validate configuration
    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    # Buttons carry Action values, kept in PTB's callback data cache
    application = (
        Application.builder()
        .token(Config.TELEGRAM_BOT_TOKEN)
        .arbitrary_callback_data(True)
        .post_init(post_init)
        .build()
    )

    # Commands, free text and button presses all decode to actions
    application.add_handler(MessageHandler(filters.TEXT, handle_update))
    application.add_handler(CallbackQueryHandler(handle_update))

    # Error handler
    application.add_error_handler(error_handler)

    logger.info("Starting elective course bot...")
    application.run_polling(allowed_updates=["message", "callback_query"])


if __name__ == "__main__":
    main()
