"""
main.py
-------
Entry point for the TranslatorBot Telegram bot.

Responsibilities:
    - Validate credentials before anything else starts.
    - Build the AppContext (preferences, debouncer, activity log, translator).
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from config import BOT_TOKEN, LOG_FILE, MODEL, require_credentials
from handlers.language_handler import lang_command, to_command
from handlers.message_handler import handle_text_message
from handlers.start_handler import id_command, start_command
from services.app_context import APP_CONTEXT_KEY, AppContext
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "Start the bot"),
        BotCommand("lang", "Set target language, e.g. /lang tr"),
        BotCommand("to", "One-off translation, e.g. /to ru hello"),
        BotCommand("id", "Show this chat's id"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def drop_app_context(application: Application) -> None:
    """Discard process-wide state once polling has stopped."""
    application.bot_data.pop(APP_CONTEXT_KEY, None)
    logger.info("TranslatorBot stopped.")


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions that escaped a handler; the bot keeps running."""
    logger.error(f"Unhandled error while processing {update}: {context.error}", exc_info=context.error)


def build_application(app_context: AppContext, token: str = BOT_TOKEN) -> Application:
    """
    Build the Telegram application and register all handlers.

    Args:
        app_context: State shared by every handler.
        token: Telegram bot token.
    """
    app = (
        Application.builder()
        .token(token)
        .concurrent_updates(True)
        .post_init(set_bot_commands)
        .post_shutdown(drop_app_context)
        .build()
    )
    app.bot_data[APP_CONTEXT_KEY] = app_context

    # ── Command handlers ──────────────────────────────────
    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("id", id_command))
    app.add_handler(CommandHandler("lang", lang_command))
    app.add_handler(CommandHandler("to", to_command))

    # ── Text message handler (catch-all) ──────────────────
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text_message))

    app.add_error_handler(error_handler)
    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Configuration ──────────────────────────────────
    require_credentials()

    # ── 2. Shared state ───────────────────────────────────
    app_context = AppContext.create(LOG_FILE)
    logger.info(f"Using model '{MODEL}', activity log at {LOG_FILE}")

    # ── 3. Start polling (SIGINT/SIGTERM stop it gracefully) ──
    app = build_application(app_context)
    logger.info("Translator bot is running. Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=[Update.MESSAGE])


if __name__ == "__main__":
    main()
