"""
handlers/start_handler.py
--------------------------
Handles /start and /id commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from services.app_context import get_app_context
from utils.logger import get_logger

logger = get_logger(__name__)

WELCOME_TEXT = (
    "Welcome!  I translate your messages.\n\n"
    "• Default target language: *English (en)*\n"
    "• Change target: /lang <code>  e.g., /lang tr\n"
    "• Quick one-off: /to <code> <text>  e.g., /to ru hello\n"
    "• Show id: /id"
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - reset the chat to English and show the welcome message."""
    chat_id = update.effective_chat.id
    get_app_context(context).preferences.reset(chat_id)
    logger.info(f"Chat {chat_id} started the bot.")

    await update.message.reply_text(WELCOME_TEXT, parse_mode="Markdown")


async def id_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /id command - show the chat ID."""
    await update.message.reply_text(f"chat.id = {update.effective_chat.id}")
