"""
handlers/language_handler.py
-----------------------------
Handles /lang and /to commands.

    /lang <code>         → store <code> as the chat's target language
    /to <code> <text>    → translate <text> into <code> once, preference untouched
    /to <code>           → same as /lang <code>
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.message_handler import dispatch_update
from services.app_context import get_app_context
from services.command_parser import parse_lang_arg, resolve_override

LANG_USAGE = "Usage: /lang <code>  e.g., /lang en"
TO_USAGE = "Usage: /to <code> <text>  e.g., /to ru hello"


async def _set_language(update: Update, context: ContextTypes.DEFAULT_TYPE, code: str) -> None:
    get_app_context(context).preferences.set(update.effective_chat.id, code)
    await update.message.reply_text(f"Target language set to: {code}")


async def lang_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /lang <code> - change the chat's target language.
    Usage: /lang tr
    """
    code = parse_lang_arg(update.message.text or "")
    if not code:
        await update.message.reply_text(LANG_USAGE)
        return
    await _set_language(update, context, code)


async def to_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /to <code> [text] - one-off translation.
    Usage: /to ru hello
    """
    text = update.message.text or ""
    code = parse_lang_arg(text)
    if not code:
        await update.message.reply_text(TO_USAGE)
        return

    # No text after the code: nothing to translate, treat as /lang.
    if resolve_override(text).text == text:
        await _set_language(update, context, code)
        return

    await dispatch_update(update, context)
