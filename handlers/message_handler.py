"""
handlers/message_handler.py
----------------------------
Catch-all handler for plain text messages.
Extracts sender details and hands the text to the DispatchService.
"""

from telegram import LinkPreviewOptions, Message, Update
from telegram.ext import ContextTypes

from services.app_context import get_app_context
from services.dispatch_service import ReplyFunc


def sender_details(update: Update) -> tuple[str, str]:
    """
    Best-effort sender username and display name.

    Returns:
        (username, "first_name last_name"), empty strings when unavailable.
    """
    user = update.effective_user
    if user is None:
        return "", ""
    name = f"{user.first_name or ''} {user.last_name or ''}".strip()
    return user.username or "", name


def make_reply(message: Message) -> ReplyFunc:
    """Wrap `message.reply_text` into the reply callable the pipeline expects."""

    async def reply(text: str, disable_web_page_preview: bool = False) -> Message:
        if disable_web_page_preview:
            return await message.reply_text(text, link_preview_options=LinkPreviewOptions(is_disabled=True))
        return await message.reply_text(text)

    return reply


async def dispatch_update(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Run the translation pipeline for the update's message."""
    message = update.message
    username, name = sender_details(update)
    await get_app_context(context).dispatcher.dispatch(
        update.effective_chat.id,
        message.text or "",
        make_reply(message),
        username=username,
        name=name,
    )


async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle any plain text message (not a command).
    Translates it into the chat's target language.
    """
    if update.message is None:
        return
    await dispatch_update(update, context)
