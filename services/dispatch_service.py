"""
services/dispatch_service.py
----------------------------
Turns one inbound text message into at most one reply plus activity-log records.

Pipeline:
    1. Ignore unrelated bot commands.
    2. Debounce per chat (dropped events get no reply and no log).
    3. Resolve the target language (one-off override, else chat preference).
    4. Log the incoming text, translate, reply, log the outcome.

Failures are contained to the event: the user gets a fixed apology,
an 'error' record is written, nothing is retried or re-raised.
"""

import enum
from typing import Awaitable, Callable, Protocol

from repositories.activity_log_repo import ActivityLogRepository
from repositories.preference_repo import PreferenceRepository
from security.rate_limiter import ChatDebouncer
from services.command_parser import is_command, parse_lang_arg, resolve_override
from utils.logger import get_logger

logger = get_logger(__name__)

FAILURE_MESSAGE = "Translation failed. Please try again."

ReplyFunc = Callable[..., Awaitable[object]]


class Translator(Protocol):
    """Anything that can translate text into a target language."""

    async def translate(self, text: str, target: str = "en") -> str: ...


class DispatchOutcome(enum.Enum):
    """What the pipeline did with an event."""

    IGNORED = "ignored"
    DEBOUNCED = "debounced"
    TRANSLATED = "translated"
    FAILED = "failed"


class DispatchService:
    """Runs the translation pipeline for a single chat event."""

    def __init__(
        self,
        translator: Translator,
        preferences: PreferenceRepository,
        debouncer: ChatDebouncer,
        activity_log: ActivityLogRepository,
    ) -> None:
        self.translator = translator
        self.preferences = preferences
        self.debouncer = debouncer
        self.activity_log = activity_log

    def resolve_target(self, chat_id: int, text: str) -> tuple[str, str]:
        """
        Work out the target language and the text to translate.

        A one-off override in the text wins; it is never stored.

        Returns:
            (target_language, text_to_translate)
        """
        override = resolve_override(text)
        return override.target or self.preferences.get(chat_id), override.text

    async def dispatch(
        self,
        chat_id: int,
        text: str,
        reply: ReplyFunc,
        username: str = "",
        name: str = "",
    ) -> DispatchOutcome:
        """
        Process one inbound text event.

        Args:
            chat_id: Chat the message came from.
            text: Raw message text.
            reply: Coroutine function sending text back to the chat,
                called as ``reply(text, disable_web_page_preview=...)``.
            username: Sender username, empty if unknown.
            name: Sender display name, empty if unknown.

        Returns:
            What happened to the event.
        """
        text = text or ""
        if is_command(text) and parse_lang_arg(text) is None:
            return DispatchOutcome.IGNORED

        # Must happen before the first await so concurrent events see it.
        if not self.debouncer.accept(chat_id):
            return DispatchOutcome.DEBOUNCED

        target, input_text = self.resolve_target(chat_id, text)

        try:
            await self.activity_log.log_in(chat_id, input_text, username, name)
            translated = await self.translator.translate(input_text, target)
            await reply(translated, disable_web_page_preview=True)
            await self.activity_log.log_out(chat_id, translated)
            return DispatchOutcome.TRANSLATED
        except Exception as e:
            logger.error(f"Translation failed for chat {chat_id}: {e}", exc_info=True)
            await self._send_failure(chat_id, reply)
            await self.activity_log.log_error(chat_id, e)
            return DispatchOutcome.FAILED

    async def _send_failure(self, chat_id: int, reply: ReplyFunc) -> None:
        try:
            await reply(FAILURE_MESSAGE)
        except Exception as e:
            logger.error(f"Could not deliver failure message to chat {chat_id}: {e}")
