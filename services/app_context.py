"""
services/app_context.py
-----------------------
Process-wide bot state, owned by one object instead of module globals.

Lifecycle:
    - Created once in main() before polling starts.
    - Stored in `Application.bot_data` under APP_CONTEXT_KEY.
    - Dropped in the post_shutdown hook.

All state is only touched from the asyncio event loop, so no locks.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from telegram.ext import ContextTypes

from ai.gemini_translator import GeminiTranslator
from config import LOG_FILE
from repositories.activity_log_repo import ActivityLogRepository
from repositories.preference_repo import PreferenceRepository
from security.rate_limiter import ChatDebouncer
from services.dispatch_service import DispatchService, Translator

APP_CONTEXT_KEY = "app_context"


@dataclass
class AppContext:
    """
    Everything the handlers need, wired together.

    Attributes:
        translator: Object with an async `translate(text, target)`.
        preferences: Chat → target-language store.
        debouncer: Per-chat debounce timestamps.
        activity_log: JSONL activity log writer.
        dispatcher: Translation pipeline built from the above.
    """
    translator: Translator
    preferences: PreferenceRepository = field(default_factory=PreferenceRepository)
    debouncer: ChatDebouncer = field(default_factory=ChatDebouncer)
    activity_log: Optional[ActivityLogRepository] = None
    dispatcher: DispatchService = field(init=False)

    def __post_init__(self) -> None:
        if self.activity_log is None:
            self.activity_log = ActivityLogRepository(LOG_FILE)
        self.dispatcher = DispatchService(
            self.translator, self.preferences, self.debouncer, self.activity_log
        )

    @classmethod
    def create(cls, log_file: str | Path = LOG_FILE) -> "AppContext":
        """Build the production context from config.py settings."""
        return cls(
            translator=GeminiTranslator(),
            activity_log=ActivityLogRepository(log_file),
        )


def get_app_context(context: ContextTypes.DEFAULT_TYPE) -> AppContext:
    """
    Fetch the AppContext from a handler's callback context.

    Raises:
        RuntimeError: If the bot was started without one.
    """
    app_context: Any = context.bot_data.get(APP_CONTEXT_KEY)
    if app_context is None:
        raise RuntimeError("AppContext not initialized. Call AppContext.create() in main().")
    return app_context
