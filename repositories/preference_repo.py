"""
repositories/preference_repo.py
-------------------------------
Per-chat target-language preferences.
Held in memory for the lifetime of the process; nothing is persisted.
"""

from config import DEFAULT_TARGET_LANG
from utils.logger import get_logger

logger = get_logger(__name__)


class PreferenceRepository:
    """Repository for the chat → target-language mapping."""

    def __init__(self, default: str = DEFAULT_TARGET_LANG) -> None:
        self.default = default
        self._langs: dict[int, str] = {}

    def get(self, chat_id: int) -> str:
        """Return the chat's target language, or the default if none was set."""
        return self._langs.get(chat_id, self.default)

    def set(self, chat_id: int, code: str) -> None:
        """
        Store a target language for a chat, overwriting any previous value.

        Args:
            chat_id: The Telegram chat ID.
            code: Language code, already validated by the command parser.
        """
        self._langs[chat_id] = code
        logger.info(f"Chat {chat_id} target language set to '{code}'")

    def reset(self, chat_id: int) -> None:
        """Put the chat back on the default target language."""
        self._langs[chat_id] = self.default
