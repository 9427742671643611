"""
security/rate_limiter.py
-------------------------
Per-chat debounce to drop spammy duplicate messages.

An event is accepted only if at least DEBOUNCE_MS milliseconds have passed
since the last *accepted* event of the same chat. Dropped events are not
queued and do not move the window.
"""

import time
from typing import Callable

from config import DEBOUNCE_MS
from utils.logger import get_logger

logger = get_logger(__name__)


def monotonic_ms() -> int:
    """Monotonic clock in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


class ChatDebouncer:
    """
    Tracks the last accepted event time per chat.

    Times are integer milliseconds so the window boundary is exact.

    Args:
        window_ms: Minimum interval between accepted events, in milliseconds.
        clock: Monotonic millisecond time source; injectable for tests.
    """

    def __init__(self, window_ms: int = DEBOUNCE_MS, clock: Callable[[], int] = monotonic_ms) -> None:
        self.window_ms = window_ms
        self._clock = clock
        # {chat_id: last_accepted_ms}
        self._last_seen: dict[int, int] = {}

    def accept(self, chat_id: int) -> bool:
        """
        Check and record an event for a chat.

        Returns:
            True if the event should be processed, False if it falls inside
            the debounce window of the previous accepted event.
        """
        now = self._clock()
        last = self._last_seen.get(chat_id)
        if last is not None and now - last < self.window_ms:
            logger.debug(f"Debounced event for chat {chat_id} ({now - last}ms after previous)")
            return False
        self._last_seen[chat_id] = now
        return True
