"""
models/log_record.py
--------------------
Domain model for one entry of the JSONL activity log.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

DIRECTION_IN = "in"
DIRECTION_OUT = "out"
DIRECTION_ERROR = "error"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-31T12:00:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class LogRecord:
    """
    A single immutable activity-log entry.

    Attributes:
        direction: 'in' (user message), 'out' (bot reply) or 'error'.
        chat_id: Telegram chat ID the event belongs to.
        payload: Direction-specific fields, e.g. {'text': ...} or {'reply': ...}.
        timestamp: When the event happened (UTC, ISO-8601).
    """
    direction: str  # 'in' | 'out' | 'error'
    chat_id: int
    payload: dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk JSON layout ({t, dir, chatId, ...payload})."""
        return {"t": self.timestamp, "dir": self.direction, "chatId": self.chat_id, **self.payload}

    @classmethod
    def incoming(cls, chat_id: int, text: str, username: Optional[str] = "", name: Optional[str] = "") -> "LogRecord":
        return cls(DIRECTION_IN, chat_id, {"username": username or "", "name": name or "", "text": text})

    @classmethod
    def outgoing(cls, chat_id: int, reply: str) -> "LogRecord":
        return cls(DIRECTION_OUT, chat_id, {"reply": reply})

    @classmethod
    def failure(cls, chat_id: int, error: BaseException | str) -> "LogRecord":
        return cls(DIRECTION_ERROR, chat_id, {"error": str(error)})
