"""
repositories/activity_log_repo.py
---------------------------------
Append-only JSONL activity log.

Every observable event of the translation pipeline (incoming text,
outgoing reply, failure) becomes one line in the log file. The file is
only ever appended to; the bot never reads it back.

Writes are best-effort: a failed write is reported through the
application logger and `append` returns False, it never raises.
The async helpers (`log_in`, `log_out`, `log_error`) run the write in a
worker thread so the event loop is never blocked on disk I/O.
"""

import asyncio
import json
from pathlib import Path

from config import LOG_FILE
from models.log_record import LogRecord
from utils.logger import get_logger

logger = get_logger(__name__)


class ActivityLogRepository:
    """Repository that appends LogRecord entries to a JSONL file."""

    def __init__(self, path: str | Path = LOG_FILE) -> None:
        """
        Args:
            path: Target file. Its parent directory is created if missing.
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: LogRecord) -> bool:
        """
        Append one record as a single JSON line.

        Returns:
            True if the line was written, False if the write failed.
        """
        line = json.dumps(record.to_dict(), ensure_ascii=False, default=str)
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.warning(f"Failed to write activity log to {self.path}: {e}")
            return False
        return True

    async def write(self, record: LogRecord) -> bool:
        """Append a record from a worker thread; same contract as `append`."""
        return await asyncio.to_thread(self.append, record)

    async def log_in(self, chat_id: int, text: str, username: str = "", name: str = "") -> bool:
        return await self.write(LogRecord.incoming(chat_id, text, username, name))

    async def log_out(self, chat_id: int, reply: str) -> bool:
        return await self.write(LogRecord.outgoing(chat_id, reply))

    async def log_error(self, chat_id: int, error: BaseException | str) -> bool:
        return await self.write(LogRecord.failure(chat_id, error))
