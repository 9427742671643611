"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class ConfigError(RuntimeError):
    """Raised at startup when a required setting is missing."""


# ── Telegram ──────────────────────────────────────────────
BOT_TOKEN: str = os.getenv("BOT_TOKEN", "")

# ── Gemini AI ─────────────────────────────────────────────
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
MODEL: str = os.getenv("MODEL") or "models/gemini-2.0-flash"

# ── Activity log (JSONL) ──────────────────────────────────
LOG_DIR: Path = Path(os.getenv("LOG_DIR", "logs")).resolve()
LOG_FILE: Path = LOG_DIR / "messages.jsonl"

# ── Application logging ───────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Translation ───────────────────────────────────────────
DEFAULT_TARGET_LANG: str = "en"
DEBOUNCE_SECONDS: float = float(os.getenv("DEBOUNCE_SECONDS", "0.9"))
DEBOUNCE_MS: int = round(DEBOUNCE_SECONDS * 1000)


def require_credentials() -> None:
    """
    Make sure every required credential is present.

    Raises:
        ConfigError: Listing each missing variable.
    """
    missing = [
        name
        for name, value in (("BOT_TOKEN", BOT_TOKEN), ("GEMINI_API_KEY", GEMINI_API_KEY))
        if not value
    ]
    if missing:
        raise ConfigError(f"Missing {', '.join(missing)} in .env")
