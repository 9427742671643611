"""
services/command_parser.py
--------------------------
Extracts target-language overrides from raw message text.

Supported forms:
    - "/lang tr"          → command form (also used by /lang to store a preference)
    - "/to ru hello"      → command form with text to translate
    - "/lang@BotName tr"  → command form as sent in group chats
    - "to ru: hello"      → inline form inside a plain message

All functions are pure: no I/O, no state.
"""

import re
from typing import NamedTuple, Optional

_COMMAND_RE = re.compile(r"^/(?:lang|to)(?:@\w+)?\s+([a-z]{2,3})(?:\s|$)", re.IGNORECASE)
_COMMAND_PREFIX_RE = re.compile(r"^/(?:lang|to)(?:@\w+)?\s+[a-z]{2,3}\s*", re.IGNORECASE)
_INLINE_RE = re.compile(r"^to\s+([a-z]{2,3})\s*:\s*", re.IGNORECASE)

COMMAND_PREFIX = "/"


class Override(NamedTuple):
    """Result of override resolution: target is None when no override was given."""
    target: Optional[str]
    text: str


def is_command(text: str) -> bool:
    """Returns True if the text starts with a bot command prefix."""
    return text.startswith(COMMAND_PREFIX)


def parse_lang_arg(text: str) -> Optional[str]:
    """
    Extract the language code from "/lang <code>" or "/to <code>".

    Args:
        text: Arbitrary message text.

    Returns:
        The lower-cased code, or None if the text is not such a command.
    """
    match = _COMMAND_RE.match(text.strip())
    return match.group(1).lower() if match else None


def parse_inline_target(text: str) -> Optional[str]:
    """Extract the code from a leading "to <code>:" prefix, if any."""
    match = _INLINE_RE.match(text.strip())
    return match.group(1).lower() if match else None


def resolve_override(text: str) -> Override:
    """
    Find a one-off target override and strip it from the text.

    The command form wins over the inline form. If nothing is left after
    stripping, the original raw text is kept as the text to translate.

    Args:
        text: Raw message text.

    Returns:
        Override(target, text) where target is None if no override was found.
    """
    stripped = text.strip()
    target = parse_lang_arg(stripped)
    if target:
        remainder = _COMMAND_PREFIX_RE.sub("", stripped, count=1)
    else:
        target = parse_inline_target(stripped)
        remainder = _INLINE_RE.sub("", stripped, count=1) if target else stripped

    return Override(target, remainder.strip() or text)
