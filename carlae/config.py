from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_PROMPT = "carlae> "
_DEFAULT_LOG_LEVEL = "WARNING"

# Lines that end an interactive session
EXIT_COMMANDS = frozenset({"exit", "quit"})


def get_prompt() -> str:
    return os.environ.get("CARLAE_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("CARLAE_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string like "Level FOO" for unknown names
    if not isinstance(level, int):
        return logging.getLevelName(_DEFAULT_LOG_LEVEL)
    return level


def get_recursion_limit() -> Optional[int]:
    """Host call-stack bound for deep Carlae recursion, or None to keep Python's default."""
    raw = os.environ.get("CARLAE_RECURSION_LIMIT")
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None
