from __future__ import annotations
import logging
import os
from typing import Optional


# Defaults
_DEFAULT_READ_BUFFER_SIZE = 8 * 1024
_DEFAULT_LOG_LEVEL = logging.WARNING


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")
    return value if value > 0 else default


def get_read_buffer_size() -> int:
    return int_from_env('KONS_READ_BUFFER_SIZE', _DEFAULT_READ_BUFFER_SIZE)


def get_recursion_limit() -> Optional[int]:
    return int_from_env('KONS_RECURSION_LIMIT', None)


def get_log_level(verbosity: int = 0) -> int:
    """Level named by KONS_LOG, else derived from a -v count."""
    raw = os.environ.get('KONS_LOG')
    if raw:
        level = logging.getLevelName(raw.strip().upper())
        if isinstance(level, int):
            return level
    if verbosity <= 0:
        return _DEFAULT_LOG_LEVEL
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG
