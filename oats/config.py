from __future__ import annotations
import logging
import os
from pathlib import Path


# Resolve installation dir (oats package directory)
_OATS_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_PATH = _OATS_DIR / 'prelude.scm'
_DEFAULT_RECURSION_LIMIT = 20_000
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_prelude_path() -> Path:
    raw = os.environ.get('OATS_PRELUDE_PATH')
    if not raw or not raw.strip():
        return _DEFAULT_PRELUDE_PATH
    return Path(raw.strip())


def get_recursion_limit() -> int:
    raw = os.environ.get('OATS_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"OATS_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    return max(limit, 1_000)


def get_log_level() -> int:
    name = os.environ.get('OATS_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"OATS_LOG_LEVEL is not a logging level: {name!r}")
    return level
