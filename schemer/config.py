from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


_DEFAULT_LOGLEVEL = logging.WARNING


def loglevel_from_env(var: str = 'LOGLEVEL') -> int:
    raw = os.environ.get(var)
    if raw:
        level = getattr(logging, raw.strip().upper(), None)
        if isinstance(level, int):
            return level
    return _DEFAULT_LOGLEVEL


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('SCHEMER_RECURSION_LIMIT')
    if not raw or not raw.strip():
        return None
    try:
        limit = int(raw.strip())
    except ValueError:
        return None
    return limit if limit > 0 else None


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('SCHEMER_PRELUDE')
    if not raw or not raw.strip():
        return None
    # a missing file is reported by the Interpreter when it tries to read it
    return Path(raw.strip())
