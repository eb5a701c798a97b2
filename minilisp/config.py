from __future__ import annotations
import os
from typing import Optional


# Defaults
_DEFAULT_SYMBOL_MAX_LEN = 200
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_symbol_max_len() -> int:
    value = int_from_env('MINILISP_SYMBOL_MAX_LEN', _DEFAULT_SYMBOL_MAX_LEN)
    if value < 1:
        raise ValueError(f"MINILISP_SYMBOL_MAX_LEN must be positive, got {value}")
    return value


def get_log_level() -> str:
    return os.environ.get('MINILISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip() or _DEFAULT_LOG_LEVEL


def get_recursion_limit() -> Optional[int]:
    # Unset means "leave the interpreter default alone"
    return int_from_env('MINILISP_RECURSION_LIMIT', None)
