"""
Configuration for markupkit.

Why: Render tracing is a deployment concern. Operators pick the logger name
and level through the environment instead of touching component code.

All values are read at call time so tests (and long-running processes that
reload their environment) always see the current settings.
"""
from __future__ import annotations

import logging
import os
import sys

DEFAULT_TRACE_LOG = "markupkit.trace"
DEFAULT_TRACE_LEVEL = "DEBUG"


def _should_load_dotenv() -> bool:
    """Decide if we should load a local .env file.

    - Never load under pytest to avoid contaminating test env.
    - Allow explicit opt-out via MARKUPKIT_ENABLE_DOTENV (default true
      outside pytest).
    """
    if "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST"):
        return False
    flag = (os.getenv("MARKUPKIT_ENABLE_DOTENV", "true") or "").strip().lower()
    return flag in ("1", "true", "yes")


def load_env_file() -> bool:
    """Load `.env` into the process environment when allowed.

    Returns:
        bool: True when python-dotenv found and loaded a file.
    """
    if not _should_load_dotenv():
        return False
    from dotenv import load_dotenv

    return bool(load_dotenv())


def trace_log_name() -> str:
    """Logger name used for render traces."""
    name = (os.getenv("MARKUPKIT_TRACE_LOG", "") or "").strip()
    return name or DEFAULT_TRACE_LOG


def _parse_level(raw: str) -> int | None:
    value = (raw or "").strip().upper()
    if not value:
        return logging.getLevelName(DEFAULT_TRACE_LEVEL)
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else None


def trace_level() -> int:
    """Numeric logging level for render traces.

    Unknown level names fall back to DEBUG here; use
    `ensure_valid_config_on_startup()` to reject them early instead.
    """
    level = _parse_level(os.getenv("MARKUPKIT_TRACE_LEVEL", DEFAULT_TRACE_LEVEL))
    return level if level is not None else logging.DEBUG


def ensure_valid_config_on_startup() -> None:
    """Fail fast on unusable configuration.

    Raises:
        SystemExit: when MARKUPKIT_TRACE_LEVEL is not a known logging level.
    """
    raw = os.getenv("MARKUPKIT_TRACE_LEVEL", DEFAULT_TRACE_LEVEL)
    if _parse_level(raw) is None:
        raise SystemExit(
            f"Refusing to start: MARKUPKIT_TRACE_LEVEL={raw!r} is not a logging level name."
        )


load_env_file()
