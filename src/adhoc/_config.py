"""Library configuration: AdhocConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from adhoc._logging import configure_logging

__all__ = [
    'AdhocConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class AdhocConfig:
    """Process-wide settings for adhoc.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render log records as JSON (True) or for a console (False).
        memoize_lazy: Default memo flag for `lazy()` when none is passed.
    """

    log_level: str | None = None
    json_logs: bool = True
    memoize_lazy: bool = True


_config: AdhocConfig | None = None


def _detect_log_level() -> str | None:
    """Read ADHOC_LOG_LEVEL; an empty value means silent."""
    level = os.environ.get('ADHOC_LOG_LEVEL', '').strip().upper()
    return level or None


def _detect_memoize() -> bool:
    """Read ADHOC_MEMOIZE as a boolean flag, defaulting to True."""
    raw = os.environ.get('ADHOC_MEMOIZE', '').strip().lower()
    if not raw or raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.warning("Unknown ADHOC_MEMOIZE value '%s', defaulting to true", raw)
    return True


def init(
    *,
    log_level: str | None = None,
    json_logs: bool = True,
    memoize_lazy: bool | None = None,
) -> AdhocConfig:
    """Initialize adhoc with the given settings.

    Explicit arguments win over the environment (ADHOC_LOG_LEVEL,
    ADHOC_MEMOIZE).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = environment or silent.
        json_logs: Emit JSON log lines when logging is configured.
        memoize_lazy: Default memo flag for lazily constructed options.

    Returns:
        The AdhocConfig that was set.

    Example:
        ```python
        from adhoc import init

        init(log_level='DEBUG', memoize_lazy=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_memo = memoize_lazy if memoize_lazy is not None else _detect_memoize()

    _config = AdhocConfig(
        log_level=resolved_level,
        json_logs=json_logs,
        memoize_lazy=resolved_memo,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> AdhocConfig:
    """Get the current configuration, building it from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
