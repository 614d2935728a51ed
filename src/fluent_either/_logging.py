"""Diagnostic lines for fluent-either.

`emit_diagnostic` is the sink behind `Either.log`: a dedicated structlog
logger writing the bare line (e.g. "Right(42)") to stdout, or stderr when
`DiagnosticsConfig.stream` says so. Registered log hooks see every line
before it is written.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from fluent_either._config import get_config

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'emit_diagnostic',
    'remove_log_hook',
]


def _render_line(logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
    """Render only the event text, e.g. "Right(42)"."""
    return str(event_dict['event'])


def emit_diagnostic(line: str, **fields: Any) -> None:
    """Write one diagnostic line through structlog.

    Args:
        line: The text to write.
        **fields: Extra key/values passed to log hooks; never written.
    """
    import structlog

    config = get_config()
    stream = sys.stdout if config.stream == 'stdout' else sys.stderr

    logger = structlog.wrap_logger(
        structlog.PrintLogger(stream),
        processors=[_create_hook_processor(), _render_line],
        wrapper_class=structlog.BoundLogger,
    )
    logger.info(line, **fields)


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called for each diagnostic line.

    Hooks receive a copy of the event dict: the line as `event` plus the
    extra fields, such as `tag` for lines written by `Either.log`.

    Args:
        hook: Callable that receives log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook.

    Args:
        hook: The hook to remove.
    """
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:
                pass  # Don't let hook failures break logging
        return event_dict

    return hook_processor
