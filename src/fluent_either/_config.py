"""Diagnostics configuration: DiagnosticsConfig and initialization."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    'DiagnosticsConfig',
    'get_config',
    'init',
    'reset_config',
]

_STREAMS = ('stdout', 'stderr')


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Where `Either.log` and `Either.log_and_continue` write their line.

    Attributes:
        stream: Either "stdout" or "stderr".
    """

    stream: str = 'stdout'


# Global diagnostics configuration (set by init())
_config: DiagnosticsConfig | None = None


def init(*, stream: str | None = None) -> DiagnosticsConfig:
    """Set the process-wide diagnostics configuration.

    Args:
        stream: "stdout" (default) or "stderr".

    Returns:
        The configuration now in effect.

    Raises:
        ValueError: If `stream` is not "stdout" or "stderr".
    """
    global _config

    if stream is None:
        stream = 'stdout'
    if stream not in _STREAMS:
        raise ValueError(f"Unknown diagnostics stream '{stream}', expected one of {_STREAMS}")

    _config = DiagnosticsConfig(stream=stream)
    return _config


def get_config() -> DiagnosticsConfig:
    """Return the active configuration, initialising it on first use."""
    if _config is None:
        return init()
    return _config


def reset_config() -> None:
    """Forget the active configuration so the next use falls back to defaults."""
    global _config
    _config = None
