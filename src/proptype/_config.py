"""Engine configuration: UnknownKindPolicy, Settings, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from proptype._logging import configure_logging

__all__ = [
    'Settings',
    'UnknownKindPolicy',
    'get_config',
    'init',
    'reset',
]


class UnknownKindPolicy(Enum):
    """What a TypeRegistry does when asked for a kind nobody registered."""

    FALLBACK = 'fallback'
    RAISE = 'raise'


@dataclass(frozen=True)
class Settings:
    """Configuration for the proptype engine.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured, console output otherwise.
        unknown_kind: Default policy for registries built without an explicit one.
    """

    log_level: str | None = None
    json_logs: bool = True
    unknown_kind: UnknownKindPolicy = UnknownKindPolicy.FALLBACK


# Active configuration (set by init(), or lazily by get_config())
_config: Settings | None = None


def _detect_unknown_kind() -> UnknownKindPolicy:
    """Read the unknown-kind policy from PROPTYPE_UNKNOWN_KIND ("fallback" or "raise")."""
    env_policy = os.environ.get('PROPTYPE_UNKNOWN_KIND', '').lower()
    if not env_policy:
        return UnknownKindPolicy.FALLBACK
    try:
        return UnknownKindPolicy(env_policy)
    except ValueError:
        logging.warning("Unknown PROPTYPE_UNKNOWN_KIND value '%s', defaulting to fallback", env_policy)
        return UnknownKindPolicy.FALLBACK


def _detect_json_logs() -> bool:
    """Read PROPTYPE_LOG_JSON; anything but "0", "false" or "no" means JSON."""
    return os.environ.get('PROPTYPE_LOG_JSON', '1').lower() not in ('0', 'false', 'no')


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
    unknown_kind: UnknownKindPolicy | str | None = None,
) -> Settings:
    """Initialize proptype with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            PROPTYPE_LOG_LEVEL if None; logging is left untouched if unset.
        json_logs: JSON (True) or console (False) log output. Read from
            PROPTYPE_LOG_JSON if None.
        unknown_kind: Policy for unregistered kinds. Can be an
            UnknownKindPolicy or a string ("fallback", "raise"). Read from
            PROPTYPE_UNKNOWN_KIND if None.

    Returns:
        The Settings that were set.

    Example:
        ```python
        from proptype import init

        init(log_level='DEBUG', unknown_kind='raise')
        ```
    """
    global _config  # noqa: PLW0603

    if unknown_kind is None:
        resolved_policy = _detect_unknown_kind()
    elif isinstance(unknown_kind, str):
        resolved_policy = UnknownKindPolicy(unknown_kind.lower())
    else:
        resolved_policy = unknown_kind

    _config = Settings(
        log_level=log_level if log_level is not None else os.environ.get('PROPTYPE_LOG_LEVEL') or None,
        json_logs=_detect_json_logs() if json_logs is None else json_logs,
        unknown_kind=resolved_policy,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> Settings:
    """Get the active configuration, initializing it from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Drop the active configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
