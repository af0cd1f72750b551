"""Configuration: CatchPolicy enum, GuardedConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from guarded._logging import configure_logging

__all__ = [
    'CatchPolicy',
    'GuardedConfig',
    'get_config',
    'init',
    'reset',
]


class CatchPolicy(Enum):
    """Which exceptions count as "raised" for exception assertions."""

    EXCEPTION = 'exception'
    BASE_EXCEPTION = 'base_exception'

    @property
    def base(self) -> type[BaseException]:
        """The exception base class caught under this policy."""
        if self is CatchPolicy.BASE_EXCEPTION:
            return BaseException
        return Exception


@dataclass(frozen=True)
class GuardedConfig:
    """Configuration for guarded.

    Attributes:
        catch: Exception base caught by assert_raises. EXCEPTION lets
            KeyboardInterrupt and SystemExit through.
        capture_location: Whether failures carry the caller's file and line.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    catch: CatchPolicy = CatchPolicy.EXCEPTION
    capture_location: bool = True
    log_level: str | None = None


# Global configuration (set by init() or lazily from the environment)
_config: GuardedConfig | None = None


def _detect_catch_policy() -> CatchPolicy:
    """Read the catch policy from GUARDED_CATCH, defaulting to EXCEPTION."""
    env_catch = os.environ.get('GUARDED_CATCH', '').lower()
    if not env_catch:
        return CatchPolicy.EXCEPTION
    try:
        return CatchPolicy(env_catch)
    except ValueError:
        logging.warning("Unknown GUARDED_CATCH value '%s', defaulting to exception", env_catch)
        return CatchPolicy.EXCEPTION


def _detect_log_level() -> str | None:
    return os.environ.get('GUARDED_LOG_LEVEL') or None


def init(
    catch: CatchPolicy | str | None = None,
    capture_location: bool | None = None,
    log_level: str | None = None,
) -> GuardedConfig:
    """Initialize guarded with the specified configuration.

    Args:
        catch: Catch policy. Read from GUARDED_CATCH if None.
            Can be CatchPolicy enum or string ("exception", "base_exception").
        capture_location: Record call sites on failures. Defaults to True.
        log_level: Logging level. Read from GUARDED_LOG_LEVEL if None.

    Returns:
        The GuardedConfig that was set.

    Example:
        ```python
        from guarded import CatchPolicy, init

        init()
        init(catch=CatchPolicy.BASE_EXCEPTION, log_level='DEBUG')
        init(catch='base_exception', capture_location=False)
        ```
    """
    global _config  # noqa: PLW0603

    if catch is None:
        resolved_catch = _detect_catch_policy()
    elif isinstance(catch, str):
        resolved_catch = CatchPolicy(catch.lower())
    else:
        resolved_catch = catch

    resolved_level = log_level if log_level is not None else _detect_log_level()

    _config = GuardedConfig(
        catch=resolved_catch,
        capture_location=True if capture_location is None else capture_location,
        log_level=resolved_level,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> GuardedConfig:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
