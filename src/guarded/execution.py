"""Guarded execution: run a unit of work, then always run its cleanup.

Cleanup runs exactly once after the primary unit terminates, whether it
returned or raised (any BaseException, including KeyboardInterrupt). The
primary's exception propagates unchanged after cleanup.

If cleanup raises while a primary exception is unwinding, Python's `finally`
semantics apply: the cleanup exception propagates and the primary exception
is attached as its `__context__`. The superseded exception is also logged.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import wrapt

from guarded._logging import cleanup_logger

__all__ = ['cleanup_after', 'run_guarded', 'with_cleanup']


def _run_cleanup(cleanup: Callable[[], object], superseded: BaseException | None) -> None:
    try:
        cleanup()
    except BaseException as exc:
        cleanup_logger(cleanup).warning(
            'cleanup.failed',
            error=repr(exc),
            superseded=repr(superseded) if superseded is not None else None,
        )
        raise


def run_guarded[T](primary: Callable[[], T], cleanup: Callable[[], object]) -> T:
    """Call `primary`, then `cleanup`, on every exit path.

    Args:
        primary: Zero-argument unit of work.
        cleanup: Zero-argument cleanup unit, run exactly once after `primary`.

    Returns:
        Whatever `primary` returned.

    Raises:
        BaseException: The primary's exception after cleanup ran, or the
            cleanup's exception (chained to the primary's, if any).

    Example:
        ```python
        opened = []
        run_guarded(lambda: opened.append('conn'), opened.clear)
        opened
        # []
        ```
    """
    primary_error: BaseException | None = None
    try:
        return primary()
    except BaseException as exc:
        primary_error = exc
        raise
    finally:
        _run_cleanup(cleanup, primary_error)


@contextmanager
def cleanup_after(cleanup: Callable[[], object]) -> Iterator[None]:
    """Run `cleanup` exactly once when the `with` block exits, however it exits.

    Example:
        ```python
        with cleanup_after(client.close):
            client.fetch('users')
        ```
    """
    block_error: BaseException | None = None
    try:
        yield
    except BaseException as exc:
        block_error = exc
        raise
    finally:
        _run_cleanup(cleanup, block_error)


def with_cleanup(cleanup: Callable[[], object]) -> Any:
    """Decorator making every call of the wrapped function a guarded execution.

    Example:
        ```python
        @with_cleanup(reset_fixtures)
        def create_and_query():
            ...
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return run_guarded(lambda: wrapped(*args, **kwargs), cleanup)

    return wrapper
