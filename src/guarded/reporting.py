"""Failure sinks: where exception assertions report failures.

A sink is the only piece of a test framework that `assert_raises` talks to.
The ambient sink is held in a context variable so a harness can install one
per test (see `guarded.pytest_plugin`); when none is installed, failures
accumulate in a process-wide `CollectingSink` that keeps only the most
recent `DEFAULT_SINK_LIMIT` failures.
"""

from __future__ import annotations

import inspect
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol, runtime_checkable

import msgspec

from guarded.errors import AssertionFailure, AssertionFailureError, SourceLocation

__all__ = [
    'DEFAULT_SINK_LIMIT',
    'CollectingSink',
    'FailureSink',
    'RaisingSink',
    'caller_location',
    'current_sink',
    'default_sink',
    'use_sink',
]


@runtime_checkable
class FailureSink(Protocol):
    """Receives assertion failures from the test framework's point of view."""

    def record_failure(self, message: str, location: SourceLocation | None = None) -> None: ...


class CollectingSink:
    """Sink that records failures in order without interrupting the caller.

    With `max_failures` set, only the most recent failures are kept and the
    count of dropped ones is available as `dropped`.
    """

    def __init__(self, max_failures: int | None = None) -> None:
        self.max_failures = max_failures
        self.dropped = 0
        self._failures: deque[AssertionFailure] = deque(maxlen=max_failures)

    def record_failure(self, message: str, location: SourceLocation | None = None) -> None:
        if self.max_failures is not None and len(self._failures) == self.max_failures:
            self.dropped += 1
        self._failures.append(AssertionFailure(message, location))

    @property
    def failures(self) -> list[AssertionFailure]:
        """Recorded failures, oldest first."""
        return list(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def clear(self) -> None:
        self._failures.clear()
        self.dropped = 0

    def summary(self) -> str:
        """Human-readable multi-line summary of every recorded failure."""
        header = f'{len(self._failures) + self.dropped} assertion failure(s)'
        if self.dropped:
            header = f'{header}, {self.dropped} oldest dropped'
        lines = [f'{header}:']
        for failure in self._failures:
            where = f' at {failure.location}' if failure.location is not None else ''
            lines.append(f'  - {failure.message}{where}')
        return '\n'.join(lines)

    def check(self) -> None:
        """Raise if any failure was recorded.

        Raises:
            AssertionFailureError: Carrying the summary, located at the first failure.
        """
        if self._failures:
            raise AssertionFailureError(self.summary(), self._failures[0].location)

    def to_json(self) -> bytes:
        """Encode the recorded failures as a JSON array."""
        return msgspec.json.encode(list(self._failures))


class RaisingSink:
    """Sink that turns every failure into an immediate AssertionFailureError."""

    def record_failure(self, message: str, location: SourceLocation | None = None) -> None:
        raise AssertionFailureError(message, location)


DEFAULT_SINK_LIMIT = 1000

_default_sink = CollectingSink(max_failures=DEFAULT_SINK_LIMIT)
_current_sink: ContextVar[FailureSink | None] = ContextVar('guarded_current_sink', default=None)


def default_sink() -> CollectingSink:
    """Process-wide sink used when no ambient sink is installed.

    It lives for the whole process and is never cleared automatically; it
    keeps the last `DEFAULT_SINK_LIMIT` failures. Every failure is logged as
    well, so dropped entries remain visible in the log. Install a sink with
    `use_sink` (or the `failure_sink` pytest fixture) to scope failures to a test.
    """
    return _default_sink


def current_sink() -> FailureSink:
    """Return the ambient sink, falling back to the process-wide default."""
    sink = _current_sink.get()
    return sink if sink is not None else _default_sink


@contextmanager
def use_sink[S: FailureSink](sink: S) -> Iterator[S]:
    """Install `sink` as the ambient sink for the duration of the block.

    Example:
        ```python
        with use_sink(CollectingSink()) as sink:
            assert_raises(lambda: None)
        assert len(sink) == 1
        ```
    """
    token = _current_sink.set(sink)
    try:
        yield sink
    finally:
        _current_sink.reset(token)


def caller_location(stacklevel: int = 1) -> SourceLocation | None:
    """Locate the frame `stacklevel` levels above the function calling this one."""
    frame = inspect.currentframe()
    try:
        # One step to leave this function, then stacklevel steps up from its caller.
        for _ in range(stacklevel + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return SourceLocation(
            filename=frame.f_code.co_filename,
            lineno=frame.f_lineno,
            function=frame.f_code.co_name,
        )
    finally:
        del frame
