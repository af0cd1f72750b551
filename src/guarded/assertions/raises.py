"""assert_raises and expect_raises: non-aborting exception assertions.

Both run a unit of work and judge the assertion satisfied if and only if it
raised. A failed assertion is reported to a failure sink and returned as
`Err`; it never aborts the caller. An exception raised by the unit of work is
always absorbed, whether or not it satisfied the assertion.
"""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Self

from guarded._config import get_config
from guarded._logging import failure_logger
from guarded.errors import AssertionFailureError, SourceLocation
from guarded.reporting import FailureSink, caller_location, current_sink
from guarded.result import Err, Ok, Result

__all__ = ['DEFAULT_MESSAGE', 'ExpectRaises', 'assert_raises', 'expect_raises']

DEFAULT_MESSAGE = 'expected exception was not raised'

type Outcome = Result[BaseException, AssertionFailureError]


def _type_names(exceptions: tuple[type[BaseException], ...]) -> str:
    return ' or '.join(exc_type.__name__ for exc_type in exceptions)


def _captured(base: type[BaseException], exceptions: tuple[type[BaseException], ...] | None) -> tuple[type[BaseException], ...]:
    """Exception types absorbed by an assertion: the policy base plus any explicitly named types."""
    return (base, *exceptions) if exceptions else (base,)


def _mismatch(exc: BaseException, exceptions: tuple[type[BaseException], ...] | None, message: str | None) -> str | None:
    """Describe why `exc` does not satisfy the assertion, or None if it does."""
    if not exceptions or isinstance(exc, exceptions):
        return None
    detail = f'expected {_type_names(exceptions)}, got {type(exc).__name__}: {exc}'
    return f'{message}: {detail}' if message else detail


def _report(
    text: str,
    sink: FailureSink | None,
    location: SourceLocation | None,
    cause: BaseException | None = None,
) -> AssertionFailureError:
    error = AssertionFailureError(text, location)
    error.__cause__ = cause
    target = sink if sink is not None else current_sink()
    failure_logger(target, location).warning(
        'assertion.failed',
        failure=text,
        raised=repr(cause) if cause is not None else None,
    )
    target.record_failure(text, location)
    return error


def assert_raises(
    work: Callable[[], object] | None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    sink: FailureSink | None = None,
    message: str | None = None,
    stacklevel: int = 1,
) -> Outcome:
    """Assert that calling `work` raises.

    `work` is called exactly once. Any exception it raises (under the
    configured catch policy) is absorbed. If it returns normally, one failure
    is reported to `sink` (or the ambient sink) and the call still returns.

    Args:
        work: Zero-argument unit of work. A non-callable value, including
            None, counts as "nothing was raised" and is reported as a failure.
        exceptions: Optional tuple of accepted exception types. Other
            exceptions are absorbed but reported as a failure. Types named
            here are absorbed even when the catch policy would let them through
            (e.g. SystemExit under CatchPolicy.EXCEPTION).
        sink: Failure sink. Defaults to the ambient sink.
        message: Failure message replacing the default.
        stacklevel: Which caller frame to report as the failure location;
            1 is the direct caller of assert_raises.

    Returns:
        Ok(exception) when the assertion holds, Err(AssertionFailureError)
        when it was reported as failed.

    Example:
        ```python
        assert_raises(lambda: {}['missing'])
        # Ok(KeyError('missing'))

        assert_raises(lambda: None)
        # Err(AssertionFailureError('expected exception was not raised (test_x.py:12 in test_x)'))
        ```
    """
    config = get_config()
    text: str | None = None
    raised: BaseException | None = None

    if not callable(work):
        text = f'{message or DEFAULT_MESSAGE}: work is not callable ({work!r})'
    else:
        try:
            work()
        except _captured(config.catch.base, exceptions) as exc:
            raised = exc
            text = _mismatch(exc, exceptions, message)
        else:
            text = message or DEFAULT_MESSAGE

    if text is None and raised is not None:
        return Ok(raised)

    location = caller_location(stacklevel) if config.capture_location else None
    return Err(_report(text or DEFAULT_MESSAGE, sink, location, raised))


class ExpectRaises:
    """Context manager form of assert_raises for an inline block.

    The block's exception is absorbed and the outcome is available as
    `.outcome` after the block exits.
    """

    def __init__(
        self,
        exceptions: tuple[type[BaseException], ...] | None = None,
        sink: FailureSink | None = None,
        message: str | None = None,
    ) -> None:
        self.exceptions = exceptions
        self.sink = sink
        self.message = message
        self.outcome: Outcome | None = None

    def __enter__(self) -> Self:
        self.outcome = None
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        config = get_config()
        if exc is not None and not isinstance(exc, _captured(config.catch.base, self.exceptions)):
            return False

        text = (self.message or DEFAULT_MESSAGE) if exc is None else _mismatch(exc, self.exceptions, self.message)
        if text is None and exc is not None:
            self.outcome = Ok(exc)
            return True

        location = caller_location(1) if config.capture_location else None
        self.outcome = Err(_report(text or DEFAULT_MESSAGE, self.sink, location, exc))
        return True


def expect_raises(
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    sink: FailureSink | None = None,
    message: str | None = None,
) -> ExpectRaises:
    """Assert that a `with` block raises.

    Example:
        ```python
        with expect_raises(exceptions=(KeyError,)) as check:
            {}['missing']
        check.outcome
        # Ok(KeyError('missing'))
        ```
    """
    return ExpectRaises(exceptions, sink, message)
