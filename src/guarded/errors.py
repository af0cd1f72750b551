"""Error types: dual struct+exception for assertion failures, and named library errors."""

from __future__ import annotations

from enum import Enum
from typing import Any

import msgspec

__all__ = [
    'AssertionFailure',
    'AssertionFailureError',
    'ErrorName',
    'LibraryError',
    'SourceLocation',
]


class SourceLocation(msgspec.Struct, frozen=True, gc=False):
    """Call site of an assertion."""

    filename: str
    lineno: int
    function: str | None = None

    def __str__(self) -> str:
        if self.function:
            return f'{self.filename}:{self.lineno} in {self.function}'
        return f'{self.filename}:{self.lineno}'


# --- Assertion Failures ---


class AssertionFailure(msgspec.Struct, frozen=True):
    """Assertion did not hold - struct variant for sinks and Result[T, AssertionFailure]."""

    message: str
    location: SourceLocation | None = None

    def to_exception(self) -> AssertionFailureError:
        """Convert to exception for raise-based code."""
        return AssertionFailureError(self.message, self.location)


class AssertionFailureError(AssertionError):
    """Assertion did not hold - exception variant."""

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        self.message = message
        self.location = location
        if location is not None:
            super().__init__(f'{message} ({location})')
        else:
            super().__init__(message)

    def to_struct(self) -> AssertionFailure:
        """Convert to struct for sink/Result-based code."""
        return AssertionFailure(self.message, self.location)


# --- Library Errors ---


class ErrorName(Enum):
    """Names of the runtime errors raised by the client library."""

    INVALID_TYPE = 'InvalidType'
    INCONSISTENCY = 'Inconsistency'
    NOT_FOUND = 'NotFound'


class LibraryError(Exception):
    """Named runtime error raised by the client library.

    Tests use these as the canonical "unit of work raised" signal when
    exercising `assert_raises` against library behaviour.
    """

    def __init__(
        self,
        name: ErrorName | str,
        reason: str | None = None,
        user_info: dict[str, Any] | None = None,
    ) -> None:
        self.name = name.value if isinstance(name, ErrorName) else name
        self.reason = reason
        self.user_info = dict(user_info) if user_info else {}
        msg = self.name
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    @classmethod
    def raise_(
        cls,
        name: ErrorName | str,
        reason: str | None = None,
        user_info: dict[str, Any] | None = None,
    ) -> None:
        """Raise a LibraryError with the given name.

        Args:
            name: An ErrorName member or a free-form error name.
            reason: Optional human-readable reason.
            user_info: Optional extra context carried on the exception.

        Raises:
            LibraryError: Always.

        Example:
            ```python
            LibraryError.raise_(ErrorName.NOT_FOUND, 'no such object')
            # LibraryError: NotFound: no such object
            ```
        """
        raise cls(name, reason, user_info)
