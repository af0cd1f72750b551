"""Rust-like Result for assertion outcomes.

`assert_raises` reports its outcome as a Result: `Ok(exc)` holds the exception
the unit of work raised, `Err(failure)` holds the assertion failure that was
reported to the sink.

Example:
    ```python
    from guarded import assert_raises

    outcome = assert_raises(lambda: int('x'))
    print(outcome)  # Ok(ValueError("invalid literal for int() with base 10: 'x'"))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ['Err', 'Ok', 'Result']


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Represents a successful computation containing a value of type T.

    Attributes:
        value: The successful result value.
    """

    value: T
    __match_args__ = ('value',)

    def is_ok(self) -> bool:
        """Return True, indicating this is a successful result."""
        return True

    def is_err(self) -> bool:
        """Return False, indicating this is not an error result."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the value using a function.

        Args:
            f: A callable that takes the value and returns a new value of type U.

        Returns:
            Ok[U]: A new Ok containing the transformed value.
        """
        return Ok(f(self.value))

    def unwrap(self) -> T:
        """Unwrap the value.

        Returns:
            T: The contained value.
        """
        return self.value

    def unwrap_err(self) -> BaseException:
        """Unwrap the error (panics for Ok).

        Raises:
            AssertionError: Always raised for Ok instances.
        """
        raise AssertionError(f'called unwrap_err() on Ok({self.value!r})')

    def ok(self) -> T | None:
        """Convert to an optional value."""
        return self.value

    def err(self) -> BaseException | None:
        """Convert to an optional error (None for Ok)."""
        return None

    def __repr__(self) -> str:
        """Return a string representation of the Ok instance."""
        return f'Ok({self.value!r})'


@dataclass(slots=True, frozen=True)
class Err[E: BaseException]:
    """Represents a failed computation containing an error of type E.

    Attributes:
        error: The exception describing the failure.
    """

    error: E
    __match_args__ = ('error',)

    def is_ok(self) -> bool:
        """Return False, indicating this is not a successful result."""
        return False

    def is_err(self) -> bool:
        """Return True, indicating this is an error result."""
        return True

    def map[U](self, f: Callable[[object], U]) -> Err[E]:
        """Transform the value (no-op for Err)."""
        return self

    def unwrap(self) -> object:
        """Unwrap the value (raises the error for Err).

        Raises:
            E: Always raises the contained error.
        """
        raise self.error

    def unwrap_err(self) -> E:
        """Unwrap the error.

        Returns:
            E: The contained error.
        """
        return self.error

    def ok(self) -> object | None:
        """Convert to an optional value (None for Err)."""
        return None

    def err(self) -> E | None:
        """Convert to an optional error."""
        return self.error

    def __repr__(self) -> str:
        """Return a string representation of the Err instance."""
        return f'Err({self.error!r})'


type Result[T, E: BaseException] = Ok[T] | Err[E]
