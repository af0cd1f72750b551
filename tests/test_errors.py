"""Tests for error types."""

from __future__ import annotations

import pytest
from guarded import AssertionFailure, AssertionFailureError, ErrorName, LibraryError, SourceLocation


class TestSourceLocation:
    def test_str_with_function(self) -> None:
        assert str(SourceLocation('test_x.py', 12, 'test_a')) == 'test_x.py:12 in test_a'

    def test_str_without_function(self) -> None:
        assert str(SourceLocation('test_x.py', 12)) == 'test_x.py:12'

    def test_is_frozen(self) -> None:
        location = SourceLocation('test_x.py', 12)
        with pytest.raises(AttributeError):
            location.lineno = 13  # type: ignore[misc]


class TestAssertionFailure:
    """Struct and exception variants convert into each other."""

    def test_to_exception(self) -> None:
        location = SourceLocation('test_x.py', 12)
        error = AssertionFailure('boom', location).to_exception()

        assert isinstance(error, AssertionFailureError)
        assert isinstance(error, AssertionError)
        assert error.message == 'boom'
        assert error.location == location
        assert str(error) == 'boom (test_x.py:12)'

    def test_to_struct(self) -> None:
        assert AssertionFailureError('boom').to_struct() == AssertionFailure('boom')

    def test_message_without_location(self) -> None:
        assert str(AssertionFailureError('boom')) == 'boom'


class TestLibraryError:
    """Tests for named library errors."""

    def test_raise_with_enum_name(self) -> None:
        with pytest.raises(LibraryError, match='^NotFound: no such object$') as exc_info:
            LibraryError.raise_(ErrorName.NOT_FOUND, 'no such object')

        assert exc_info.value.name == 'NotFound'
        assert exc_info.value.reason == 'no such object'

    def test_raise_with_free_form_name(self) -> None:
        with pytest.raises(LibraryError, match='^Custom$'):
            LibraryError.raise_('Custom')

    def test_user_info_is_copied(self) -> None:
        info = {'key': 'value'}
        error = LibraryError(ErrorName.INVALID_TYPE, user_info=info)
        info['key'] = 'changed'

        assert error.user_info == {'key': 'value'}

    def test_user_info_defaults_empty(self) -> None:
        assert LibraryError(ErrorName.INCONSISTENCY).user_info == {}
