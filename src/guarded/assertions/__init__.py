"""Assertion utilities: assert_raises and expect_raises."""

from guarded.assertions.raises import DEFAULT_MESSAGE, ExpectRaises, assert_raises, expect_raises

__all__ = [
    'DEFAULT_MESSAGE',
    'ExpectRaises',
    'assert_raises',
    'expect_raises',
]
