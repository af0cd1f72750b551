"""Tests for the failure_sink pytest fixture."""

from __future__ import annotations

import pytest

CONFTEST = "pytest_plugins = ['guarded.pytest_plugin']\n"


class TestFailureSinkFixture:
    """Runs small test files through pytester."""

    def test_passing_assertions_pass(self, pytester: pytest.Pytester) -> None:
        pytester.makeconftest(CONFTEST)
        pytester.makepyfile(
            """
            from guarded import assert_raises

            def test_raises(failure_sink):
                assert_raises(lambda: 1 / 0)
                assert len(failure_sink) == 0
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)

    def test_failed_assertion_fails_at_teardown(self, pytester: pytest.Pytester) -> None:
        """The test body completes, then teardown reports every recorded failure."""
        pytester.makeconftest(CONFTEST)
        pytester.makepyfile(
            """
            from guarded import assert_raises

            def test_does_not_raise(failure_sink):
                assert_raises(lambda: None)
                assert_raises(lambda: None, message='second check')
                assert len(failure_sink) == 2
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1, errors=1)
        result.stdout.fnmatch_lines(['*2 assertion failure(s)*', '*second check*'])
