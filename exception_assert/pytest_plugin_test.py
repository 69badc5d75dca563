"""Tests for the exception_assert pytest fixture."""

from __future__ import annotations

import pytest

from exception_assert.asserts import ExceptionAssert
from exception_assert.reporting import AssertionReporter, ExpectationFailure


class TestExceptionAssertFixture:
    """The fixture is registered by the root conftest."""

    def test_fixture_type(self, exception_assert):
        assert isinstance(exception_assert, ExceptionAssert)

    def test_default_reporter(self, exception_assert):
        assert isinstance(exception_assert.reporter, AssertionReporter)

    def test_fixture_asserts(self, exception_assert):
        err = exception_assert.require_error_with_message(
            lambda: int("x"), ValueError, "invalid literal for int() with base 10: 'x'"
        )
        assert isinstance(err, ValueError)

    def test_fixture_reports_failure(self, exception_assert):
        with pytest.raises(ExpectationFailure):
            exception_assert.require_any_error(lambda: None)
