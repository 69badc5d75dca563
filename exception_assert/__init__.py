"""Assertions that a block of code raises an expected exception."""

from exception_assert.asserts import (
    ErrorInfo,
    ExceptionAssert,
    expect_error,
    require_any_error,
    require_error_of_kind,
    require_error_satisfying,
    require_error_with_message,
    throws,
)
from exception_assert.config import AssertConfig
from exception_assert.context import Context, CriticalAssertionError, test_run
from exception_assert.expectation import ErrorExpectation
from exception_assert.reporting import (
    AssertionReporter,
    ExpectationFailure,
    PytestReporter,
    Reporter,
    ValidatorFailure,
)

__all__ = [
    "AssertConfig",
    "AssertionReporter",
    "Context",
    "CriticalAssertionError",
    "ErrorExpectation",
    "ErrorInfo",
    "ExceptionAssert",
    "ExpectationFailure",
    "PytestReporter",
    "Reporter",
    "ValidatorFailure",
    "expect_error",
    "require_any_error",
    "require_error_of_kind",
    "require_error_satisfying",
    "require_error_with_message",
    "test_run",
    "throws",
]
