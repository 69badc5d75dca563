"""Reporting channels for exception assertions.

A reporter receives the outcome of each check and aborts the current test
when a check fails.  ``fail`` must never return: the evaluation routine
relies on it to short-circuit the remaining checks.
"""

from __future__ import annotations

from typing import Any, NoReturn, Protocol

import pytest

# Names of the checks performed while evaluating a block.
NO_EXCEPTION = "no_exception"
EXCEPTION_TYPE = "exception_type"
EXCEPTION_MESSAGE = "exception_message"
VALIDATOR = "validator"
VALIDATOR_ERROR = "validator_error"

CHECKS = (NO_EXCEPTION, EXCEPTION_TYPE, EXCEPTION_MESSAGE, VALIDATOR, VALIDATOR_ERROR)


class Reporter(Protocol):
    """The test-reporting facility used by ``ExceptionAssert``."""

    def is_true(self, condition: bool, message: str, *, check: str = ...) -> None:
        ...

    def are_equal(
        self, expected: Any, actual: Any, message: str, *, check: str = ...
    ) -> None:
        ...

    def fail(self, message: str, *, check: str = ...) -> NoReturn:
        ...


class ExpectationFailure(AssertionError):
    """A block did not raise what the test required."""

    def __init__(self, message: str, check: str = "fail") -> None:
        super().__init__(message)
        self.check: str = check


class ValidatorFailure(ExpectationFailure):
    """The validator itself raised while inspecting the exception."""


class AssertionReporter:
    """Report failures by raising ``ExpectationFailure``.

    Works under any runner that treats ``AssertionError`` as a test
    failure (pytest, unittest, plain scripts).
    """

    def is_true(self, condition: bool, message: str, *, check: str = "is_true") -> None:
        __tracebackhide__ = True
        if not condition:
            self.fail(message, check=check)

    def are_equal(
        self, expected: Any, actual: Any, message: str, *, check: str = "are_equal"
    ) -> None:
        __tracebackhide__ = True
        if expected != actual:
            self.fail(message, check=check)

    def fail(self, message: str, *, check: str = "fail") -> NoReturn:
        __tracebackhide__ = True
        if check == VALIDATOR_ERROR:
            raise ValidatorFailure(message, check)
        raise ExpectationFailure(message, check)


class PytestReporter:
    """Report failures through ``pytest.fail``."""

    def is_true(self, condition: bool, message: str, *, check: str = "is_true") -> None:
        __tracebackhide__ = True
        if not condition:
            self.fail(message, check=check)

    def are_equal(
        self, expected: Any, actual: Any, message: str, *, check: str = "are_equal"
    ) -> None:
        __tracebackhide__ = True
        if expected != actual:
            self.fail(message, check=check)

    def fail(self, message: str, *, check: str = "fail") -> NoReturn:
        __tracebackhide__ = True
        pytest.fail(f"[{check}] {message}")
