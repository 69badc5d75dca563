"""Assertions that a block of code raises an exception.

Every entry point runs the block once, then checks the outcome against an
``ErrorExpectation`` in a fixed order:

1. An exception was raised at all (``no_exception``).
2. It is an instance of the expected kind (``exception_type``).
3. ``str(error)`` equals the expected message (``exception_message``).
4. The validator accepts it (``validator``), without itself raising
   (``validator_error``).

The first failing check is reported and aborts the test; later checks are
never evaluated.  On success the raised exception is returned so that the
test can make further assertions on it.

Usage::

    err = require_error_of_kind(lambda: parse("{"), ParseError)
    assert err.position == 1

    with expect_error(KeyError, message="'missing'") as info:
        lookup["missing"]
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Generator, NoReturn

from exception_assert import reporting
from exception_assert.config import AssertConfig
from exception_assert.context import Context
from exception_assert.expectation import (
    ErrorExpectation,
    ExceptionKind,
    Validator,
    callable_name,
    format_details,
    type_name,
)
from exception_assert.reporting import AssertionReporter, PytestReporter, Reporter

Block = Callable[[], Any]

_REPORTER_FACTORIES: dict[str, Callable[[], Reporter]] = {
    "assert": AssertionReporter,
    "pytest": PytestReporter,
    "context": Context,
}


@dataclass
class ErrorInfo:
    """Holder populated by ``expect_error`` once the ``with`` block exits."""

    expectation: ErrorExpectation
    error: BaseException | None = None


class ExceptionAssert:
    """Runs blocks and reports whether they raised the expected exception."""

    def __init__(
        self,
        reporter: Reporter | None = None,
        config: AssertConfig | None = None,
    ) -> None:
        self.reporter: Reporter = reporter if reporter is not None else AssertionReporter()
        self.config: AssertConfig = config if config is not None else AssertConfig()

    @classmethod
    def from_config(cls, config: AssertConfig) -> ExceptionAssert:
        """Build a helper whose reporter is chosen by ``config.reporter``."""
        return cls(reporter=_REPORTER_FACTORIES[config.reporter](), config=config)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, block: Block, expectation: ErrorExpectation) -> BaseException:
        """Run *block* once and check what it raised against *expectation*.

        Returns:
            The raised exception, if it satisfies every constraint.

        Raises:
            TypeError: If *block* is not callable.
        """
        __tracebackhide__ = True
        if not callable(block):
            raise TypeError(f"block must be a zero-argument callable, got {block!r}")
        try:
            block()
        except BaseException as e:
            if not expectation.catches(e):
                raise
            return self.check(e, expectation)
        self.report_missing(expectation)

    def check(self, error: BaseException, expectation: ErrorExpectation) -> BaseException:
        """Check an already raised *error* against *expectation*."""
        __tracebackhide__ = True
        details = "\n Actual Exception Details: " + self._details(error)

        self.reporter.is_true(
            expectation.matches_kind(error),
            f"Expected exception of type {expectation.kind_name} but type of "
            f"{type_name(type(error))} was raised instead.{details}",
            check=reporting.EXCEPTION_TYPE,
        )

        if expectation.message is not None:
            actual = str(error)
            self.reporter.are_equal(
                expectation.message,
                actual,
                f"Expected exception with a message of '{expectation.message}', "
                f"but exception with message of '{actual}' was raised instead.{details}",
                check=reporting.EXCEPTION_MESSAGE,
            )

        if expectation.validator is not None:
            self._run_validator(error, expectation.validator, details)

        return error

    def report_missing(self, expectation: ErrorExpectation) -> NoReturn:
        """Report that the block finished without raising."""
        __tracebackhide__ = True
        if expectation.kind is None:
            message = "Expected an exception, but no exception was raised."
        else:
            message = (
                f"Expected exception of type {expectation.kind_name}, "
                "but no exception was raised."
            )
        self.reporter.fail(message, check=reporting.NO_EXCEPTION)

    def _run_validator(self, error: BaseException, validator: Validator, details: str) -> None:
        __tracebackhide__ = True
        passed = False
        try:
            passed = bool(validator(error))
        except Exception as exc:
            self.reporter.fail(
                f"Exception {exc!r} occurred during evaluation of validator "
                f"{callable_name(validator)}{details}"
                f"\n Validator Exception Details: {self._details(exc)}",
                check=reporting.VALIDATOR_ERROR,
            )
        self.reporter.is_true(
            passed,
            f"Validator for expected exception failed.{details}",
            check=reporting.VALIDATOR,
        )

    def _details(self, error: BaseException) -> str:
        return format_details(
            error,
            style=self.config.details,
            max_length=self.config.max_details_length,
        )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def throws(
        self,
        block: Block,
        kind: ExceptionKind | None = None,
        *,
        message: str | None = None,
        validator: Validator | None = None,
    ) -> BaseException:
        """Assert that *block* raises, optionally constrained.

        Args:
            block: Zero-argument callable to run.
            kind: Exception class, or tuple of classes, the error must be
                an instance of.  ``None`` accepts any ``Exception``.
            message: Exact expected ``str(error)``.
            validator: Predicate called once with the error; a falsy
                result fails the assertion.

        Returns:
            The raised exception.
        """
        __tracebackhide__ = True
        return self.evaluate(block, ErrorExpectation(kind, message, validator))

    def require_any_error(self, block: Block) -> BaseException:
        __tracebackhide__ = True
        return self.evaluate(block, ErrorExpectation())

    def require_error_of_kind(self, block: Block, kind: ExceptionKind) -> BaseException:
        __tracebackhide__ = True
        return self.evaluate(block, ErrorExpectation(kind=kind))

    def require_error_with_message(
        self, block: Block, kind: ExceptionKind | None, message: str
    ) -> BaseException:
        __tracebackhide__ = True
        return self.evaluate(block, ErrorExpectation(kind=kind, message=message))

    def require_error_satisfying(
        self, block: Block, kind: ExceptionKind | None, validator: Validator
    ) -> BaseException:
        __tracebackhide__ = True
        return self.evaluate(block, ErrorExpectation(kind=kind, validator=validator))

    @contextmanager
    def expect_error(
        self,
        kind: ExceptionKind | None = None,
        *,
        message: str | None = None,
        validator: Validator | None = None,
    ) -> Generator[ErrorInfo, None, None]:
        """Context manager form of ``throws`` for statement blocks."""
        __tracebackhide__ = True
        info = ErrorInfo(ErrorExpectation(kind, message, validator))
        try:
            yield info
        except BaseException as e:
            if not info.expectation.catches(e):
                raise
            info.error = self.check(e, info.expectation)
            return
        self.report_missing(info.expectation)


_default = ExceptionAssert()


def _helper(reporter: Reporter | None) -> ExceptionAssert:
    if reporter is None:
        return _default
    return ExceptionAssert(reporter=reporter, config=_default.config)


def throws(
    block: Block,
    kind: ExceptionKind | None = None,
    *,
    message: str | None = None,
    validator: Validator | None = None,
    reporter: Reporter | None = None,
) -> BaseException:
    """Assert that *block* raises; see ``ExceptionAssert.throws``."""
    __tracebackhide__ = True
    return _helper(reporter).throws(block, kind, message=message, validator=validator)


def require_any_error(block: Block, *, reporter: Reporter | None = None) -> BaseException:
    """Assert that *block* raises any ``Exception`` and return it."""
    __tracebackhide__ = True
    return _helper(reporter).require_any_error(block)


def require_error_of_kind(
    block: Block, kind: ExceptionKind, *, reporter: Reporter | None = None
) -> BaseException:
    """Assert that *block* raises an instance of *kind* and return it."""
    __tracebackhide__ = True
    return _helper(reporter).require_error_of_kind(block, kind)


def require_error_with_message(
    block: Block,
    kind: ExceptionKind | None,
    message: str,
    *,
    reporter: Reporter | None = None,
) -> BaseException:
    """Assert that *block* raises *kind* with exactly *message*."""
    __tracebackhide__ = True
    return _helper(reporter).require_error_with_message(block, kind, message)


def require_error_satisfying(
    block: Block,
    kind: ExceptionKind | None,
    validator: Validator,
    *,
    reporter: Reporter | None = None,
) -> BaseException:
    """Assert that *block* raises *kind* and *validator* accepts it."""
    __tracebackhide__ = True
    return _helper(reporter).require_error_satisfying(block, kind, validator)


def expect_error(
    kind: ExceptionKind | None = None,
    *,
    message: str | None = None,
    validator: Validator | None = None,
    reporter: Reporter | None = None,
) -> Any:
    """Context manager asserting that the ``with`` block raises."""
    return _helper(reporter).expect_error(kind, message=message, validator=validator)
