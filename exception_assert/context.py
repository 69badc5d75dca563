"""Structured test instrumentation for exception assertions.

Provides a ``Context`` reporter that emits a structured [TST] log event for
every check an exception assertion performs, so test logs show which
expectation passed or failed and where it was asserted.
"""

from __future__ import annotations

import contextlib
import json
import os
import sys
from contextlib import contextmanager
from typing import Any, Generator, NoReturn

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_CONTEXTLIB_FILE = os.path.abspath(contextlib.__file__)


def _is_internal(filename: str) -> bool:
    path = os.path.abspath(filename)
    if path == _CONTEXTLIB_FILE:
        return True
    return os.path.dirname(path) == _PACKAGE_DIR and not path.endswith("_test.py")


def tst(event: dict[str, Any]) -> None:
    """Emit a structured test log event with the asserting source location.

    Frames inside this package are skipped so the location points at the
    test code that called the assertion helper.
    """
    frame = sys._getframe(1)
    while frame.f_back is not None and _is_internal(frame.f_code.co_filename):
        frame = frame.f_back
    rel = os.path.relpath(frame.f_code.co_filename)
    event = {**event, "_file": rel, "_line": frame.f_lineno}
    print(f"[TST] {json.dumps(event, default=str)}")


class CriticalAssertionError(Exception):
    def __init__(self, message: str, logged: bool = False) -> None:
        super().__init__(message)
        self.logged: bool = logged


class Context:
    """Reporter that logs each check as a [TST] ``result`` event.

    A failed check is recorded in ``failures`` and aborts the current test
    with ``CriticalAssertionError``.
    """

    def __init__(self) -> None:
        self.failures: list[str] = []

    def assert_that(self, name: str, passed: bool, critical: bool = False, **extra: Any) -> None:
        tst({"type": "result", "name": name, "passed": passed, **extra})
        if not passed:
            self.failures.append(name)
            if critical:
                raise CriticalAssertionError(f"Critical assertion failed: {name}", logged=True)

    def error(self, name: str, message: str, **extra: Any) -> None:
        tst({"type": "error", "name": name, "message": message, **extra})
        self.failures.append(name)
        raise CriticalAssertionError(f"Error: {name}: {message}", logged=True)

    def is_true(self, condition: bool, message: str, *, check: str = "is_true") -> None:
        passed = bool(condition)
        extra = {} if passed else {"message": message}
        self.assert_that(check, passed, critical=True, **extra)

    def are_equal(
        self, expected: Any, actual: Any, message: str, *, check: str = "are_equal"
    ) -> None:
        passed = expected == actual
        extra: dict[str, Any] = {"expected": expected, "actual": actual}
        if not passed:
            extra["message"] = message
        self.assert_that(check, passed, critical=True, **extra)

    def fail(self, message: str, *, check: str = "fail") -> NoReturn:
        tst({"type": "result", "name": check, "passed": False, "message": message})
        self.failures.append(check)
        raise CriticalAssertionError(f"{check}: {message}", logged=True)

    def exit_code(self) -> int:
        return 1 if self.failures else 0


@contextmanager
def test_run() -> Generator[Context, None, None]:
    ctx = Context()
    try:
        yield ctx
    except CriticalAssertionError:
        pass
