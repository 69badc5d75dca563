"""Expectations about the exception a block of code should raise.

An ``ErrorExpectation`` bundles the three optional constraints a caller can
place on a raised exception: its kind, its exact message, and a custom
validator.  Each field defaults to ``None`` which means "no constraint", so
every public entry point can share a single evaluation routine.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from typing import Any, Callable, Union

ExceptionKind = Union[type[BaseException], tuple[type[BaseException], ...]]
Validator = Callable[[Any], Any]

# Formatting styles for the "Actual Exception Details" part of a failure.
DETAIL_STYLES = frozenset({"traceback", "repr"})


def _validate_kind(kind: ExceptionKind | None) -> None:
    """Raise ``TypeError`` unless *kind* is usable with ``isinstance``."""
    if kind is None:
        return
    kinds = kind if isinstance(kind, tuple) else (kind,)
    if not kinds:
        raise TypeError("expected exception kind must not be an empty tuple")
    for k in kinds:
        if not (isinstance(k, type) and issubclass(k, BaseException)):
            raise TypeError(
                "expected exception kind must be an exception class or a "
                f"tuple of exception classes, got {k!r}"
            )


def type_name(cls: type) -> str:
    """Return a readable name for *cls*, module-qualified unless builtin."""
    module = getattr(cls, "__module__", None)
    if module in (None, "builtins"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def describe_kind(kind: ExceptionKind | None) -> str:
    """Return the name used for *kind* in failure messages."""
    if kind is None:
        return "Exception"
    if isinstance(kind, tuple):
        return "(" + ", ".join(type_name(k) for k in kind) + ")"
    return type_name(kind)


def format_details(
    error: BaseException,
    style: str = "traceback",
    max_length: int | None = None,
) -> str:
    """Format *error* for the diagnostic part of a failure message.

    Args:
        error: The exception to describe.
        style: ``traceback`` renders the full formatted traceback (type,
            message and stack); ``repr`` renders ``repr(error)`` only.
        max_length: Truncate the result to this many characters, appending
            ``...`` when truncated.  ``None`` means no limit.

    Returns:
        The formatted details, without a trailing newline.
    """
    if style not in DETAIL_STYLES:
        raise ValueError(f"Unknown details style: {style!r}")
    if style == "repr":
        text = repr(error)
    else:
        text = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        ).rstrip("\n")
    if max_length is not None and len(text) > max_length:
        text = text[:max_length] + "..."
    return text


def callable_name(func: Callable[..., Any]) -> str:
    """Return a readable name for a validator callable."""
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    return name if name else repr(func)


@dataclass(frozen=True)
class ErrorExpectation:
    """Constraints a raised exception must satisfy.

    Checks are applied in a fixed order: kind, then message, then
    validator.  A kind mismatch short-circuits the later checks.
    """

    kind: ExceptionKind | None = None
    message: str | None = None
    validator: Validator | None = None

    def __post_init__(self) -> None:
        _validate_kind(self.kind)
        if self.message is not None and not isinstance(self.message, str):
            raise TypeError(
                f"expected message must be a string, got {type(self.message).__name__}"
            )
        if self.validator is not None and not callable(self.validator):
            raise TypeError(f"validator must be callable, got {self.validator!r}")

    @property
    def kind_name(self) -> str:
        return describe_kind(self.kind)

    def catches(self, error: BaseException) -> bool:
        """Whether *error* is captured for checking rather than propagated.

        Every ``Exception`` is captured.  Exceptions outside that hierarchy
        (``KeyboardInterrupt``, ``SystemExit``, test framework outcomes) are
        only captured when the expected kind names them.
        """
        if isinstance(error, Exception):
            return True
        return self.kind is not None and isinstance(error, self.kind)

    def matches_kind(self, error: BaseException) -> bool:
        if self.kind is None:
            return isinstance(error, Exception)
        return isinstance(error, self.kind)
