"""Exception hierarchy for trypy.

Every error the library synthesizes on its own derives from ``TrypyError``.
Errors raised by user callbacks are never re-typed; they are held verbatim by
``Failure`` and only wrapped when ``Result.get()`` is called on a failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


class TrypyError(Exception):
    """Base exception for all trypy errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ResultUnwrapError(TrypyError):
    """``get()`` was called on a ``Failure``.

    The captured error is available both as ``error`` and as ``__cause__``.
    """

    def __init__(self, error: Exception) -> None:
        super().__init__(
            f"get() called on a Failure holding {type(error).__name__}: {error}",
            hint="Use or_else(), to_optional() or transform() for a non-raising extraction.",
        )
        self.error = error


class NoSuchElementError(TrypyError, LookupError):
    """A ``filter`` predicate rejected the held value."""

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class UnsupportedOperationError(TrypyError):
    """An operation was applied to a result that cannot support it."""


class PreconditionError(TrypyError, ValueError):
    """A ``Success`` or ``Failure`` was built with an invalid payload."""


class ConfigurationError(TrypyError):
    """Configuration validation or resolution failed."""


def _walk_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__``/``__context__`` chain, with cycle protection."""
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)
        context = cur.__context__
        if isinstance(context, BaseException):
            stack.append(context)
