"""Helpers for building and collecting ``Result`` values."""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, ParamSpec, cast

from trypy.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

P = ParamSpec("P")


def safe[T](fn: Callable[P, T], /) -> Callable[P, Result[T]]:
    """Wrap a function so that it returns a ``Result`` instead of raising.

    Example:
        @safe
        def parse(text: str) -> int:
            return int(text)

        parse("42")   # Success(42)
        parse("pig")  # Failure(ValueError(...))
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
        return Result.to(lambda: fn(*args, **kwargs))

    return wrapper


def sequence[T](results: Iterable[Result[T]]) -> Result[list[T]]:
    """Collect successes into one ``Success(list)``, or return the first ``Failure``.

    The iterable is consumed only up to the first failure.
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return cast("Result[list[T]]", result)
        values.append(result.get())
    return Success(values)


def partition[T](results: Iterable[Result[T]]) -> tuple[list[T], list[Exception]]:
    """Split results into ``(values, errors)``, preserving order within each list."""
    values: list[T] = []
    errors: list[Exception] = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure(error):
                errors.append(error)
    return values, errors
