"""Result type: a computation that either succeeded with a value or failed with an error.

A ``Result`` is always exactly one of two immutable variants:

- ``Success(value)``: the computation produced ``value`` (never ``None``).
- ``Failure(error)``: the computation raised ``error`` (an ``Exception``).

Combinators on ``Success`` run the supplied callback; combinators on
``Failure`` short-circuit and return the same instance without calling it.
Errors raised by callbacks are captured as a new ``Failure`` rather than
propagated, so a chain of fallible steps needs no ``try``/``except``:

    dividend = Result.to(lambda: int(a))
    divisor = Result.to(lambda: int(b))
    quotient = dividend.flat_map(lambda x: divisor.map(lambda y: x // y))
    quotient.or_else(-1)

Only ``get()`` (which raises ``ResultUnwrapError``), ``for_each()`` and
``or_else_call()`` let exceptions reach the caller.
"""

from __future__ import annotations

import abc
import dataclasses
import logging
import typing

from trypy._validation import _require
from trypy.config import resolve_config
from trypy.errors import (
    NoSuchElementError,
    ResultUnwrapError,
    UnsupportedOperationError,
    _walk_exception_chain,
)

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    from trypy.functions import ThrowingFunction, ThrowingPredicate, ThrowingSupplier

log = logging.getLogger(__name__)


def _capture[T](exc: Exception, operation: str) -> Failure[T]:
    """Wrap an error raised by a callback, logging it when configured to."""
    config = resolve_config()
    if config.log_captured:
        log.log(
            config.log_level,
            "%s captured %s: %s",
            operation,
            type(exc).__name__,
            exc,
        )
    return Failure(exc)


def _expect_result(obj: object, operation: str) -> Result[typing.Any]:
    if not isinstance(obj, Result):
        raise TypeError(
            f"{operation} callback must return a Result, got {type(obj).__name__}"
        )
    return obj


class Result[T](abc.ABC):
    """Either a ``Success`` holding a value or a ``Failure`` holding an error."""

    __slots__ = ()

    @staticmethod
    def to[U](producer: ThrowingSupplier[U]) -> Result[U]:
        """Invoke ``producer`` and wrap its outcome.

        Returns ``Success`` with the produced value, or ``Failure`` with the
        ``Exception`` it raised. A producer returning ``None`` yields a
        ``Failure`` holding a ``PreconditionError``.
        """
        try:
            return Success(producer())
        except Exception as exc:
            return _capture(exc, "to")

    @abc.abstractmethod
    def failed(self) -> Result[Exception]:
        """Return the held error as a success value.

        ``Failure(e)`` gives ``Success(e)``; ``Success`` gives a ``Success``
        holding an ``UnsupportedOperationError`` to flag the misuse.
        """

    @abc.abstractmethod
    def get(self) -> T:
        """Return the held value, or raise ``ResultUnwrapError`` chained to the error."""

    @abc.abstractmethod
    def or_else(self, default: T) -> T:
        """Return the held value, or ``default`` on failure."""

    @abc.abstractmethod
    def or_else_call(self, supplier: Callable[[], T]) -> T:
        """Return the held value, or ``supplier()`` computed only on failure.

        Errors raised by ``supplier`` propagate.
        """

    @abc.abstractmethod
    def or_else_try(self, alternative: ThrowingSupplier[Result[T]]) -> Result[T]:
        """Return ``self`` on success, otherwise the ``Result`` from ``alternative``."""

    @abc.abstractmethod
    def is_success(self) -> bool: ...

    @abc.abstractmethod
    def is_failure(self) -> bool: ...

    @abc.abstractmethod
    def to_optional(self) -> T | None:
        """Return the held value, or ``None`` on failure."""

    @abc.abstractmethod
    def transform[U](
        self,
        on_success: ThrowingFunction[T, Result[U]],
        on_failure: ThrowingFunction[Exception, Result[U]],
    ) -> Result[U]:
        """Fold both variants into a new ``Result``.

        Calls ``on_success(value)`` or ``on_failure(error)``. An error raised
        by either callback is returned as a new ``Failure``.
        """

    @abc.abstractmethod
    def filter(self, predicate: ThrowingPredicate[T]) -> Result[T]:
        """Keep a success only when ``predicate`` holds for its value.

        A rejected value becomes ``Failure(NoSuchElementError)``.
        """

    @abc.abstractmethod
    def flat_map[U](self, mapper: ThrowingFunction[T, Result[U]]) -> Result[U]:
        """Chain a step that itself returns a ``Result``."""

    @abc.abstractmethod
    def flatten(self) -> Result[typing.Any]:
        """Unwrap one level of ``Result[Result[U]]``."""

    @abc.abstractmethod
    def for_each(self, action: Callable[[T], object]) -> None:
        """Run ``action`` on the held value for its side effects only.

        Errors raised by ``action`` propagate.
        """

    @abc.abstractmethod
    def map[U](self, mapper: ThrowingFunction[T, U]) -> Result[U]:
        """Apply ``mapper`` to the held value, capturing any error it raises."""

    @abc.abstractmethod
    def recover(self, rescue: ThrowingFunction[Exception, T]) -> Result[T]:
        """Turn a failure back into a success using ``rescue(error)``."""

    @abc.abstractmethod
    def recover_with(
        self, rescue: ThrowingFunction[Exception, Result[T]]
    ) -> Result[T]:
        """Replace a failure with the ``Result`` returned by ``rescue(error)``."""

    @abc.abstractmethod
    def caused_by(self, *exc_types: type[BaseException]) -> bool:
        """Return True if the held error, or any error it chains to, matches ``exc_types``."""


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T](Result[T]):
    """A computation that produced ``value``."""

    value: T

    def __post_init__(self) -> None:
        _require(
            condition=self.value is not None,
            message="Success must be initialized with a non-None value",
            field_name="value",
        )

    @classmethod
    def of(cls, value: T) -> Success[T]:
        return cls(value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    def failed(self) -> Result[Exception]:
        return Success(UnsupportedOperationError("Success.failed"))

    def get(self) -> T:
        return self.value

    def or_else(self, default: T) -> T:
        return self.value

    def or_else_call(self, supplier: Callable[[], T]) -> T:
        return self.value

    def or_else_try(self, alternative: ThrowingSupplier[Result[T]]) -> Result[T]:
        return self

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def to_optional(self) -> T | None:
        return self.value

    def transform[U](
        self,
        on_success: ThrowingFunction[T, Result[U]],
        on_failure: ThrowingFunction[Exception, Result[U]],
    ) -> Result[U]:
        try:
            return _expect_result(on_success(self.value), "transform")
        except Exception as exc:
            return _capture(exc, "transform")

    def filter(self, predicate: ThrowingPredicate[T]) -> Result[T]:
        try:
            if predicate(self.value):
                return self
        except Exception as exc:
            return _capture(exc, "filter")
        shown = resolve_config().redact(self.value)
        return Failure(
            NoSuchElementError(f"Predicate does not hold for {shown}", value=self.value)
        )

    def flat_map[U](self, mapper: ThrowingFunction[T, Result[U]]) -> Result[U]:
        try:
            return _expect_result(mapper(self.value), "flat_map")
        except Exception as exc:
            return _capture(exc, "flat_map")

    def flatten(self) -> Result[typing.Any]:
        if isinstance(self.value, Result):
            return self.value
        shown = resolve_config().redact(self.value)
        return Failure(
            UnsupportedOperationError(f"{shown} is not an instance of Result")
        )

    def for_each(self, action: Callable[[T], object]) -> None:
        action(self.value)

    def map[U](self, mapper: ThrowingFunction[T, U]) -> Result[U]:
        try:
            return Success(mapper(self.value))
        except Exception as exc:
            return _capture(exc, "map")

    def recover(self, rescue: ThrowingFunction[Exception, T]) -> Result[T]:
        return self

    def recover_with(
        self, rescue: ThrowingFunction[Exception, Result[T]]
    ) -> Result[T]:
        return self

    def caused_by(self, *exc_types: type[BaseException]) -> bool:
        return False


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T](Result[T]):
    """A computation that raised ``error``."""

    error: Exception

    def __post_init__(self) -> None:
        _require(
            condition=self.error is not None,
            message="Failure must be initialized with a non-None error",
            field_name="error",
        )
        _require(
            condition=isinstance(self.error, Exception),
            message=f"expected an Exception instance, got {type(self.error).__name__}",
            field_name="error",
        )

    @classmethod
    def of(cls, error: Exception) -> Failure[T]:
        return cls(error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"

    def failed(self) -> Result[Exception]:
        return Success(self.error)

    def get(self) -> T:
        raise ResultUnwrapError(self.error) from self.error

    def or_else(self, default: T) -> T:
        return default

    def or_else_call(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_else_try(self, alternative: ThrowingSupplier[Result[T]]) -> Result[T]:
        try:
            return _expect_result(alternative(), "or_else_try")
        except Exception as exc:
            return _capture(exc, "or_else_try")

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def to_optional(self) -> T | None:
        return None

    def transform[U](
        self,
        on_success: ThrowingFunction[T, Result[U]],
        on_failure: ThrowingFunction[Exception, Result[U]],
    ) -> Result[U]:
        try:
            return _expect_result(on_failure(self.error), "transform")
        except Exception as exc:
            return _capture(exc, "transform")

    def filter(self, predicate: ThrowingPredicate[T]) -> Result[T]:
        return self

    def flat_map[U](self, mapper: ThrowingFunction[T, Result[U]]) -> Result[U]:
        return typing.cast("Result[U]", self)

    def flatten(self) -> Result[typing.Any]:
        return self

    def for_each(self, action: Callable[[T], object]) -> None:
        return None

    def map[U](self, mapper: ThrowingFunction[T, U]) -> Result[U]:
        return typing.cast("Result[U]", self)

    def recover(self, rescue: ThrowingFunction[Exception, T]) -> Result[T]:
        try:
            return Success(rescue(self.error))
        except Exception as exc:
            return _capture(exc, "recover")

    def recover_with(
        self, rescue: ThrowingFunction[Exception, Result[T]]
    ) -> Result[T]:
        try:
            return _expect_result(rescue(self.error), "recover_with")
        except Exception as exc:
            return _capture(exc, "recover_with")

    def caused_by(self, *exc_types: type[BaseException]) -> bool:
        return any(
            isinstance(err, exc_types) for err in _walk_exception_chain(self.error)
        )
