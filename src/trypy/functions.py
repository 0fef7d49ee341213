"""Callback contracts accepted by ``Result`` combinators.

Any plain callable satisfies these protocols. They exist to document that a
callback *may raise*: the combinators that invoke them capture the raised
``Exception`` as a ``Failure`` instead of letting it escape.
"""

from __future__ import annotations

import typing

from trypy._validation import _require_callable

T_contra = typing.TypeVar("T_contra", contravariant=True)
U_co = typing.TypeVar("U_co", covariant=True)


class ThrowingSupplier(typing.Protocol[U_co]):
    """Zero-argument producer that may raise."""

    def __call__(self) -> U_co: ...


class ThrowingFunction(typing.Protocol[T_contra, U_co]):
    """One-argument transformer that may raise."""

    def __call__(self, value: T_contra, /) -> U_co: ...


class ThrowingPredicate(typing.Protocol[T_contra]):
    """One-argument test that may raise."""

    def __call__(self, value: T_contra, /) -> bool: ...


def both[T](
    first: ThrowingPredicate[T], second: ThrowingPredicate[T]
) -> ThrowingPredicate[T]:
    """Return the short-circuiting logical AND of two predicates.

    ``second`` is not evaluated when ``first`` returns false or raises. Errors
    from either predicate are relayed to the caller.

    Example:
        is_small_even = both(lambda n: n % 2 == 0, lambda n: n < 10)
        Success(4).filter(is_small_even)  # Success(4)
    """
    _require_callable(first, "first")
    _require_callable(second, "second")

    def _both(value: T, /) -> bool:
        return bool(first(value)) and bool(second(value))

    return _both


def either[T](
    first: ThrowingPredicate[T], second: ThrowingPredicate[T]
) -> ThrowingPredicate[T]:
    """Return the short-circuiting logical OR of two predicates.

    ``second`` is not evaluated when ``first`` returns true or raises.
    """
    _require_callable(first, "first")
    _require_callable(second, "second")

    def _either(value: T, /) -> bool:
        return bool(first(value)) or bool(second(value))

    return _either


def negate[T](predicate: ThrowingPredicate[T]) -> ThrowingPredicate[T]:
    """Return the logical negation of ``predicate``."""
    _require_callable(predicate, "predicate")

    def _negate(value: T, /) -> bool:
        return not predicate(value)

    return _negate
