"""safe(), sequence() and partition()."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from trypy import Failure, Result, Success, partition, safe, sequence

pytestmark = pytest.mark.unit


@safe
def parse(text: str, *, base: int = 10) -> int:
    """Parse an integer."""
    return int(text, base)


def test_safe_returns_success_for_normal_return() -> None:
    assert parse("42") == Success(42)
    assert parse("ff", base=16) == Success(255)


def test_safe_returns_failure_for_raised_error() -> None:
    result = parse("pig")
    assert isinstance(result, Failure)
    assert isinstance(result.error, ValueError)


def test_safe_preserves_metadata() -> None:
    assert parse.__name__ == "parse"
    assert parse.__doc__ == "Parse an integer."


def test_sequence_collects_all_successes() -> None:
    assert sequence([Success(1), Success(2), Success(3)]) == Success([1, 2, 3])
    assert sequence([]) == Success([])


def test_sequence_returns_first_failure_and_stops_consuming() -> None:
    first = Failure(ValueError("first"))
    consumed: list[int] = []

    def produce() -> Iterator[Result[int]]:
        for item in (Success(1), first, Failure(KeyError("second")), Success(4)):
            consumed.append(1)
            yield item

    assert sequence(produce()) is first
    assert len(consumed) == 2


def test_partition_splits_values_and_errors() -> None:
    zero = ZeroDivisionError("zero")
    results = [Success(1), Failure(zero), Success(2)]

    values, errors = partition(results)

    assert values == [1, 2]
    assert errors == [zero]
