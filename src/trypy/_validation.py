"""Internal validation helpers shared by the result variants and combinators."""

from __future__ import annotations

import typing

from trypy.errors import PreconditionError


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = PreconditionError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_callable(func: typing.Any, field_name: str) -> None:
    _require(
        condition=callable(func),
        message=f"must be callable, got {type(func).__name__}",
        field_name=field_name,
        exc=TypeError,
    )
