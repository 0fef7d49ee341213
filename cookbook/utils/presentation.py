"""Shared output helpers for cookbook recipe terminal presentation.

These helpers aim for:
- scan-friendly sectioning
- compact, consistent key/value rows
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trypy import Success

if TYPE_CHECKING:
    from trypy import Result


def print_header(title: str) -> None:
    """Print the recipe title underlined."""
    print(title)
    print("=" * len(title))


def print_section(title: str) -> None:
    """Print a named section heading."""
    print(f"\n{title}")
    print("-" * len(title))


def print_kv_rows(rows: list[tuple[str, object]]) -> None:
    """Print compact key/value rows using a uniform bullet style."""
    for key, value in rows:
        lines = str(value).splitlines() or [""]
        print(f"- {key}: {lines[0]}")
        for cont in lines[1:]:
            print(f"  {' ' * len(key)}  {cont}")


def describe(result: Result[object]) -> str:
    """Render a result as 'ok: <value>' or 'error: <ErrorType>: <message>'."""
    return result.transform(
        lambda value: Success(f"ok: {value}"),
        lambda error: Success(f"error: {type(error).__name__}: {error}"),
    ).get()


def print_learning_hints(hints: list[str], *, title: str = "Next steps") -> None:
    """Print short coaching bullets that explain what to do next."""
    if not hints:
        return
    print_section(title)
    for hint in hints:
        print(f"- {hint}")

