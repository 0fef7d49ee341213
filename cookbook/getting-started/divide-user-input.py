#!/usr/bin/env python3
"""Recipe: Divide two user-supplied integers without a single try/except.

When you need to: Combine several fallible steps (parsing, arithmetic) and
report the first thing that went wrong.

What you'll learn:
- Capture a fallible call with ``Result.to``
- Chain dependent results with ``flat_map`` and ``map``
- Inspect the captured error with ``failed()``

Examples:
- python -m cookbook getting-started/divide-user-input --dividend 100 --divisor 5
- python -m cookbook getting-started/divide-user-input   (interactive)
"""

from __future__ import annotations

import argparse

from cookbook.utils.presentation import (
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from trypy import Result


def read_int(prompt: str, preset: str | None) -> Result[int]:
    """Parse ``preset`` when given, otherwise ask on stdin."""
    if preset is not None:
        return Result.to(lambda: int(preset))
    return Result.to(lambda: int(input(f"{prompt}: ")))


def divide(
    dividend: str | None, divisor: str | None
) -> tuple[Result[int], Result[int], Result[int]]:
    top = read_int("Enter an integer that you'd like to divide", dividend)
    bottom = read_int("Enter an integer that you'd like to divide by", divisor)
    return top, bottom, top.flat_map(lambda x: bottom.map(lambda y: int(x / y)))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--dividend", default=None, help="Skip the dividend prompt")
    parser.add_argument("--divisor", default=None, help="Skip the divisor prompt")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=3,
        help="How many times to ask again after a failure (interactive mode)",
    )
    args = parser.parse_args()

    print_header("Divide user input")
    interactive = args.dividend is None or args.divisor is None
    attempts = max(1, args.max_attempts) if interactive else 1

    for attempt in range(1, attempts + 1):
        top, bottom, quotient = divide(args.dividend, args.divisor)
        if quotient.is_success():
            label = f"Result of {top.get()}/{bottom.get()} is"
            print_kv_rows([(label, quotient.get())])
            return

        print_section(f"Attempt {attempt} failed")
        print_kv_rows(
            [
                ("Reason", "division by zero or not an integer"),
                ("Info from the error", quotient.failed().get()),
            ]
        )

    print_learning_hints(
        [
            "Both inputs are parsed even if the first one fails.",
            "flat_map stops at the first error.",
            "Use quotient.or_else(default) when a fallback value is good enough.",
        ]
    )
    raise SystemExit(1)


if __name__ == "__main__":
    main()
