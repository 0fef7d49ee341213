#!/usr/bin/env python3
"""Recipe: Run a batch of fallible conversions and report every outcome.

When you need to: Process many inputs where some will fail, then either drop
the failures, substitute a placeholder, or stop at the first one.

What you'll learn:
- Turn a raising function into a Result-returning one with ``@safe``
- Drop or count failures with ``partition``
- Render both variants uniformly with ``transform``
- Fail fast over a whole batch with ``sequence``
"""

from __future__ import annotations

import argparse

from cookbook.utils.presentation import (
    describe,
    print_header,
    print_kv_rows,
    print_section,
)
from trypy import Success, partition, safe, sequence

DEFAULT_DENOMINATORS = ["-2", "-1", "0", "1", "2", "3"]


@safe
def divide(numerator: int, denominator: str) -> int:
    return int(numerator / int(denominator))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("denominators", nargs="*", default=DEFAULT_DENOMINATORS)
    parser.add_argument("--numerator", type=int, default=100)
    args = parser.parse_args()

    print_header(f"Dividing {args.numerator} by each input")
    results = [divide(args.numerator, d) for d in args.denominators]

    print_section("Each input")
    pairs = zip(args.denominators, results, strict=True)
    print_kv_rows([(d, describe(r)) for d, r in pairs])

    values, errors = partition(results)
    print_section("Dropping failures")
    print_kv_rows([("values", values), ("failures", len(errors))])

    rendered = [
        r.transform(lambda n: Success(str(n)), lambda _e: Success("n/a")).get()
        for r in results
    ]
    print_section("Substituting failures")
    print_kv_rows([("values", ", ".join(rendered))])

    print_section("All or nothing")
    print_kv_rows([("batch", describe(sequence(results)))])


if __name__ == "__main__":
    main()
