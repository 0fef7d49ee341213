#!/usr/bin/env python3
"""Recipe: List network interfaces, degrading gracefully where the OS says no.

When you need to: Query system facilities that may be unsupported or fail
per item, and still print whatever could be collected.

What you'll learn:
- Default a failed lookup with ``or_else``
- Drop items whose per-item check fails with ``filter`` + ``is_success``
- Keep formatting code free of exception handling
"""

from __future__ import annotations

import argparse
import socket

from cookbook.utils.presentation import print_header, print_kv_rows, print_section
from trypy import Result, Success


def interfaces() -> list[tuple[int, str]]:
    return Result.to(socket.if_nameindex).or_else([])


def ipv4_addresses(host: str) -> list[str]:
    return (
        Result.to(lambda: socket.gethostbyname_ex(host))
        .map(lambda info: sorted(set(info[2])))
        .or_else([])
    )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--skip-loopback",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Hide loopback interfaces such as 'lo'",
    )
    args = parser.parse_args()

    print_header("Network interfaces")
    print("Getting network adapters from system ...")

    rows: list[tuple[str, object]] = []
    for index, name in interfaces():
        keep = Success(name).filter(
            lambda n: not (args.skip_loopback and n.startswith("lo"))
        )
        if keep.is_success():
            rows.append((name, f"index {index}"))
    print_kv_rows(rows or [("interfaces", "none reported")])

    host = Result.to(socket.gethostname).or_else("localhost")
    print_section(f"Addresses for {host}")
    print_kv_rows([("IPv4", ", ".join(ipv4_addresses(host)) or "unresolved")])


if __name__ == "__main__":
    main()
