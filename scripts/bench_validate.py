#!/usr/bin/env python3
"""Сравнение скорости разбора адресов с проверкой одной регуляркой."""

from __future__ import annotations

import argparse
import re
import timeit
from typing import Tuple

from emailaddress.modules.address import validate

# практичная проверка одной регуляркой, с ней сравнивается разбор
PRACTICAL_EMAIL_REGEX = re.compile(
    r"^[A-Z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?"
    r"(?:\.[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?)*$",
    re.IGNORECASE,
)

SAMPLES: Tuple[Tuple[str, bool], ...] = (
    ("test@test.net", True),
    ("te#!sdt@test.net", True),
    ("test+test1@test.net", True),
    ("(hello)test@test.net", True),
    ("test(hello)@test.net", True),
    ('"display"@helloworld.net', True),
    ("we..johnny@test.net", False),
)


def bench_parser(address: str, number: int) -> float:
    return timeit.timeit(lambda: validate(address), number=number)


def bench_regex(address: str, number: int) -> float:
    return timeit.timeit(lambda: PRACTICAL_EMAIL_REGEX.match(address), number=number)


def main() -> None:
    parser = argparse.ArgumentParser(description="Бенчмарк проверки адресов.")
    parser.add_argument("--number", type=int, default=100_000, help="Количество повторов на адрес")
    args = parser.parse_args()

    print(f"{'address':<28} {'expected':>8} {'parser us':>10} {'regex us':>10}")
    for address, expected in SAMPLES:
        valid, _ = validate(address)
        if valid != expected:
            print(f"[warn] {address}: expected {expected}, got {valid}")
        parser_us = bench_parser(address, args.number) / args.number * 1e6
        regex_us = bench_regex(address, args.number) / args.number * 1e6
        print(f"{address:<28} {str(expected):>8} {parser_us:>10.2f} {regex_us:>10.2f}")


if __name__ == "__main__":
    main()
