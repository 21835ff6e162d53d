"""Интерактивная проверка адресов электронной почты."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from emailaddress.config import Settings, configure_logging, get_settings
from emailaddress.modules.address import validate

LOGGER = logging.getLogger("emailaddress.main")

BANNER = """
##########################################################
please type in email address you would like to validate....
##########################################################
"""


def report(address: str, settings: Settings, stream: Optional[TextIO] = None) -> bool:
    """Печатает вердикт по адресу и возвращает результат проверки."""
    if stream is None:
        stream = sys.stdout
    valid, error = validate(address)
    if error is not None and settings.cli.show_reason:
        print(error, file=stream)
    if valid:
        print(f"{address} is a valid email address", file=stream)
    else:
        print(f"{address} is invalid email address", file=stream)
    return valid


def run_interactive(
    lines: Iterable[str],
    settings: Settings,
    stream: Optional[TextIO] = None,
) -> bool:
    """Проверяет адреса построчно до конца ввода, пустые строки пропускаются."""
    all_valid = True
    checked = 0
    for line in lines:
        address = line.strip() if settings.cli.strip_input else line.rstrip("\r\n")
        if not address:
            continue
        checked += 1
        all_valid = report(address, settings, stream) and all_valid
    LOGGER.info("Проверено адресов: %s", checked)
    return all_valid


def main(argv: Optional[List[str]] = None) -> int:
    """Проверяет адреса из аргументов или со стандартного ввода."""
    parser = argparse.ArgumentParser(description="Validate e-mail addresses")
    parser.add_argument(
        "addresses",
        nargs="*",
        help="Адреса для проверки; без аргументов адреса читаются со stdin",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Не печатать приглашение в интерактивном режиме",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)

    if args.addresses:
        results = [report(address, settings) for address in args.addresses]
        return 0 if all(results) else 1

    if settings.cli.show_banner and not args.no_banner:
        print(BANNER)
    try:
        all_valid = run_interactive(sys.stdin, settings)
    except KeyboardInterrupt:
        LOGGER.info("Проверка остановлена пользователем.")
        return 1
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
