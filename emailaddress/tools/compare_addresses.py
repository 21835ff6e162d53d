"""CLI для сравнения двух адресов электронной почты."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from emailaddress.config import configure_logging, get_settings
from emailaddress.modules.compare import equals

LOGGER = logging.getLogger("emailaddress.tools.compare_addresses")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two e-mail addresses ignoring comments, tags and case.",
    )
    parser.add_argument("first", help="Первый адрес")
    parser.add_argument("second", help="Второй адрес")
    args = parser.parse_args(argv)

    configure_logging(get_settings())
    same = equals(args.first, args.second)
    LOGGER.debug("Сравнение %r и %r: %s", args.first, args.second, same)
    print("equal" if same else "different")
    return 0 if same else 1


if __name__ == "__main__":
    sys.exit(main())
