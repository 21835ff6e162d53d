"""Сравнение адресов без учёта комментариев, тегов и регистра."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from emailaddress.modules.address import parse_address
from emailaddress.modules.errors import EmailAddressError

LOGGER = logging.getLogger("emailaddress.compare")


def canonical_key(address: str) -> Optional[Tuple[str, str]]:
    """Ключ идентичности адреса или ``None``, если адрес не разбирается."""
    try:
        parsed = parse_address(address)
    except EmailAddressError as exc:
        LOGGER.debug("Не удалось построить ключ для %r: %s", address, exc)
        return None
    return parsed.local_part.canonical_text.lower(), parsed.domain.lower()


def equals(first: str, second: str) -> bool:
    """Совпадают ли адреса по локальной части и домену."""
    first_key = canonical_key(first)
    if first_key is None:
        return False
    return canonical_key(second) == first_key
