"""Разбор адреса на локальную часть и домен."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from emailaddress.modules.constants import MAX_DOMAIN_LENGTH, MAX_LOCAL_PART
from emailaddress.modules.domain import is_domain_name
from emailaddress.modules.errors import (
    DomainEmptyError,
    DomainInvalidError,
    DomainTooLongError,
    EmailAddressError,
    EmptyInputError,
    LocalPartEmptyError,
    LocalPartInvalidError,
    LocalPartSyntaxError,
    LocalPartTooLongError,
    MissingAtSignError,
    MultipleAtSignsError,
)
from emailaddress.modules.local_part import LocalPart, parse_local_part

LOGGER = logging.getLogger("emailaddress.address")


@dataclass(frozen=True)
class Address:
    """Разобранный адрес электронной почты."""

    local_part: LocalPart
    domain: str

    def __str__(self) -> str:
        return f"{self.local_part}@{self.domain}"


def split_address(address: str) -> Tuple[str, str]:
    """Делит адрес по первому @ вне кавычек и без экранирования."""
    quoted = False
    backslashes = 0
    split_at: Optional[int] = None
    for idx, char in enumerate(address):
        escaped = backslashes % 2 == 1
        if char == "\\":
            backslashes += 1
            continue
        backslashes = 0
        if char == '"' and not escaped:
            quoted = not quoted
        elif char == "@" and not quoted and not escaped:
            if split_at is not None:
                raise MultipleAtSignsError()
            split_at = idx

    if split_at is None:
        raise MissingAtSignError(address)
    return address[:split_at], address[split_at + 1:]


def parse_address(address: str) -> Address:
    """Разбирает и проверяет адрес, при ошибке выбрасывает ``EmailAddressError``."""
    if not address:
        raise EmptyInputError()

    local, domain = split_address(address)
    if not local:
        raise LocalPartEmptyError()
    if len(local) > MAX_LOCAL_PART:
        raise LocalPartTooLongError(local)
    if not domain:
        raise DomainEmptyError()
    if len(domain) > MAX_DOMAIN_LENGTH:
        raise DomainTooLongError(domain)

    try:
        local_part = parse_local_part(local)
    except LocalPartSyntaxError as exc:
        raise LocalPartInvalidError(exc) from exc

    if not is_domain_name(domain):
        raise DomainInvalidError(domain)

    return Address(local_part=local_part, domain=domain)


def validate(address: str) -> Tuple[bool, Optional[EmailAddressError]]:
    """Проверяет адрес и возвращает пару (валиден ли, ошибка)."""
    if not address:
        return False, EmptyInputError()

    try:
        parse_address(address)
    except LocalPartInvalidError as exc:
        LOGGER.debug("Адрес %r отклонён: %s (%s)", address, exc, exc.reason)
        return False, exc
    except EmailAddressError as exc:
        LOGGER.debug("Адрес %r отклонён: %s", address, exc)
        return False, exc
    return True, None
