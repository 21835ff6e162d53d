"""Проверка доменной части адреса."""

from __future__ import annotations

from emailaddress.modules.constants import MAX_DOMAIN_LENGTH, MAX_LABEL_LENGTH, VALID_DOMAIN_CHARS


def is_domain_name(candidate: str) -> bool:
    """Проверяет, что строка похожа на DNS-имя из меток через точку."""
    if not candidate or len(candidate) > MAX_DOMAIN_LENGTH:
        return False
    return all(_is_valid_label(label) for label in candidate.split("."))


def _is_valid_label(label: str) -> bool:
    if not label or len(label) > MAX_LABEL_LENGTH:
        return False
    if label.startswith("-") or label.endswith("-"):
        return False
    return all(char in VALID_DOMAIN_CHARS for char in label)
