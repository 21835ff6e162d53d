"""Общие константы грамматики адресов электронной почты."""

from __future__ import annotations

import string

MAX_LOCAL_PART = 64
MAX_DOMAIN_LENGTH = 255
MAX_LABEL_LENGTH = 63

LOCAL_PART_SPECIALS = "!#$%&'*+-/=?^_`{|}~"
VALID_LOCAL_PART_CHARS = frozenset(string.ascii_letters + string.digits + LOCAL_PART_SPECIALS)
VALID_DOMAIN_CHARS = frozenset(string.ascii_letters + string.digits + "-")

# допустимы только в кавычках или после обратного слэша
RESTRICTED_LOCAL_CHARS = frozenset(',:;<>@[] ')
