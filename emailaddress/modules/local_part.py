"""Разбор локальной части адреса: кавычки, экранирование, комментарии и теги."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from emailaddress.modules.constants import (
    RESTRICTED_LOCAL_CHARS,
    VALID_LOCAL_PART_CHARS,
)
from emailaddress.modules.errors import (
    ConsecutiveDotError,
    DanglingEscapeError,
    DotAtBoundaryError,
    EmptyCanonicalTextError,
    InvalidCharacterError,
    InvalidCommentOrderError,
    LocalPartSyntaxError,
    RestrictedCharacterError,
    UnmatchedCommentCloseError,
    UnterminatedCommentError,
    UnterminatedQuoteError,
)


@dataclass(frozen=True)
class LocalPart:
    """Результат разбора локальной части.

    ``canonical_text`` используется для сравнения адресов, комментарий и теги
    сохраняются только для восстановления исходного вида.
    """

    canonical_text: str
    comment: Optional[str] = None
    comment_at_start: bool = False
    tags: Tuple[str, ...] = ()

    def __str__(self) -> str:
        parts: List[str] = []
        if self.comment is not None and self.comment_at_start:
            parts.append(f"({self.comment})")
        parts.append(self.canonical_text)
        parts.extend(f"+{tag}" for tag in self.tags)
        if self.comment is not None and not self.comment_at_start:
            parts.append(f"({self.comment})")
        return "".join(parts)


@dataclass
class _ScanState:
    """Состояние однопроходного сканера.

    ``previous_dot`` относится к последнему сохранённому символу, поэтому
    вырезанный комментарий не разделяет соседние точки.
    """

    quoted: bool = False
    backslashes: int = 0
    in_tags: bool = False
    previous_dot: bool = False
    text_starts_with_dot: bool = False
    text_ends_with_dot: bool = False
    comment_start: Optional[int] = None
    comment_end: Optional[int] = None
    text: List[str] = field(default_factory=list)
    tag_text: List[str] = field(default_factory=list)

    @property
    def escaped(self) -> bool:
        """Следующий символ экранирован нечётной серией обратных слэшей."""
        return self.backslashes % 2 == 1

    @property
    def in_comment(self) -> bool:
        if self.comment_start is None:
            return False
        return self.comment_end is None or self.comment_end < self.comment_start

    def keep(self, char: str, dot: bool = False) -> None:
        if self.in_comment:
            return
        if self.in_tags:
            self.tag_text.append(char)
        else:
            if not self.text:
                self.text_starts_with_dot = dot
            self.text_ends_with_dot = dot
            self.text.append(char)
        self.previous_dot = dot

    def start_tag(self) -> None:
        self.in_tags = True
        self.tag_text.append("+")
        self.previous_dot = False


def parse_local_part(local: str) -> LocalPart:
    """Разбирает локальную часть за один проход.

    Длину и пустоту строки проверяет вызывающий код, но пустая строка всё
    равно отклоняется.
    """
    if not local:
        raise LocalPartSyntaxError("empty local part")

    if len(local) == 1:
        if local in VALID_LOCAL_PART_CHARS:
            return LocalPart(canonical_text=local)
        raise InvalidCharacterError(local, 0)

    state = _ScanState()
    last = len(local) - 1
    for idx, char in enumerate(local):
        _step(state, idx, char, last)

    if state.escaped and not state.quoted:
        raise DanglingEscapeError(last)
    if state.quoted:
        raise UnterminatedQuoteError()
    start, end = state.comment_start, state.comment_end
    if start is not None and end is None:
        raise UnterminatedCommentError(start)
    if start is None and end is not None:
        raise UnmatchedCommentCloseError(end)
    if start is not None and end is not None and start > end:
        raise InvalidCommentOrderError(start, end)
    # точка могла оказаться на краю после удаления комментария или тегов
    if state.text_starts_with_dot or state.text_ends_with_dot:
        raise DotAtBoundaryError(None)

    canonical_text = "".join(state.text)
    if not canonical_text:
        raise EmptyCanonicalTextError()

    comment = None
    if start is not None and end is not None:
        comment = local[start + 1:end]
    return LocalPart(
        canonical_text=canonical_text,
        comment=comment,
        comment_at_start=start == 0,
        tags=tuple(split_tags("".join(state.tag_text))),
    )


def _step(state: _ScanState, idx: int, char: str, last: int) -> None:
    if not char.isascii() or not char.isprintable():
        raise InvalidCharacterError(char, idx)

    if char == "\\":
        state.backslashes += 1
        state.keep(char)
        return

    escaped = state.escaped
    state.backslashes = 0
    structural = not escaped and not state.quoted
    dot = False

    if char == '"':
        if not escaped:
            state.quoted = not state.quoted
    elif char == "+":
        if structural and not state.in_comment:
            state.start_tag()
            return
    elif char == ".":
        if idx == 0 or idx == last:
            raise DotAtBoundaryError(idx)
        dot = not escaped
        if structural and state.previous_dot and not state.in_comment:
            raise ConsecutiveDotError(idx)
    elif char in RESTRICTED_LOCAL_CHARS:
        if structural:
            raise RestrictedCharacterError(char, idx)
    elif char == "(":
        if structural:
            if state.comment_start is not None:
                raise UnterminatedCommentError(idx)
            state.comment_start = idx
            return
    elif char == ")":
        if structural:
            if state.comment_end is not None:
                raise UnmatchedCommentCloseError(idx)
            state.comment_end = idx
            return
    elif escaped and not state.quoted:
        raise DanglingEscapeError(idx, char)

    state.keep(char, dot)


def split_tags(text: str) -> List[str]:
    """Делит область тегов по неэкранированным ``+`` вне кавычек, пустые части отбрасываются.

    Сканер передаёт сюда сохранённый текст тегов уже без комментария.
    """
    tags: List[str] = []
    current: List[str] = []
    quoted = False
    backslashes = 0
    for char in text:
        escaped = backslashes % 2 == 1
        if char == "\\":
            backslashes += 1
            current.append(char)
            continue
        backslashes = 0
        if char == '"' and not escaped:
            quoted = not quoted
        elif char == "+" and not escaped and not quoted:
            if current:
                tags.append("".join(current))
            current = []
            continue
        current.append(char)
    if current:
        tags.append("".join(current))
    return tags
