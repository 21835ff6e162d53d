"""Исключения разбора адресов электронной почты."""

from __future__ import annotations

from typing import Optional

from emailaddress.modules.constants import MAX_DOMAIN_LENGTH, MAX_LOCAL_PART


class EmailAddressError(ValueError):
    """Базовое исключение для некорректного адреса."""


class EmptyInputError(EmailAddressError):
    """Передана пустая строка."""

    def __init__(self) -> None:
        super().__init__("empty string is not valid email address")


class MissingAtSignError(EmailAddressError):
    """В адресе нет структурного символа @."""

    def __init__(self, address: str) -> None:
        super().__init__(
            f"{address} is not valid email address, the format of email addresses is local-part@domain"
        )
        self.address = address


class MultipleAtSignsError(EmailAddressError):
    """В адресе больше одного структурного символа @."""

    def __init__(self) -> None:
        super().__init__("an email address can't have multiple '@' characters")


class LocalPartEmptyError(EmailAddressError):
    """Адрес начинается с @."""

    def __init__(self) -> None:
        super().__init__("email address can't start with '@'")


class LocalPartTooLongError(EmailAddressError):
    """Локальная часть длиннее допустимого."""

    def __init__(self, local_part: str) -> None:
        super().__init__(f"the length of local part should be less than {MAX_LOCAL_PART}")
        self.local_part = local_part


class DomainEmptyError(EmailAddressError):
    """После @ ничего нет."""

    def __init__(self) -> None:
        super().__init__("domain part can't be empty")


class DomainTooLongError(EmailAddressError):
    """Домен длиннее допустимого."""

    def __init__(self, domain: str) -> None:
        super().__init__(f"{domain} is longer than {MAX_DOMAIN_LENGTH}")
        self.domain = domain


class DomainInvalidError(EmailAddressError):
    """Домен не прошёл проверку имени."""

    def __init__(self, domain: str) -> None:
        super().__init__(f"{domain} is not a valid domain")
        self.domain = domain


class LocalPartInvalidError(EmailAddressError):
    """Обёртка над ошибкой разбора локальной части."""

    def __init__(self, reason: "LocalPartSyntaxError") -> None:
        super().__init__("fail to parse localPart of the email address")
        self.reason = reason


class LocalPartSyntaxError(EmailAddressError):
    """Базовое исключение сканера локальной части.

    ``position`` указывает на индекс символа в локальной части или равен
    ``None``, если ошибка обнаружена после прохода.
    """

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        character: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.character = character


class InvalidCharacterError(LocalPartSyntaxError):
    """Символ не допускается в локальной части."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(
            f"{character} is invalid in the local part of an email address",
            position=position,
            character=character,
        )


class DotAtBoundaryError(LocalPartSyntaxError):
    """Точка в начале или в конце локальной части."""

    def __init__(self, position: Optional[int]) -> None:
        super().__init__(". can't be the start or end of local part", position=position, character=".")


class ConsecutiveDotError(LocalPartSyntaxError):
    """Две точки подряд вне кавычек."""

    def __init__(self, position: int) -> None:
        super().__init__("consecutive dot is only valid in quotation", position=position, character=".")


class RestrictedCharacterError(LocalPartSyntaxError):
    """Служебный символ вне кавычек без экранирования."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(
            f"{character} is only valid in quoted string or escaped",
            position=position,
            character=character,
        )


class DanglingEscapeError(LocalPartSyntaxError):
    """Обратный слэш вне кавычек перед обычным символом."""

    def __init__(self, position: int, character: Optional[str] = None) -> None:
        super().__init__(
            "\\ is only valid in quoted string or escaped",
            position=position,
            character=character,
        )


class UnterminatedQuoteError(LocalPartSyntaxError):
    """Кавычка открыта, но не закрыта."""

    def __init__(self) -> None:
        super().__init__('" is only valid escaped with backslash', character='"')


class UnterminatedCommentError(LocalPartSyntaxError):
    """Комментарий открыт, но не закрыт."""

    def __init__(self, position: int) -> None:
        super().__init__("( is only valid within quoted string or escaped", position=position, character="(")


class UnmatchedCommentCloseError(LocalPartSyntaxError):
    """Закрывающая скобка без открывающей."""

    def __init__(self, position: int) -> None:
        super().__init__(") is only valid within quoted string or escaped", position=position, character=")")


class InvalidCommentOrderError(LocalPartSyntaxError):
    """Закрывающая скобка встретилась раньше открывающей."""

    def __init__(self, start: int, end: int) -> None:
        super().__init__(
            f"comment closed at {end} before it was opened at {start}",
            position=end,
            character=")",
        )
        self.start = start
        self.end = end


class EmptyCanonicalTextError(LocalPartSyntaxError):
    """После удаления комментария и тегов ничего не осталось."""

    def __init__(self) -> None:
        super().__init__("local part has no text besides comment and tags")
