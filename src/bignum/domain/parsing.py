"""
Parsing — Лексический разбор десятичной строки

Допустимая форма: необязательный ведущий '-' и одна или более ASCII-цифр.
Пустая строка, посторонние символы и '-' не в начале недопустимы.

Два режима ошибок:
- BigInteger("...") молча превращает недопустимую строку в NaN
- BigInteger.parse("...") бросает InvalidDigitString

Соответствие: строка, на которой parse бросает InvalidDigitString,
даёт NaN в permissive-конструкторе; остальные строки дают одинаковое
значение в обоих режимах.
"""

import re
from typing import Final

from src.bignum.math.digits import Digits, trim_leading_zeros

# =============================================================================
# CONSTANTS
# =============================================================================

MINUS_SIGN: Final[str] = "-"

# Только ASCII: str.isdigit() пропускает, например, арабско-индийские цифры
_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigitString(ValueError):
    """
    Строка не является десятичным целым числом.

    Бросается только fallible-парсером BigInteger.parse. Permissive-конструктор
    вместо исключения возвращает NaN.
    """

    def __init__(self, text: object):
        self.text = text
        super().__init__(f"Not a decimal integer: {text!r}")


# =============================================================================
# LEXICAL CHECKS
# =============================================================================


def is_number(text: object) -> bool:
    """Строка соответствует форме -?[0-9]+ целиком."""
    if not isinstance(text, str):
        return False
    return _NUMBER_PATTERN.fullmatch(text) is not None


def is_positive(text: str) -> bool:
    """Нет ведущего минуса. Для нуля знак решает is_zero."""
    return not text.startswith(MINUS_SIGN)


def is_zero(text: str) -> bool:
    """Полезная нагрузка (без минуса) состоит только из нулей."""
    payload = text[1:] if not is_positive(text) else text
    return payload.strip("0") == ""


# =============================================================================
# DIGIT EXTRACTION
# =============================================================================


def parse_digits(text: str) -> Digits:
    """
    Цифры строки в порядке хранения (least-significant first).

    Строка читается от старшей цифры к младшей, поэтому порядок
    разворачивается. Лишние старшие нули отбрасываются.

    Args:
        text: Десятичная строка (-?[0-9]+)

    Returns:
        Нормализованные цифры; пустой список для нулевой нагрузки

    Raises:
        InvalidDigitString: Если строка не прошла лексическую проверку
    """
    if not is_number(text):
        raise InvalidDigitString(text)

    payload = text if is_positive(text) else text[len(MINUS_SIGN):]

    return trim_leading_zeros([ord(ch) - ord("0") for ch in reversed(payload)])
