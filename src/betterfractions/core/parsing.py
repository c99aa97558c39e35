"""
Fraction Parsing — строковые литералы дробей

Грамматики:
    рациональная: ["-"] digits ["/" digits]
    десятичная:   ["-"] digits ["." digits]

parse_fraction() выбирает грамматику по наличию разделителя "/".

ОГРАНИЧЕНИЯ:
- Знак допустим только перед числителем: "6/-11" отклоняется (InvalidFractionError),
  а не неявное сокращение отрицательного знаменателя
- digits — только ASCII цифры 0-9, значение должно помещаться в uint64
- Знак десятичной строки относится ко всему значению: "-0.3" == -3/10
"""

import re
from typing import Final

from betterfractions.core.domain.errors import (
    FractionParseError,
    InvalidFractionError,
    OutOfRangeError,
    ZeroDenominatorError,
)
from betterfractions.core.domain.fraction import Fraction, new_from_integer, normalize
from betterfractions.core.math.arithmetic import add, negate
from betterfractions.core.math.integer_utils import UINT64_MAX

# =============================================================================
# ГРАММАТИКА
# =============================================================================

FRACTION_SEPARATOR: Final[str] = "/"

DECIMAL_POINT: Final[str] = "."

SIGN_NEGATIVE: Final[str] = "-"

# 10**19 — наибольшая степень десяти в uint64
MAX_FRACTIONAL_DIGITS: Final[int] = 19

_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


def _parse_uint64(segment: str, what: str) -> int:
    """
    Разбор неотрицательного целого литерала ширины uint64.

    Raises:
        InvalidFractionError: Если сегмент не из ASCII цифр или > UINT64_MAX
    """
    if not _DIGITS_RE.fullmatch(segment):
        raise InvalidFractionError(f"{what} {segment!r} is not an unsigned integer literal")

    value = int(segment)
    if value > UINT64_MAX:
        raise InvalidFractionError(f"{what} {segment!r} does not fit 64-bit unsigned integer")
    return value


def _split_sign(s: str, text: str, strip_body: bool) -> tuple[bool, str]:
    """
    Отделение ведущего "-" от тела литерала.

    strip_body=True обрезает пробелы между знаком и телом ("- 3/4").
    """
    if not s.startswith(SIGN_NEGATIVE):
        return False, s

    body = s[len(SIGN_NEGATIVE):]
    if strip_body:
        body = body.strip()
    if body == "":
        raise FractionParseError(text, "no numerals after sign")
    return True, body


# =============================================================================
# РАЦИОНАЛЬНАЯ НОТАЦИЯ
# =============================================================================


def parse_rational(text: str) -> Fraction:
    """
    Разбор строки вида "n/d".

    Пробелы обрезаются вокруг всей строки, после знака и вокруг каждого
    сегмента: "  12 / 6  " == 2. Знаменатель необязателен (по умолчанию 1).

    Raises:
        FractionParseError: Пустая строка, знак без цифр, больше одного "/",
            пустой сегмент
        InvalidFractionError: Сегмент не является uint64 литералом
        ZeroDenominatorError: Явный знаменатель равен 0

    Examples:
        >>> str(parse_rational(" -10/7 "))
        '-10/7'
        >>> parse_rational("6/-11")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidFractionError: ...
    """
    s = text.strip()
    if s == "":
        raise FractionParseError(text, "empty fraction")

    negative, s = _split_sign(s, text, strip_body=True)

    parts = s.split(FRACTION_SEPARATOR)
    if len(parts) > 2:
        raise FractionParseError(text, f"too many fraction separators {FRACTION_SEPARATOR!r}")

    numerator_str = parts[0].strip()
    if numerator_str == "":
        raise FractionParseError(text, "numerator cannot be empty")
    numerator = _parse_uint64(numerator_str, "numerator")

    denominator = 1
    if len(parts) == 2:
        denominator_str = parts[1].strip()
        if denominator_str == "":
            raise FractionParseError(text, "separator found but denominator empty")

        denominator = _parse_uint64(denominator_str, "denominator")
        if denominator == 0:
            raise ZeroDenominatorError(f"denominator cannot be zero in {text!r}")

    return normalize(numerator, denominator, negative)


# =============================================================================
# ДЕСЯТИЧНАЯ НОТАЦИЯ
# =============================================================================


def parse_decimal(text: str) -> Fraction:
    """
    Разбор десятичной строки вида "n.f".

    Дробная часть f превращается в f / 10^len(f): ведущие нули значимы,
    "0.05" == 1/20. Знак применяется ко всему значению.

    Raises:
        FractionParseError: Пустая строка, больше одной точки, пустая целая
            часть
        InvalidFractionError: Сегмент не является uint64 литералом
        OutOfRangeError: Дробная часть длиннее MAX_FRACTIONAL_DIGITS цифр,
            либо сумма частей не помещается в uint64

    Examples:
        >>> str(parse_decimal("-0.3"))
        '-3/10'
        >>> str(parse_decimal("2.5"))
        '5/2'
    """
    s = text.strip()
    if s == "":
        raise FractionParseError(text, "empty decimal")

    # Пробел после знака недопустим: "- 3.5" отклоняется
    negative, s = _split_sign(s, text, strip_body=False)

    parts = s.split(DECIMAL_POINT)
    if len(parts) > 2:
        raise FractionParseError(text, f"too many decimal points {DECIMAL_POINT!r}")

    if parts[0] == "":
        raise FractionParseError(text, "no leading numeral before decimal point")
    integer_part = _parse_uint64(parts[0], "integer part")

    if len(parts) == 1:
        return normalize(integer_part, 1, negative)

    fractional_str = parts[1]
    if fractional_str == "":
        raise FractionParseError(text, "no numerals after decimal point")
    if not _DIGITS_RE.fullmatch(fractional_str):
        raise InvalidFractionError(
            f"fractional part {fractional_str!r} is not an unsigned integer literal"
        )
    if len(fractional_str) > MAX_FRACTIONAL_DIGITS:
        raise OutOfRangeError(
            f"fractional part of {text!r} has more than {MAX_FRACTIONAL_DIGITS} digits"
        )
    fractional = _parse_uint64(fractional_str, "fractional part")

    value = add(
        new_from_integer(integer_part),
        normalize(fractional, 10 ** len(fractional_str), False),
    )
    return negate(value) if negative else value


# =============================================================================
# DISPATCH
# =============================================================================


def parse_fraction(text: str) -> Fraction:
    """
    Разбор рациональной ("3/4") или десятичной ("0.75") строки.

    Raises:
        InvalidFractionError, ZeroDenominatorError, OutOfRangeError:
            как parse_rational / parse_decimal
    """
    s = text.strip()
    if FRACTION_SEPARATOR in s:
        return parse_rational(s)
    return parse_decimal(s)
