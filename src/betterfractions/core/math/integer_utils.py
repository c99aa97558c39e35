"""
Integer Utilities — беззнаковые 64-битные примитивы

Модуль содержит целочисленные примитивы, на которых построены все операции
над Fraction:
- Извлечение модуля и промоушен любого целого во 64-битную величину
- НОД (алгоритм Евклида)
- Pre-check переполнения для умножения и сложения
- Расширенное (128-битное) умножение и сравнение пар (hi, lo)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение обнаруживается ДО выполнения операции, никогда после
2. Все магнитуды лежат в диапазоне [0, UINT64_MAX]
3. Расширенное произведение всегда помещается в 128 бит
"""

import operator
from typing import Final

from betterfractions.core.domain.errors import OutOfRangeError

# =============================================================================
# РАЗРЯДНОСТЬ
# =============================================================================

# Ширина поля магнитуды (numerator/denominator)
UINT64_BITS: Final[int] = 64

# Максимальная представимая магнитуда
UINT64_MAX: Final[int] = (1 << UINT64_BITS) - 1

# Маска младшего слова для расширенного произведения
UINT64_MASK: Final[int] = UINT64_MAX


# =============================================================================
# МОДУЛЬ И ПРОМОУШЕН
# =============================================================================


def abs_int(n: int) -> int:
    """
    Модуль целого числа любой разрядности.

    Принимает int и любые numbers.Integral (например, numpy.int8) через
    operator.index. Для минимального значения знаковой разрядности
    (например, -2**63) модуль 2**63 корректен и помещается в uint64.

    Raises:
        TypeError: Если значение не целое (float, str) или bool
    """
    if isinstance(n, bool):
        raise TypeError("bool is not accepted as an integer operand")
    value = operator.index(n)
    return -value if value < 0 else value


def to_magnitude(n: int) -> int:
    """
    Промоушен целого любой разрядности в беззнаковую 64-битную магнитуду.

    Args:
        n: Знаковое или беззнаковое целое

    Returns:
        abs(n) в диапазоне [0, UINT64_MAX]

    Raises:
        TypeError: Если значение не целое
        OutOfRangeError: Если abs(n) > UINT64_MAX

    Examples:
        >>> to_magnitude(-6)
        6
        >>> to_magnitude(2**64)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        OutOfRangeError: ...
    """
    magnitude = abs_int(n)
    if magnitude > UINT64_MAX:
        raise OutOfRangeError(
            f"Magnitude {magnitude} exceeds the {UINT64_BITS}-bit unsigned range"
        )
    return magnitude


def is_negative_int(n: int) -> bool:
    """Знак целого (True для n < 0)."""
    return operator.index(n) < 0


# =============================================================================
# НОД
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель двух неотрицательных магнитуд (Евклид).

    Предполагает a >= 0 и b >= 0. Если один из аргументов равен 0,
    возвращает другой: gcd(a, 0) == a.

    Examples:
        >>> gcd(6, 8)
        2
        >>> gcd(0, 7)
        7
    """
    while b != 0:
        a, b = b, a % b
    return a


# =============================================================================
# PRE-CHECK ПЕРЕПОЛНЕНИЯ
# =============================================================================


def mul_overflows(a: int, b: int) -> bool:
    """
    Проверка, переполнит ли a * b диапазон uint64.

    Проверка выполняется делением, без вычисления произведения.
    """
    if a == 0 or b == 0:
        return False
    return a > UINT64_MAX // b


def add_overflows(a: int, b: int) -> bool:
    """Проверка, переполнит ли a + b диапазон uint64."""
    return a > UINT64_MAX - b


def checked_mul(a: int, b: int) -> int:
    """
    Умножение магнитуд с pre-check переполнения.

    Raises:
        OutOfRangeError: Если произведение не помещается в uint64
    """
    if mul_overflows(a, b):
        raise OutOfRangeError(f"Product {a} * {b} overflows the unsigned range")
    return a * b


def checked_add(a: int, b: int) -> int:
    """
    Сложение магнитуд с pre-check переполнения.

    Raises:
        OutOfRangeError: Если сумма не помещается в uint64
    """
    if add_overflows(a, b):
        raise OutOfRangeError(f"Sum {a} + {b} overflows the unsigned range")
    return a + b


# =============================================================================
# РАСШИРЕННАЯ (128-БИТНАЯ) АРИФМЕТИКА
# =============================================================================


def mul_wide(a: int, b: int) -> tuple[int, int]:
    """
    Расширенное произведение 64x64 -> 128 бит в виде пары (hi, lo).

    Args:
        a: Магнитуда uint64
        b: Магнитуда uint64

    Returns:
        (hi, lo): старшее и младшее 64-битные слова произведения

    Examples:
        >>> mul_wide(2**63, 4)
        (2, 0)
    """
    product = a * b
    return (product >> UINT64_BITS, product & UINT64_MASK)


def cmp_wide(x: tuple[int, int], y: tuple[int, int]) -> int:
    """
    Лексикографическое сравнение двух 128-битных пар (hi, lo).

    Returns:
        -1 если x < y, 0 если x == y, +1 если x > y
    """
    x_hi, x_lo = x
    y_hi, y_lo = y

    if x_hi != y_hi:
        return -1 if x_hi < y_hi else 1
    if x_lo != y_lo:
        return -1 if x_lo < y_lo else 1
    return 0

