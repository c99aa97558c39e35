"""
Arithmetic Engine — арифметика Fraction с контролем переполнения

Операции: add, subtract, negate, invert, abs_fraction, multiply, divide.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое умножение и сложение магнитуд проверяется на переполнение ДО
   выполнения (OutOfRangeError), результат никогда не "заворачивается"
2. Результат всегда в канонической форме (normalize)
3. Сокращение нуля всегда даёт положительный канонический ноль
4. divide -> invert: единственный источник ZeroDenominatorError при делении

Коммутативность и ассоциативность выполняются только в пределах
представимого диапазона: неявного перехода к длинной арифметике нет.
"""

from betterfractions.core.domain.errors import OutOfRangeError, ZeroDenominatorError
from betterfractions.core.domain.fraction import Fraction, normalize, zero
from betterfractions.core.math.integer_utils import (
    checked_add,
    checked_mul,
    gcd,
    mul_overflows,
)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def _combine_signed(
    a: int, a_negative: bool, b: int, b_negative: bool
) -> tuple[int, bool]:
    """
    Сложение двух знаковых магнитуд.

    Одинаковые знаки: сумма магнитуд. Разные знаки: разность магнитуд со
    знаком большей по модулю.

    Raises:
        OutOfRangeError: Если сумма магнитуд превышает uint64
    """
    if a_negative == b_negative:
        return checked_add(a, b), a_negative

    if a >= b:
        return a - b, a_negative
    return b - a, b_negative


def _add_same_denominator(f1: Fraction, f2: Fraction) -> Fraction:
    """Fast path: знаменатели равны, складываются только числители."""
    num, negative = _combine_signed(f1.numerator, f1.negative, f2.numerator, f2.negative)
    return normalize(num, f1.denominator, negative)


def add(f1: Fraction, f2: Fraction) -> Fraction:
    """
    Сумма двух дробей.

    Алгоритм:
        g = gcd(d1, d2)
        a = n1 * (d2 / g),  b = n2 * (d1 / g)
        den = (d1 / g) * d2
        num = a ± b  (знак по правилу _combine_signed)

    Raises:
        OutOfRangeError: Если любой промежуточный результат превышает uint64

    Examples:
        >>> str(add(new(1, 3), new(1, 6)))
        '1/2'
        >>> str(add(new(-1, 3), new(1, 6)))
        '-1/6'
    """
    if f1.is_zero():
        return normalize(f2.numerator, f2.denominator, f2.negative)
    if f2.is_zero():
        return normalize(f1.numerator, f1.denominator, f1.negative)

    if f1.denominator == f2.denominator:
        return _add_same_denominator(f1, f2)

    g = gcd(f1.denominator, f2.denominator)
    scale1 = f2.denominator // g
    scale2 = f1.denominator // g

    if mul_overflows(f1.numerator, scale1) or mul_overflows(f2.numerator, scale2):
        raise OutOfRangeError(
            f"Cross-scaled numerators of {f1} + {f2} overflow the unsigned range"
        )
    a = f1.numerator * scale1
    b = f2.numerator * scale2

    # den = (d1 / g) * d2
    if mul_overflows(scale2, f2.denominator):
        raise OutOfRangeError(
            f"Common denominator of {f1} + {f2} overflows the unsigned range"
        )
    den = scale2 * f2.denominator

    num, negative = _combine_signed(a, f1.negative, b, f2.negative)
    return normalize(num, den, negative)


def subtract(f1: Fraction, f2: Fraction) -> Fraction:
    """
    Разность f1 - f2 = add(f1, negate(f2)).

    Raises:
        OutOfRangeError: Как add()
    """
    return add(f1, negate(f2))


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def negate(f: Fraction) -> Fraction:
    """Смена знака. Ноль остаётся положительным."""
    if f.is_zero():
        return zero()
    return Fraction(numerator=f.numerator, denominator=f.denominator, negative=not f.negative)


def invert(f: Fraction) -> Fraction:
    """
    Обратная дробь: числитель и знаменатель меняются местами, знак сохраняется.

    Raises:
        ZeroDenominatorError: Если числитель равен 0
    """
    if f.is_zero():
        raise ZeroDenominatorError("cannot invert zero: denominator would be zero")
    return Fraction(numerator=f.denominator, denominator=f.numerator, negative=f.negative)


def abs_fraction(f: Fraction) -> Fraction:
    """Модуль дроби (знак всегда положительный)."""
    return Fraction(numerator=f.numerator, denominator=f.denominator, negative=False)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def multiply(f1: Fraction, f2: Fraction) -> Fraction:
    """
    Произведение двух дробей с перекрёстным сокращением.

    Перед умножением каждая пара "числитель одной / знаменатель другой"
    сокращается на свой НОД, что уменьшает промежуточные магнитуды:
        g1 = gcd(n1, d2), g2 = gcd(n2, d1)
        num = (n1/g1) * (n2/g2), den = (d1/g2) * (d2/g1)

    Финальная normalize всё равно выполняется.

    Raises:
        OutOfRangeError: Если num или den превышают uint64

    Examples:
        >>> str(multiply(new(-3, 5), new(10, 9)))
        '-2/3'
    """
    if f1.is_zero() or f2.is_zero():
        return zero()

    g1 = gcd(f1.numerator, f2.denominator)
    g2 = gcd(f2.numerator, f1.denominator)

    n1 = f1.numerator // g1
    d2 = f2.denominator // g1
    n2 = f2.numerator // g2
    d1 = f1.denominator // g2

    num = checked_mul(n1, n2)
    den = checked_mul(d1, d2)
    negative = f1.negative != f2.negative

    return normalize(num, den, negative)


def divide(f1: Fraction, f2: Fraction) -> Fraction:
    """
    Частное f1 / f2 = multiply(f1, invert(f2)).

    Raises:
        ZeroDenominatorError: Если f2 равна нулю
        OutOfRangeError: Как multiply()
    """
    return multiply(f1, invert(f2))
