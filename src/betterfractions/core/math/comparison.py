"""
Comparison Engine — полный порядок на Fraction

Сравнение через перекрёстное умножение в расширенной (128-битной) точности:
    a/b ? c/d  <=>  a * (d/g) ? c * (b/g),  g = gcd(b, d)

Наивное a*d ? c*b в 64 битах могло бы переполниться; здесь произведения
сравниваются как пары (hi, lo), переполнение невозможно.
"""

from betterfractions.core.domain.fraction import Fraction
from betterfractions.core.math.integer_utils import cmp_wide, gcd, mul_wide


def cmp(f1: Fraction, f2: Fraction) -> int:
    """
    Сравнение двух дробей.

    Returns:
        -1 если f1 < f2, 0 если f1 == f2, +1 если f1 > f2

    Examples:
        >>> cmp(new(1, 2), new(3, 5))
        -1
        >>> cmp(new(-1, 2), new(-3, 5))
        1
    """
    # Оба нуля: канонический ноль не имеет знака
    if f1.is_zero() and f2.is_zero():
        return 0

    # Разные знаки: отрицательная меньше
    if f1.negative != f2.negative:
        return -1 if f1.negative else 1

    g = gcd(f1.denominator, f2.denominator)
    lmul = f2.denominator // g
    rmul = f1.denominator // g

    c = cmp_wide(mul_wide(f1.numerator, lmul), mul_wide(f2.numerator, rmul))

    # Обе отрицательные: порядок магнитуд обратный
    if f1.negative:
        return -c
    return c


def equal(f1: Fraction, f2: Fraction) -> bool:
    """
    Равенство дробей.

    Корректно только потому, что каждая Fraction каноническая: равные
    значения имеют равные поля. Два нуля равны независимо от знака и
    знаменателя.
    """
    if f1.is_zero() and f2.is_zero():
        return True
    return (
        f1.numerator == f2.numerator
        and f1.denominator == f2.denominator
        and f1.negative == f2.negative
    )


def less(f1: Fraction, f2: Fraction) -> bool:
    return cmp(f1, f2) < 0


def less_eq(f1: Fraction, f2: Fraction) -> bool:
    return cmp(f1, f2) <= 0


def greater(f1: Fraction, f2: Fraction) -> bool:
    return cmp(f1, f2) > 0


def greater_eq(f1: Fraction, f2: Fraction) -> bool:
    return cmp(f1, f2) >= 0
