"""
Core math modules для betterfractions

Целочисленные примитивы uint64, арифметика, сравнение и float bridge.
Публичные операции над Fraction реэкспортируются пакетом betterfractions.
"""

# Integer utilities
from betterfractions.core.math.integer_utils import (
    UINT64_BITS,
    UINT64_MASK,
    UINT64_MAX,
    abs_int,
    add_overflows,
    checked_add,
    checked_mul,
    cmp_wide,
    gcd,
    is_negative_int,
    mul_overflows,
    mul_wide,
    to_magnitude,
)

__all__ = [
    # Constants
    "UINT64_BITS",
    "UINT64_MASK",
    "UINT64_MAX",
    # Magnitudes
    "abs_int",
    "is_negative_int",
    "to_magnitude",
    # GCD
    "gcd",
    # Overflow pre-checks
    "add_overflows",
    "checked_add",
    "checked_mul",
    "mul_overflows",
    # Wide arithmetic
    "cmp_wide",
    "mul_wide",
]
