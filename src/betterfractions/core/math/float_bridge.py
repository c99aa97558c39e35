"""
Floating-Point Bridge — конверсия Fraction <-> float64

Модуль обеспечивает:
- to_float: значение дроби как float
- from_float_exact: точная конверсия через разложение IEEE-754 на знак,
  экспоненту и мантиссу
- from_float_approx: наилучшее рациональное приближение с ограничением
  знаменателя (цепные дроби, подходящие дроби)

ВАЖНО: float обычно хранит приближение десятичного числа, поэтому
from_float_exact(-0.3) == -5404319552844595/18014398509481984.
Для "-3/10" используйте from_float_approx или parse_decimal.

ГРАНИЦЫ:
    |x| > 9.223372036854775e18  → OutOfRangeError
    |x| < 2.168404344971009e-19 → канонический ноль
"""

import logging
import math
import struct
from dataclasses import dataclass
from typing import Final

from betterfractions.core.domain.errors import InvalidFractionError, OutOfRangeError
from betterfractions.core.domain.fraction import Fraction, new, normalize, zero
from betterfractions.core.math.integer_utils import (
    UINT64_MAX,
    add_overflows,
    mul_overflows,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ IEEE-754 И ГРАНИЦЫ
# =============================================================================

# Ширина дробной части мантиссы binary64 (без неявного бита)
MANTISSA_BITS: Final[int] = 52

# Смещение экспоненты binary64
EXPONENT_BIAS: Final[int] = 1023

# Маска 11-битной экспоненты
EXPONENT_MASK: Final[int] = (1 << 11) - 1

# Максимальный модуль float, представимый дробью с магнитудой int64
FLOAT_MAGNITUDE_BOUND: Final[float] = 9.223372036854775e18

# Модули ниже порога считаются точным нулём (исключает денормализованные числа)
FLOAT_ZERO_THRESHOLD: Final[float] = 2.168404344971009e-19

# Предел сдвига знаменателя (1 << 62 помещается в знаковый int64)
MAX_DENOMINATOR_SHIFT: Final[int] = 62

# Предел итераций цепной дроби (гарантия завершения)
APPROX_MAX_ITERATIONS: Final[int] = 1000


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class FloatBridgeConfig:
    """Конфигурация конверсии float -> Fraction."""

    magnitude_bound: float = FLOAT_MAGNITUDE_BOUND
    zero_threshold: float = FLOAT_ZERO_THRESHOLD
    max_denominator_shift: int = MAX_DENOMINATOR_SHIFT
    max_approx_iterations: int = APPROX_MAX_ITERATIONS


DEFAULT_FLOAT_BRIDGE_CONFIG: Final[FloatBridgeConfig] = FloatBridgeConfig()


# =============================================================================
# FRACTION -> FLOAT
# =============================================================================


def to_float(f: Fraction) -> float:
    """
    Значение дроби как float.

    Деление int / int в Python округляется корректно (одно округление).
    """
    value = f.numerator / f.denominator
    if f.negative and f.numerator != 0:
        return -value
    return value


# =============================================================================
# FLOAT -> FRACTION (EXACT)
# =============================================================================


def _decompose(x: float) -> tuple[bool, int, int]:
    """
    Разложение нормализованного binary64 на (negative, exponent, mantissa).

    Мантисса возвращается с восстановленным неявным старшим битом.
    """
    bits = struct.unpack(">Q", struct.pack(">d", x))[0]
    negative = bool(bits >> 63)
    exponent = ((bits >> MANTISSA_BITS) & EXPONENT_MASK) - EXPONENT_BIAS
    mantissa = (bits & ((1 << MANTISSA_BITS) - 1)) | (1 << MANTISSA_BITS)
    return negative, exponent, mantissa


def from_float_exact(
    x: float, config: FloatBridgeConfig = DEFAULT_FLOAT_BRIDGE_CONFIG
) -> Fraction:
    """
    Точная дробь из float64.

    Алгоритм:
        value = mantissa * 2^(exponent - 52)
        shift = 52 - exponent
        пока мантисса чётная и shift > 0: mantissa >>= 1, shift -= 1
        shift > 0  → denominator = 1 << shift
        shift <= 0 → numerator = mantissa << -shift

    Если shift знаменателя превышает max_denominator_shift, остаток сдвига
    переносится на числитель вправо: младшие биты мантиссы теряются. Это
    касается только модулей около FLOAT_ZERO_THRESHOLD и не считается
    ошибкой (приближение фиксируется в DEBUG логе).

    Args:
        x: Исходный float
        config: Границы и пределы сдвига

    Raises:
        InvalidFractionError: Если x is NaN
        OutOfRangeError: Если |x| > magnitude_bound (включая Inf)

    Examples:
        >>> str(from_float_exact(0.5))
        '1/2'
        >>> str(from_float_exact(-0.3))
        '-5404319552844595/18014398509481984'
    """
    if math.isnan(x):
        raise InvalidFractionError("cannot convert NaN to a fraction")
    if x < -config.magnitude_bound or x > config.magnitude_bound:
        raise OutOfRangeError(
            f"float {x!r} is outside the representable range ±{config.magnitude_bound!r}"
        )
    if -config.zero_threshold < x < config.zero_threshold:
        return zero()

    negative, exponent, mantissa = _decompose(x)

    # Сколько раз сдвинуть мантиссу вправо, чтобы компенсировать экспоненту
    shift = MANTISSA_BITS - exponent

    while mantissa & 1 == 0 and shift > 0:
        mantissa >>= 1
        shift -= 1

    shift_numerator, shift_denominator = 0, 0
    if shift > 0:
        shift_denominator = shift
    else:
        shift_numerator = shift

    if shift_denominator > config.max_denominator_shift:
        logger.debug(
            "from_float_exact(%r): denominator shift %d capped at %d, low mantissa bits dropped",
            x,
            shift_denominator,
            config.max_denominator_shift,
        )
        shift_denominator = config.max_denominator_shift
        shift_numerator = shift - config.max_denominator_shift

    numerator = mantissa
    denominator = 1 << shift_denominator
    if shift_numerator < 0:
        numerator <<= -shift_numerator
    else:
        numerator >>= shift_numerator

    if negative:
        numerator = -numerator
    return new(numerator, denominator)


# =============================================================================
# FLOAT -> FRACTION (APPROX)
# =============================================================================


def from_float_approx(
    x: float,
    max_denominator: int,
    config: FloatBridgeConfig = DEFAULT_FLOAT_BRIDGE_CONFIG,
) -> Fraction:
    """
    Наилучшее рациональное приближение x со знаменателем <= max_denominator.

    Разложение в цепную дробь: хранятся две последние подходящие дроби
    (p_prev/q_prev) и (p/q), начиная с (0/1) и (1/0). На каждом шаге:
        a = floor(x)
        new_p = a*p + p_prev, new_q = a*q + q_prev
        x = 1 / (x - a)

    Остановка: переполнение new_p/new_q (сохраняется предыдущая подходящая
    дробь), new_q == 0 или new_q > max_denominator, точный нулевой остаток,
    либо исчерпание max_approx_iterations.

    Args:
        x: Исходный float
        max_denominator: Верхняя граница знаменателя (>= 1)
        config: Предел итераций

    Raises:
        InvalidFractionError: Если x is NaN или max_denominator == 0
        OutOfRangeError: Если x бесконечен, max_denominator > UINT64_MAX
            или целая часть |x| не помещается в uint64

    Examples:
        >>> str(from_float_approx(-0.3, 100))
        '-3/10'
        >>> str(from_float_approx(math.pi, 1000))
        '355/113'
    """
    if math.isnan(x) or max_denominator == 0:
        raise InvalidFractionError(
            f"cannot approximate {x!r} with max_denominator={max_denominator}"
        )
    if math.isinf(x):
        raise OutOfRangeError(f"cannot approximate infinite value {x!r}")
    if max_denominator < 0 or max_denominator > UINT64_MAX:
        raise OutOfRangeError(
            f"max_denominator {max_denominator} is outside the unsigned range"
        )
    if x == 0:
        return zero()

    negative = x < 0
    remainder = -x if negative else x

    p_prev, q_prev = 0, 1
    p, q = 1, 0

    for _ in range(config.max_approx_iterations):
        a = math.floor(remainder)

        if mul_overflows(a, p) or mul_overflows(a, q):
            logger.debug("from_float_approx: convergent overflow at a=%d, keeping %d/%d", a, p, q)
            break
        if add_overflows(a * p, p_prev) or add_overflows(a * q, q_prev):
            logger.debug("from_float_approx: convergent overflow at a=%d, keeping %d/%d", a, p, q)
            break

        new_p = a * p + p_prev
        new_q = a * q + q_prev
        if new_q == 0 or new_q > max_denominator:
            break

        p_prev, q_prev = p, q
        p, q = new_p, new_q

        frac_part = remainder - a
        if frac_part == 0:
            break
        remainder = 1.0 / frac_part
        if math.isinf(remainder):
            # Остаток денормализован: следующая подходящая дробь не представима
            break

    if q == 0:
        raise OutOfRangeError(
            f"integer part of {x!r} does not fit the unsigned range, no convergent found"
        )

    return normalize(p, q, negative)
