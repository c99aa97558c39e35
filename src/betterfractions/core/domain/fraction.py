"""
Fraction — точное рациональное число в канонической форме

Immutable Pydantic модель: магнитуды numerator/denominator хранятся как
беззнаковые 64-битные целые, знак хранится отдельно в флаге negative.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются валидатором модели):
1. denominator != 0
2. gcd(numerator, denominator) == 1 (полностью сокращена)
3. numerator == 0 => negative is False и denominator == 1 (канонический ноль)
4. Поля не изменяются после создания (frozen=True)

Все производители значений (конструкторы, парсеры, арифметика, float bridge)
возвращают результат через normalize(), нормализация никогда не откладывается.
"""

from typing import Union

from pydantic import BaseModel, Field, model_validator

from betterfractions.core.domain.errors import (
    FractionError,
    FractionPanic,
    OutOfRangeError,
    ZeroDenominatorError,
)
from betterfractions.core.math.integer_utils import (
    UINT64_MAX,
    gcd,
    is_negative_int,
    to_magnitude,
)


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Точная дробь со знаком, хранимым отдельно от магнитуд.

    Не создавайте напрямую: используйте new(), new_from_integer(), zero(),
    one() или парсеры. Прямое создание неканонического значения
    (например, 2/4) отклоняется с pydantic.ValidationError.
    """

    numerator: int = Field(..., ge=0, le=UINT64_MAX, description="Магнитуда числителя")
    denominator: int = Field(..., ge=1, le=UINT64_MAX, description="Магнитуда знаменателя")
    negative: bool = Field(default=False, description="Знак (True: отрицательная)")

    model_config = {"frozen": True, "strict": True}  # Immutable

    @model_validator(mode="after")
    def validate_canonical(self) -> "Fraction":
        """Проверка канонической формы."""
        if self.numerator == 0:
            if self.denominator != 1 or self.negative:
                raise ValueError(
                    f"zero must be canonical 0/1 positive, got "
                    f"{self.numerator}/{self.denominator} (negative={self.negative})"
                )
            return self

        if gcd(self.numerator, self.denominator) != 1:
            raise ValueError(
                f"fraction {self.numerator}/{self.denominator} is not reduced"
            )
        return self

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_negative(self) -> bool:
        return self.negative

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """
        Формат отображения: "0", "[-]n" при denominator == 1, иначе "[-]n/d".

        Examples:
            >>> str(new(-7, 3))
            '-7/3'
            >>> str(new(4, 2))
            '2'
        """
        if self.numerator == 0:
            return "0"

        sign = "-" if self.negative else ""
        if self.denominator == 1:
            return f"{sign}{self.numerator}"
        return f"{sign}{self.numerator}/{self.denominator}"

    def __float__(self) -> float:
        from betterfractions.core.math.float_bridge import to_float

        return to_float(self)

    # -------------------------------------------------------------------------
    # Арифметика (method form)
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Fraction":
        from betterfractions.core.math.arithmetic import negate

        return negate(self)

    def __abs__(self) -> "Fraction":
        from betterfractions.core.math.arithmetic import abs_fraction

        return abs_fraction(self)

    def __add__(self, other: Union["Fraction", int]) -> "Fraction":
        from betterfractions.core.math.arithmetic import add

        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other: int) -> "Fraction":
        from betterfractions.core.math.arithmetic import add

        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return add(lhs, self)

    def __sub__(self, other: Union["Fraction", int]) -> "Fraction":
        from betterfractions.core.math.arithmetic import subtract

        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return subtract(self, rhs)

    def __rsub__(self, other: int) -> "Fraction":
        from betterfractions.core.math.arithmetic import subtract

        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return subtract(lhs, self)

    def __mul__(self, other: Union["Fraction", int]) -> "Fraction":
        from betterfractions.core.math.arithmetic import multiply

        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return multiply(self, rhs)

    def __rmul__(self, other: int) -> "Fraction":
        from betterfractions.core.math.arithmetic import multiply

        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return multiply(lhs, self)

    def __truediv__(self, other: Union["Fraction", int]) -> "Fraction":
        from betterfractions.core.math.arithmetic import divide

        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return divide(self, rhs)

    def __rtruediv__(self, other: int) -> "Fraction":
        from betterfractions.core.math.arithmetic import divide

        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return divide(lhs, self)

    def invert(self) -> "Fraction":
        """Обратная дробь (ZeroDenominatorError для нуля)."""
        from betterfractions.core.math.arithmetic import invert

        return invert(self)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def cmp(self, other: "Fraction") -> int:
        from betterfractions.core.math.comparison import cmp

        return cmp(self, other)

    def __eq__(self, other: object) -> bool:
        from betterfractions.core.math.comparison import equal

        try:
            rhs = _coerce(other)
        except OutOfRangeError:
            # int вне uint64 не равен ни одной Fraction
            return False
        if rhs is None:
            return NotImplemented
        return equal(self, rhs)

    def __hash__(self) -> int:
        # Целые значения хэшируются как int: new(2, 1) == 2
        if self.denominator == 1:
            return hash(-self.numerator if self.negative else self.numerator)
        return hash((self.numerator, self.denominator, self.negative))

    def _cmp_operand(self, other: object) -> int | None:
        """
        cmp с Fraction или int; None для прочих типов.

        int вне uint64 по модулю больше любой Fraction, порядок решает его знак.
        """
        try:
            rhs = _coerce(other)
        except OutOfRangeError:
            return -1 if other > 0 else 1  # type: ignore[operator]
        if rhs is None:
            return None
        return self.cmp(rhs)

    def __lt__(self, other: Union["Fraction", int]) -> bool:
        c = self._cmp_operand(other)
        if c is None:
            return NotImplemented
        return c < 0

    def __le__(self, other: Union["Fraction", int]) -> bool:
        c = self._cmp_operand(other)
        if c is None:
            return NotImplemented
        return c <= 0

    def __gt__(self, other: Union["Fraction", int]) -> bool:
        c = self._cmp_operand(other)
        if c is None:
            return NotImplemented
        return c > 0

    def __ge__(self, other: Union["Fraction", int]) -> bool:
        c = self._cmp_operand(other)
        if c is None:
            return NotImplemented
        return c >= 0


def _coerce(value: object) -> Fraction | None:
    """Промоушен операнда: Fraction как есть, int через new_from_integer."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return new_from_integer(value)
    return None


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(numerator: int, denominator: int, negative: bool) -> Fraction:
    """
    Каноническая Fraction из магнитуд и знака.

    Делит на НОД и применяет правило канонического нуля. Идемпотентна:
    normalize от уже канонических полей возвращает равное значение.

    Args:
        numerator: Магнитуда числителя (>= 0)
        denominator: Магнитуда знаменателя (>= 1)
        negative: Знак
    """
    if numerator == 0:
        return Fraction(numerator=0, denominator=1, negative=False)

    g = gcd(numerator, denominator)
    return Fraction(
        numerator=numerator // g,
        denominator=denominator // g,
        negative=negative,
    )


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def zero() -> Fraction:
    """Канонический ноль 0/1."""
    return Fraction(numerator=0, denominator=1, negative=False)


def one() -> Fraction:
    """Единица 1/1."""
    return Fraction(numerator=1, denominator=1, negative=False)


def new(numerator: int, denominator: int) -> Fraction:
    """
    Создание дроби из числителя и знаменателя любой целой разрядности.

    Знак вычисляется как XOR знаков операндов, магнитуды сокращаются на НОД.
    Нулевой числитель даёт канонический ноль независимо от знаменателя
    (после проверки знаменателя на ноль).

    Args:
        numerator: Знаковое или беззнаковое целое
        denominator: Знаковое или беззнаковое целое, != 0

    Returns:
        Каноническая Fraction

    Raises:
        ZeroDenominatorError: Если denominator == 0
        OutOfRangeError: Если магнитуда операнда превышает uint64
        TypeError: Если операнд не целый

    Examples:
        >>> str(new(-6, -8))
        '3/4'
        >>> str(new(0, -7))
        '0'
    """
    d = to_magnitude(denominator)
    if d == 0:
        raise ZeroDenominatorError(f"denominator cannot be zero (numerator={numerator})")

    n = to_magnitude(numerator)
    if n == 0:
        return zero()

    # Знак: отрицательная, только если ровно один из операндов отрицательный
    negative = is_negative_int(numerator) != is_negative_int(denominator)
    return normalize(n, d, negative)


def new_from_integer(value: int) -> Fraction:
    """
    Дробь value/1.

    Raises:
        OutOfRangeError: Если abs(value) > UINT64_MAX
    """
    n = to_magnitude(value)
    return normalize(n, 1, is_negative_int(value))


def must_new(numerator: int, denominator: int) -> Fraction:
    """
    Небезопасный вариант new(): вызывающий гарантирует валидность входа.

    Любая FractionError превращается в FractionPanic, которая не является
    FractionError и не перехватывается кодом, собирающим ошибки.
    Используйте только для заранее проверенных констант.

    Raises:
        FractionPanic: Если new() завершилась ошибкой
    """
    try:
        return new(numerator, denominator)
    except FractionError as e:
        raise FractionPanic(f"must_new({numerator}, {denominator}) failed: {e}") from e
