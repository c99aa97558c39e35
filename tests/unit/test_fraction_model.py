"""
Тесты для модели Fraction и конструкторов

Проверяет:
1. Нормализацию и правило знака (XOR) в new()
2. Канонический ноль
3. Валидацию модели Pydantic (каноническая форма, strict, frozen)
4. Формат отображения
5. Python-протокол: операторы, сравнения, hash, float
6. must_new
"""

import pytest
from pydantic import ValidationError

from betterfractions import (
    Fraction,
    FractionError,
    FractionPanic,
    OutOfRangeError,
    ZeroDenominatorError,
    must_new,
    new,
    new_from_integer,
    one,
    zero,
)
from betterfractions.core.domain.fraction import normalize
from betterfractions.core.math.integer_utils import UINT64_MAX, gcd

# =============================================================================
# ТЕСТЫ КОНСТРУКТОРОВ
# =============================================================================


class TestNew:
    """Тесты new()"""

    def test_normalizes_and_sign(self) -> None:
        """-6/-8 → 3/4, положительная"""
        f = new(-6, -8)
        assert str(f) == "3/4"
        assert not f.negative

    @pytest.mark.parametrize(
        "n, d, negative",
        [
            (6, 8, False),
            (-6, 8, True),
            (6, -8, True),
            (-6, -8, False),
            (12, 18, False),
            (-7, 1, True),
        ],
    )
    def test_sign_is_xor_and_reduced(self, n: int, d: int, negative: bool) -> None:
        """Знак = XOR знаков операндов, НОД полей == 1"""
        f = new(n, d)
        assert f.negative is negative
        assert gcd(f.numerator, f.denominator) == 1

    def test_zero_denominator(self) -> None:
        """Знаменатель 0 → ZeroDenominatorError"""
        with pytest.raises(ZeroDenominatorError, match="cannot be zero"):
            new(1, 0)

        with pytest.raises(ZeroDenominatorError):
            new(0, 0)

    def test_zero_denominator_is_zero_division(self) -> None:
        """ZeroDenominatorError ловится как ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            new(5, 0)

    def test_magnitude_beyond_uint64(self) -> None:
        """Магнитуда > 2^64-1 → OutOfRangeError"""
        with pytest.raises(OutOfRangeError):
            new(2**64, 1)

        with pytest.raises(OutOfRangeError):
            new(1, -(2**64))

    def test_extreme_values(self) -> None:
        """Крайние значения знаковых и беззнаковых разрядностей"""
        f = new(-(2**63), 1)
        assert f.numerator == 2**63
        assert f.negative

        g = new(UINT64_MAX, UINT64_MAX)
        assert g == one()

    def test_non_integer_rejected(self) -> None:
        """float не является целым операндом"""
        with pytest.raises(TypeError):
            new(1.5, 2)  # type: ignore[arg-type]


class TestCanonicalZero:
    """Тесты канонического нуля"""

    @pytest.mark.parametrize("d", [1, 7, -7, UINT64_MAX])
    def test_zero_numerator_is_canonical(self, d: int) -> None:
        """new(0, d) == 0/1 положительный"""
        z = new(0, d)
        assert z.numerator == 0
        assert z.denominator == 1
        assert not z.negative
        assert z == new_from_integer(0)
        assert z == zero()

    def test_zero_display(self) -> None:
        """Ноль отображается как строка 0"""
        assert str(zero()) == "0"
        assert str(-zero()) == "0"

    def test_negated_zero_is_zero(self) -> None:
        """Отрицание нуля — тот же канонический ноль"""
        z = zero()
        assert -z == z
        assert not (-z).negative


class TestNewFromInteger:
    """Тесты new_from_integer / zero / one"""

    def test_values(self) -> None:
        assert str(new_from_integer(42)) == "42"
        assert str(new_from_integer(-42)) == "-42"
        assert new_from_integer(1) == one()
        assert new_from_integer(UINT64_MAX).numerator == UINT64_MAX

    def test_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            new_from_integer(-(2**64))

    def test_constants(self) -> None:
        assert (zero().numerator, zero().denominator, zero().negative) == (0, 1, False)
        assert (one().numerator, one().denominator, one().negative) == (1, 1, False)


class TestNormalize:
    """Тесты normalize()"""

    def test_reduces(self) -> None:
        f = normalize(10, 4, True)
        assert (f.numerator, f.denominator, f.negative) == (5, 2, True)

    def test_zero_forced_canonical(self) -> None:
        f = normalize(0, 99, True)
        assert (f.numerator, f.denominator, f.negative) == (0, 1, False)

    def test_idempotent(self) -> None:
        f = normalize(18, 12, False)
        assert normalize(f.numerator, f.denominator, f.negative) == f


class TestMustNew:
    """Тесты must_new()"""

    def test_valid(self) -> None:
        assert must_new(2, 4) == new(1, 2)

    def test_invalid_panics(self) -> None:
        """Ошибка превращается в FractionPanic"""
        with pytest.raises(FractionPanic, match="must_new"):
            must_new(1, 0)

    def test_panic_is_not_fraction_error(self) -> None:
        """FractionPanic не ловится как FractionError"""
        assert not issubclass(FractionPanic, FractionError)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ МОДЕЛИ
# =============================================================================


class TestFractionModelValidation:
    """Тесты инвариантов модели Pydantic"""

    def test_direct_canonical_accepted(self) -> None:
        f = Fraction(numerator=3, denominator=4, negative=True)
        assert str(f) == "-3/4"

    def test_unreduced_rejected(self) -> None:
        with pytest.raises(ValidationError, match="not reduced"):
            Fraction(numerator=2, denominator=4)

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="canonical"):
            Fraction(numerator=0, denominator=1, negative=True)

    def test_zero_with_denominator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Fraction(numerator=0, denominator=5)

    def test_zero_denominator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Fraction(numerator=1, denominator=0)

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Fraction(numerator=UINT64_MAX + 1, denominator=1)

        with pytest.raises(ValidationError):
            Fraction(numerator=-1, denominator=1)

    def test_strict_types(self) -> None:
        """Строки и float не приводятся к int"""
        with pytest.raises(ValidationError):
            Fraction(numerator="3", denominator=4)  # type: ignore[arg-type]

        with pytest.raises(ValidationError):
            Fraction(numerator=3.0, denominator=4)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Поля нельзя изменить после создания"""
        f = new(1, 2)
        with pytest.raises(ValidationError):
            f.numerator = 3  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ ОТОБРАЖЕНИЯ И PYTHON-ПРОТОКОЛА
# =============================================================================


class TestDisplay:
    """Тесты str()"""

    @pytest.mark.parametrize(
        "n, d, expected",
        [
            (4, 2, "2"),
            (-7, 3, "-7/3"),
            (3, 4, "3/4"),
            (-5, 1, "-5"),
            (UINT64_MAX, 2, f"{UINT64_MAX}/2"),
        ],
    )
    def test_format(self, n: int, d: int, expected: str) -> None:
        assert str(new(n, d)) == expected


class TestOperators:
    """Тесты операторов и промоушена int"""

    def test_binary_operators(self) -> None:
        a = new(1, 2)
        b = new(1, 3)
        assert a + b == new(5, 6)
        assert a - b == new(1, 6)
        assert a * b == new(1, 6)
        assert a / b == new(3, 2)

    def test_int_operands(self) -> None:
        """int промоутится через new_from_integer, включая reflected"""
        half = new(1, 2)
        assert half + 1 == new(3, 2)
        assert 1 + half == new(3, 2)
        assert 1 - half == half
        assert 2 * new(1, 3) == new(2, 3)
        assert 1 / new(2, 3) == new(3, 2)
        assert new(3, 4) / 3 == new(1, 4)

    def test_unary(self) -> None:
        assert -new(2, 3) == new(-2, 3)
        assert abs(new(-2, 3)) == new(2, 3)

    def test_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            new(1, 2) / zero()

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            new(1, 2) + 0.5  # type: ignore[operator]

    def test_comparisons(self) -> None:
        assert new(1, 2) < new(2, 3)
        assert new(1, 2) <= new(1, 2)
        assert new(-1, 2) > new(-2, 3)
        assert new(2, 1) >= 2
        assert new(2, 1) == 2
        assert new(1, 2) != 0

    def test_eq_with_other_types(self) -> None:
        assert (new(1, 2) == "1/2") is False

    def test_sorting(self) -> None:
        values = [new(3, 4), new(-1, 2), zero(), new(1, 3), new(-5, 4)]
        assert [str(v) for v in sorted(values)] == ["-5/4", "-1/2", "0", "1/3", "3/4"]

    def test_hash_consistent_with_eq(self) -> None:
        assert len({new(1, 2), new(2, 4), new(-3, -6)}) == 1
        assert hash(new(0, 5)) == hash(zero())

    def test_hash_integral_matches_int(self) -> None:
        """Целое значение хэшируется как равный ему int"""
        assert hash(new(2, 1)) == hash(2)
        assert hash(new(-7, 1)) == hash(-7)
        assert hash(zero()) == hash(0)
        assert {2: "a"}.get(new(2, 1)) == "a"
        assert new(-7, 1) in {-7, 3}

    def test_eq_with_int_beyond_uint64(self) -> None:
        """int вне uint64 не равен ни одной дроби, исключение не возникает"""
        assert (new(1, 2) == 2**70) is False
        assert new(1, 2) != -(2**70)
        assert new(UINT64_MAX, 1) not in [2**64, -(2**64)]

    @pytest.mark.parametrize("big", [2**64, 2**70])
    def test_ordering_with_int_beyond_uint64(self, big: int) -> None:
        """Порядок с int вне uint64 определяется знаком int"""
        f = new(UINT64_MAX, 1)
        assert f < big
        assert f <= big
        assert not f > big
        assert -big < f
        assert f >= -big
        assert not f <= -big
        assert big > new(-UINT64_MAX, 1)

    def test_float(self) -> None:
        assert float(new(1, 4)) == 0.25
        assert float(new(-1, 4)) == -0.25

    def test_method_forms(self) -> None:
        assert new(2, 3).invert() == new(3, 2)
        assert new(1, 2).cmp(new(1, 3)) == 1
        assert zero().is_zero()
        assert new(-1, 2).is_negative()
