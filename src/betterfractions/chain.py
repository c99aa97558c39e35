"""
Fraction Chain — цепочка операций с короткозамыкающей ошибкой

    value, error = start(a).sum(b).sub(c).div(d).result()

Первая FractionError фиксируется в цепочке, все последующие вызовы
становятся no-op и просто передают её дальше. FractionPanic и прочие
исключения не перехватываются.
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional

from betterfractions.core.domain.errors import FractionError
from betterfractions.core.domain.fraction import Fraction
from betterfractions.core.math.arithmetic import (
    abs_fraction,
    add,
    divide,
    invert,
    multiply,
    negate,
    subtract,
)


@dataclass(frozen=True)
class FractionChain:
    """Состояние цепочки: текущее значение и первая зафиксированная ошибка."""

    value: Fraction
    error: Optional[FractionError] = None

    def _apply(self, operation: Callable[[Fraction], Fraction]) -> "FractionChain":
        if self.error is not None:
            return self
        try:
            return replace(self, value=operation(self.value))
        except FractionError as e:
            return replace(self, error=e)

    def sum(self, other: Fraction) -> "FractionChain":
        return self._apply(lambda v: add(v, other))

    def sub(self, other: Fraction) -> "FractionChain":
        return self._apply(lambda v: subtract(v, other))

    def mult(self, other: Fraction) -> "FractionChain":
        return self._apply(lambda v: multiply(v, other))

    def div(self, other: Fraction) -> "FractionChain":
        return self._apply(lambda v: divide(v, other))

    def negate(self) -> "FractionChain":
        return self._apply(negate)

    def invert(self) -> "FractionChain":
        return self._apply(invert)

    def abs(self) -> "FractionChain":
        return self._apply(abs_fraction)

    def result(self) -> tuple[Fraction, Optional[FractionError]]:
        """
        Итог цепочки.

        Returns:
            (value, error): при ошибке value: последнее успешное значение
        """
        return self.value, self.error

    def unwrap(self) -> Fraction:
        """
        Значение цепочки или исключение.

        Raises:
            FractionError: Первая зафиксированная ошибка
        """
        if self.error is not None:
            raise self.error
        return self.value


def start(initial: Fraction) -> FractionChain:
    """Начало цепочки с исходного значения."""
    return FractionChain(value=initial)
