"""
Fraction Errors — иерархия исключений

Все ошибки ядра наследуются от FractionError, а также от встроенного
исключения соответствующей категории, чтобы вызывающий код мог ловить
их как ZeroDivisionError / OverflowError / ValueError.

FractionPanic намеренно НЕ наследуется от FractionError: это сигнал
нарушенного предусловия в must_new, его не перехватывает FractionChain.
"""


class FractionError(Exception):
    """Базовая ошибка операций над Fraction."""
    pass


class ZeroDenominatorError(FractionError, ZeroDivisionError):
    """
    Конструирование или инверсия привели бы к нулевому знаменателю.

    Единственный сигнал деления на ноль (divide -> invert).
    """
    pass


class OutOfRangeError(FractionError, OverflowError):
    """
    Промежуточная или итоговая магнитуда не помещается в uint64,
    либо модуль float превышает представимую границу.
    """
    pass


class InvalidFractionError(FractionError, ValueError):
    """NaN на входе или некорректный числовой литерал при парсинге."""
    pass


class FractionParseError(InvalidFractionError):
    """
    Синтаксическая ошибка строки (лишние разделители, пустой сегмент).

    Attributes:
        text: Исходная строка
        reason: Описание нарушения грамматики
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")


class FractionPanic(RuntimeError):
    """Невосстановимая ошибка must_new: вызывающий гарантировал валидность входа."""
    pass
