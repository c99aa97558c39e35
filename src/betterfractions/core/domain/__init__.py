"""
Domain models and errors.

Содержит Fraction и иерархию исключений FractionError.
"""

from betterfractions.core.domain.errors import (
    FractionError,
    FractionPanic,
    FractionParseError,
    InvalidFractionError,
    OutOfRangeError,
    ZeroDenominatorError,
)
from betterfractions.core.domain.fraction import (
    Fraction,
    must_new,
    new,
    new_from_integer,
    normalize,
    one,
    zero,
)

__all__ = [
    # Errors
    "FractionError",
    "FractionPanic",
    "FractionParseError",
    "InvalidFractionError",
    "OutOfRangeError",
    "ZeroDenominatorError",
    # Fraction model
    "Fraction",
    "must_new",
    "new",
    "new_from_integer",
    "normalize",
    "one",
    "zero",
]
