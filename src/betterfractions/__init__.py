"""
betterfractions — точные рациональные числа с 64-битными магнитудами

Fraction хранит беззнаковые numerator/denominator и отдельный флаг знака,
всегда в канонической (сокращённой) форме. Все операции обнаруживают
переполнение до его возникновения.
"""

# Domain: Fraction и ошибки
from betterfractions.core.domain import (
    Fraction,
    FractionError,
    FractionPanic,
    FractionParseError,
    InvalidFractionError,
    OutOfRangeError,
    ZeroDenominatorError,
    must_new,
    new,
    new_from_integer,
    one,
    zero,
)

# Arithmetic
from betterfractions.core.math.arithmetic import (
    abs_fraction,
    add,
    divide,
    invert,
    multiply,
    negate,
    subtract,
)

# Comparison
from betterfractions.core.math.comparison import (
    cmp,
    equal,
    greater,
    greater_eq,
    less,
    less_eq,
)

# Float bridge
from betterfractions.core.math.float_bridge import (
    DEFAULT_FLOAT_BRIDGE_CONFIG,
    FloatBridgeConfig,
    from_float_approx,
    from_float_exact,
    to_float,
)

# Parsing
from betterfractions.core.parsing import (
    parse_decimal,
    parse_fraction,
    parse_rational,
)

# Chain
from betterfractions.chain import FractionChain, start

__all__ = [
    # Domain — Types
    "Fraction",
    # Domain — Exceptions
    "FractionError",
    "FractionPanic",
    "FractionParseError",
    "InvalidFractionError",
    "OutOfRangeError",
    "ZeroDenominatorError",
    # Domain — Constructors
    "must_new",
    "new",
    "new_from_integer",
    "one",
    "zero",
    # Arithmetic
    "abs_fraction",
    "add",
    "divide",
    "invert",
    "multiply",
    "negate",
    "subtract",
    # Comparison
    "cmp",
    "equal",
    "greater",
    "greater_eq",
    "less",
    "less_eq",
    # Float bridge
    "DEFAULT_FLOAT_BRIDGE_CONFIG",
    "FloatBridgeConfig",
    "from_float_approx",
    "from_float_exact",
    "to_float",
    # Parsing
    "parse_decimal",
    "parse_fraction",
    "parse_rational",
    # Chain
    "FractionChain",
    "start",
]
