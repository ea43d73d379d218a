"""
Core math modules

Математические функции произвольной точности с фиксированной политикой
округления и доменных ошибок.
"""

# Precision
from src.core.math.precision import (
    # Constants
    DEFAULT_POLICY,
    E,
    FI,
    GUARD_DIGITS,
    HIGH_PRECISION,
    PI,
    RATIONAL_EXPONENT_SCALE,
    ROUND_SCALE,
    STANDARD_PRECISION,
    TRIG_PRECISION,
    # Types
    DecimalParts,
    PrecisionPolicy,
    # Utilities
    divide_to_scale,
    is_integral,
    round_significant,
    split_decimal,
    strip_trailing_zeros,
    to_radians,
)

# Errors
from src.core.math.errors import (
    CalculationError,
    MathErrorKind,
    MathResult,
    evaluate_safely,
)

# Elementary functions
from src.core.math.elementary import (
    exp,
    ln,
    log,
    log2,
    log_with_base,
    pow_,
    pow_with_exp,
    root_with_base,
)

# Trigonometry
from src.core.math.trigonometry import cos, sin, tan

# Factorial
from src.core.math.factorial import FACTORIAL_LIMIT, factorial

# Rounding
from src.core.math.rounding import abs_, ceil, floor, round_

__all__ = [
    # Precision — Constants
    "E",
    "PI",
    "FI",
    "ROUND_SCALE",
    "HIGH_PRECISION",
    "TRIG_PRECISION",
    "STANDARD_PRECISION",
    "RATIONAL_EXPONENT_SCALE",
    "GUARD_DIGITS",
    "DEFAULT_POLICY",
    # Precision — Types
    "DecimalParts",
    "PrecisionPolicy",
    # Precision — Utilities
    "divide_to_scale",
    "is_integral",
    "round_significant",
    "split_decimal",
    "strip_trailing_zeros",
    "to_radians",
    # Errors
    "CalculationError",
    "MathErrorKind",
    "MathResult",
    "evaluate_safely",
    # Elementary
    "exp",
    "ln",
    "log",
    "log2",
    "log_with_base",
    "pow_",
    "pow_with_exp",
    "root_with_base",
    # Trigonometry
    "sin",
    "cos",
    "tan",
    # Factorial
    "FACTORIAL_LIMIT",
    "factorial",
    # Rounding
    "abs_",
    "ceil",
    "floor",
    "round_",
]
