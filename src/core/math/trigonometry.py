"""
Trigonometry — sin/cos/tan для аргументов в градусах

Аргумент переводится в радианы (to_radians, ROUND_SCALE знаков), значение
функции вычисляется mpmath с HIGH_PRECISION + GUARD_DIGITS цифрами и
округляется до целевой точности:
- sin, cos — TRIG_PRECISION (6) значащих цифр
- tan — STANDARD_PRECISION (8) значащих цифр

Глобальный mpmath.mp не используется: каждый вызов работает в собственном
MPContext, поэтому функции потокобезопасны.
"""

from decimal import Decimal

from mpmath import MPContext

from src.core.math.errors import CalculationError, MathErrorKind
from src.core.math.precision import (
    GUARD_DIGITS,
    HIGH_PRECISION,
    STANDARD_PRECISION,
    TRIG_PRECISION,
    round_significant,
    to_radians,
)

_RIGHT_ANGLE = Decimal(90)


def _evaluate(name: str, degrees: Decimal, precision: int) -> Decimal:
    radians = to_radians(degrees)
    digits = HIGH_PRECISION + GUARD_DIGITS

    ctx = MPContext()
    ctx.dps = digits
    value = getattr(ctx, name)(ctx.mpf(str(radians)))
    text = ctx.nstr(value, digits)

    return round_significant(Decimal(text), precision)


def sin(x: Decimal) -> Decimal:
    """
    Синус угла x (градусы), TRIG_PRECISION значащих цифр.

    Examples:
        >>> sin(Decimal(30))
        Decimal('0.500000')
    """
    return _evaluate("sin", x, TRIG_PRECISION)


def cos(x: Decimal) -> Decimal:
    """Косинус угла x (градусы), TRIG_PRECISION значащих цифр."""
    return _evaluate("cos", x, TRIG_PRECISION)


def tan(x: Decimal) -> Decimal:
    """
    Тангенс угла x (градусы), STANDARD_PRECISION значащих цифр.

    Raises:
        CalculationError: TANGENT_OF_NINETY если x == 90
    """
    if x == _RIGHT_ANGLE:
        raise CalculationError(MathErrorKind.TANGENT_OF_NINETY)

    return _evaluate("tan", x, STANDARD_PRECISION)
