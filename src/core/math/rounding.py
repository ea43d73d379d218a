"""
Rounding — abs, floor, ceil, round через декомпозицию Decimal

Округление не использует quantize/to_integral: значение раскладывается на
знак, модуль целой части и цифры дробной части (split_decimal), результат
собирается из целой части.

Правила:
- ceil: нулевая дробная часть → целая часть; иначе |целая| + 1 со знаком x
- round: первая дробная цифра 0-4 → усечение, 5-9 → |целая| + 1 со знаком x
  (half-up только по первой дробной цифре)
- floor: усечение для x >= 0; для x < 0 с ненулевой дробной частью
  |целая| + 1 со знаком минус
- Значения без дробной части возвращаются без изменений
"""

from decimal import Decimal

from src.core.math.precision import split_decimal


def _signed(magnitude: int, negative: bool) -> Decimal:
    return Decimal(-magnitude if negative else magnitude)


def abs_(x: Decimal) -> Decimal:
    """Модуль x: смена знака для отрицательных значений."""
    if x < 0:
        return x.copy_negate()
    return x


def floor(x: Decimal) -> Decimal:
    """
    Наибольшее целое, не превосходящее x.

    Examples:
        >>> floor(Decimal("2.7"))
        Decimal('2')
        >>> floor(Decimal("-2.1"))
        Decimal('-3')
    """
    parts = split_decimal(x)
    if not parts.fraction:
        return x

    if parts.negative and any(parts.fraction):
        return _signed(parts.integer + 1, True)

    return _signed(parts.integer, parts.negative)


def ceil(x: Decimal) -> Decimal:
    """
    Целая часть x, увеличенная по модулю на 1 при ненулевой дробной части.

    Examples:
        >>> ceil(Decimal("2.1"))
        Decimal('3')
        >>> ceil(Decimal("2.0"))
        Decimal('2')
        >>> ceil(Decimal("-2.1"))
        Decimal('-3')
    """
    parts = split_decimal(x)
    if not parts.fraction:
        return x

    if not any(parts.fraction):
        return _signed(parts.integer, parts.negative)

    return _signed(parts.integer + 1, parts.negative)


def round_(x: Decimal) -> Decimal:
    """
    Округление по первой дробной цифре (half-up по модулю).

    Examples:
        >>> round_(Decimal("2.3"))
        Decimal('2')
        >>> round_(Decimal("2.5"))
        Decimal('3')
        >>> round_(Decimal("-2.5"))
        Decimal('-3')
    """
    parts = split_decimal(x)
    if not parts.fraction:
        return x

    if parts.fraction[0] < 5:
        return _signed(parts.integer, parts.negative)

    return _signed(parts.integer + 1, parts.negative)
