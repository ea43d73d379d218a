"""
Factorial — факториал с шагом

factorial(a, step) = a * (a - step) * (a - 2*step) * ... пока множитель >= 1

- step == 1 и a в диапазоне signed 64-bit: сбалансированное произведение
  по отрезку [1, trunc(a)] (divide-and-conquer, глубина O(log a))
- иначе: линейное накопление с шагом step (допускает дробное a)
"""

from decimal import Decimal
from typing import Final

from src.core.math.errors import CalculationError, MathErrorKind
from src.core.math.precision import exact_context

# Максимальный допустимый аргумент
FACTORIAL_LIMIT: Final[Decimal] = Decimal(100000)

LONG_MAX: Final[int] = 2**63 - 1


def _product_tree(low: int, high: int) -> int:
    """Произведение low * (low + 1) * ... * high делением отрезка пополам."""
    if low > high:
        return 1
    if low == high:
        return low
    if high - low == 1:
        return low * high

    mid = low + (high - low) // 2
    return _product_tree(low, mid) * _product_tree(mid + 1, high)


def factorial(a: Decimal, step: int = 1) -> Decimal:
    """
    Факториал a с шагом step (step=2 — двойной факториал).

    Args:
        a: Аргумент (<= FACTORIAL_LIMIT)
        step: Шаг убывания множителя (>= 1)

    Returns:
        Точное произведение

    Raises:
        CalculationError: FACTORIAL_LIMIT_EXCEEDED если a > FACTORIAL_LIMIT
        ValueError: Если step < 1

    Examples:
        >>> factorial(Decimal(5))
        Decimal('120')
        >>> factorial(Decimal(6), 2)
        Decimal('48')
    """
    if step < 1:
        raise ValueError(f"step must be >= 1, got {step}")

    if a > FACTORIAL_LIMIT:
        raise CalculationError(
            MathErrorKind.FACTORIAL_LIMIT_EXCEEDED,
            f"Factorial argument {a} exceeds limit {FACTORIAL_LIMIT}",
        )

    if a == 0:
        return Decimal(1)

    if step == 1 and a <= LONG_MAX:
        return Decimal(_product_tree(1, int(a)))

    result = Decimal(1)
    factor = a
    while factor >= 1:
        result = exact_context().multiply(result, factor)
        factor = exact_context().subtract(factor, step)

    return result
