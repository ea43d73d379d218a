"""
Precision — константы, контексты точности и exact-примитивы для Decimal

Трёхуровневая политика точности (фиксирована на время жизни процесса):
- ROUND_SCALE = 8 дробных знаков — общее округление результатов
- TRIG_PRECISION = 6 значащих цифр — sin/cos (точность отображения)
- HIGH_PRECISION = 20 значащих цифр — промежуточные вычисления
  (exp, ln, разложение дробной степени)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Глобальные контексты (decimal.getcontext(), mpmath.mp) никогда не изменяются;
   каждый вызов создаёт собственный локальный контекст
2. Умножение и сложение в exact-контексте не теряют цифр
3. Деление с фиксированным scale округляется ровно один раз (ROUND_HALF_EVEN)
4. Все операции детерминированы и потокобезопасны
"""

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
)
from fractions import Fraction
from typing import Final, NamedTuple

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

# 20 значащих цифр
E: Final[Decimal] = Decimal("2.7182818284590452354")
PI: Final[Decimal] = Decimal("3.14159265358979323846")

# Приближение золотого сечения, хранится как литерал
FI: Final[Decimal] = Decimal("1.618")


# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Дробных знаков в результатах общего назначения
ROUND_SCALE: Final[int] = 8

# Значащих цифр для промежуточных вычислений (exp, ln, дробные степени)
HIGH_PRECISION: Final[int] = 20

# Значащих цифр для sin/cos
TRIG_PRECISION: Final[int] = 6

# Значащих цифр для tan и логарифмов по основаниям 2/10
STANDARD_PRECISION: Final[int] = ROUND_SCALE

# Дробных знаков показателя при разложении a^(p/q)
RATIONAL_EXPONENT_SCALE: Final[int] = 3

# Дополнительные цифры для составных вычислений перед финальным округлением
GUARD_DIGITS: Final[int] = 10


@dataclass(frozen=True)
class PrecisionPolicy:
    """Сводка политики точности (read-only)."""

    round_scale: int = ROUND_SCALE
    high_precision: int = HIGH_PRECISION
    trig_precision: int = TRIG_PRECISION
    standard_precision: int = STANDARD_PRECISION
    rational_exponent_scale: int = RATIONAL_EXPONENT_SCALE


DEFAULT_POLICY: Final[PrecisionPolicy] = PrecisionPolicy()


# =============================================================================
# КОНТЕКСТЫ
# =============================================================================

def exact_context() -> Context:
    """
    Новый контекст без потери точности.

    Только для умножения, сложения, вычитания и quantize (операции с
    конечным exact-результатом). Создаётся на каждый вызов: флаги и traps
    decimal.Context изменяемы и не должны разделяться между потоками.
    """
    return Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def precision_context(precision: int) -> Context:
    """
    Локальный контекст с заданным числом значащих цифр.

    Округление ROUND_HALF_UP, диапазон экспоненты максимальный, чтобы
    большие промежуточные значения не переполнялись раньше времени.

    Args:
        precision: Число значащих цифр (> 0)

    Returns:
        Новый decimal.Context

    Raises:
        ValueError: Если precision <= 0
    """
    if precision <= 0:
        raise ValueError(f"precision must be positive, got {precision}")

    return Context(prec=precision, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)


def round_significant(x: Decimal, precision: int) -> Decimal:
    """
    Округление до precision значащих цифр (ROUND_HALF_UP).

    Examples:
        >>> round_significant(Decimal("3.14159265"), 6)
        Decimal('3.14159')
    """
    return precision_context(precision).plus(x)


# =============================================================================
# ДЕЛЕНИЕ И SCALE
# =============================================================================


def divide_to_scale(numerator: Decimal, denominator: Decimal, scale: int) -> Decimal:
    """
    Деление с фиксированным числом дробных знаков и ROUND_HALF_EVEN.

    Частное вычисляется точно как рациональное число и округляется один раз,
    поэтому результат не зависит от precision контекста и размера операндов.

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)
        scale: Число дробных знаков результата

    Returns:
        Decimal с ровно scale дробными знаками

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> divide_to_scale(Decimal(1), Decimal(8), 8)
        Decimal('0.12500000')
        >>> divide_to_scale(Decimal(1), Decimal(3), 4)
        Decimal('0.3333')
    """
    quotient = Fraction(numerator) / Fraction(denominator)
    # round() для Fraction: half-to-even
    scaled = round(quotient * 10**scale)
    return Decimal(scaled).scaleb(-scale, exact_context())


def set_scale(x: Decimal, scale: int, rounding: str) -> Decimal:
    """Приведение к scale дробных знаков с явным режимом округления."""
    return x.quantize(Decimal(1).scaleb(-scale), rounding=rounding, context=exact_context())


def strip_trailing_zeros(x: Decimal) -> Decimal:
    """
    Удаление незначащих нулей дробной части.

    В отличие от Decimal.normalize() целые значения не переводятся
    в экспоненциальную форму.

    Examples:
        >>> strip_trailing_zeros(Decimal("0.12500000"))
        Decimal('0.125')
        >>> strip_trailing_zeros(Decimal("100.000"))
        Decimal('100')
    """
    if is_integral(x):
        return x.quantize(Decimal(1), context=exact_context())
    return x.normalize(exact_context())


def is_integral(x: Decimal) -> bool:
    """True если у x нет ненулевой дробной части."""
    return x == x.to_integral_value(context=exact_context())


# =============================================================================
# ДЕКОМПОЗИЦИЯ DECIMAL
# =============================================================================


class DecimalParts(NamedTuple):
    """Знак, модуль целой части и цифры дробной части."""

    negative: bool
    integer: int
    fraction: tuple[int, ...]


def split_decimal(x: Decimal) -> DecimalParts:
    """
    Разложение x через (sign, digits, exponent) без строкового представления.

    Дробная часть возвращается как записана в x, включая хвостовые нули:
    Decimal("2.50") → fraction == (5, 0).

    Raises:
        ValueError: Если x не конечное число (NaN/Infinity)

    Examples:
        >>> split_decimal(Decimal("-12.045"))
        DecimalParts(negative=True, integer=12, fraction=(0, 4, 5))
        >>> split_decimal(Decimal("0.07"))
        DecimalParts(negative=False, integer=0, fraction=(0, 7))
    """
    if not x.is_finite():
        raise ValueError(f"Expected a finite decimal, got {x}")

    sign, digits, exponent = x.as_tuple()
    integer = abs(int(x))

    if exponent >= 0:
        return DecimalParts(bool(sign), integer, ())

    fraction_len = -exponent
    padded = (0,) * max(0, fraction_len - len(digits)) + tuple(digits)
    return DecimalParts(bool(sign), integer, padded[-fraction_len:])


# =============================================================================
# УГЛЫ
# =============================================================================


def to_radians(degrees: Decimal) -> Decimal:
    """
    Перевод градусов в радианы: degrees * PI / 180, ROUND_SCALE знаков.

    Examples:
        >>> to_radians(Decimal(180))
        Decimal('3.14159265')
        >>> to_radians(Decimal(90))
        Decimal('1.57079633')
    """
    return divide_to_scale(exact_context().multiply(degrees, PI), Decimal(180), ROUND_SCALE)
