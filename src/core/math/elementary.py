"""
Elementary — экспонента, логарифмы, корни и степени произвольной точности

Функции:
- exp, ln, log (base 10), log2 — HIGH_PRECISION значащих цифр
- log_with_base — основания 10 и 2 напрямую (STANDARD_PRECISION),
  прочие через log2(x) / log2(base) с ROUND_SCALE знаками
- root_with_base — корень через тождество exp(ln(a) / n)
- pow_ — целая степень возведением в квадрат; дробная степень
  раскладывается в целую степень + целый корень
- pow_with_exp — степень через exp(n * ln(a))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Логарифм отрицательного числа → NEGATIVE_LOG_ARGUMENT, нуля → ZERO_LOG_ARGUMENT
2. 0^n: n < 0 → NAN, n == 0 → UNDEFINED, n > 0 → 0
3. Корень чётной степени из отрицательного числа → EVEN_ROOT_OF_NEGATIVE
4. Целые степени вычисляются точно (без округления)
"""

from decimal import ROUND_HALF_DOWN, Decimal
from fractions import Fraction

from src.core.math.errors import CalculationError, MathErrorKind
from src.core.math.precision import (
    GUARD_DIGITS,
    HIGH_PRECISION,
    RATIONAL_EXPONENT_SCALE,
    ROUND_SCALE,
    STANDARD_PRECISION,
    divide_to_scale,
    exact_context,
    is_integral,
    precision_context,
    round_significant,
    set_scale,
    strip_trailing_zeros,
)

_TWO = Decimal(2)
_TEN = Decimal(10)


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМЫ
# =============================================================================


def exp(x: Decimal) -> Decimal:
    """
    e^x с HIGH_PRECISION значащими цифрами.

    Examples:
        >>> exp(Decimal(1))
        Decimal('2.7182818284590452354')
    """
    return precision_context(HIGH_PRECISION).exp(x)


def _check_log_argument(x: Decimal) -> None:
    if x < 0:
        raise CalculationError(
            MathErrorKind.NEGATIVE_LOG_ARGUMENT,
            f"Logarithm of a negative number: {x}",
        )
    if x == 0:
        raise CalculationError(MathErrorKind.ZERO_LOG_ARGUMENT)


def ln(x: Decimal) -> Decimal:
    """
    Натуральный логарифм, HIGH_PRECISION значащих цифр.

    Raises:
        CalculationError: NEGATIVE_LOG_ARGUMENT если x < 0,
            ZERO_LOG_ARGUMENT если x == 0
    """
    _check_log_argument(x)
    return precision_context(HIGH_PRECISION).ln(x)


def log(x: Decimal, precision: int = HIGH_PRECISION) -> Decimal:
    """
    Десятичный логарифм.

    Raises:
        CalculationError: NEGATIVE_LOG_ARGUMENT если x < 0,
            ZERO_LOG_ARGUMENT если x == 0
    """
    _check_log_argument(x)
    return precision_context(precision).log10(x)


def log2(x: Decimal, precision: int = HIGH_PRECISION) -> Decimal:
    """
    Двоичный логарифм: ln(x) / ln(2) с GUARD_DIGITS запасом,
    затем округление до precision значащих цифр.

    Raises:
        CalculationError: NEGATIVE_LOG_ARGUMENT если x < 0,
            ZERO_LOG_ARGUMENT если x == 0

    Examples:
        >>> log2(Decimal(1024), 8)
        Decimal('10.000000')
    """
    _check_log_argument(x)

    work = precision_context(precision + GUARD_DIGITS)
    value = work.divide(work.ln(x), work.ln(_TWO))
    return round_significant(value, precision)


def log_with_base(x: Decimal, base: Decimal) -> Decimal:
    """
    Логарифм x по основанию base.

    Основания 10 и 2 вычисляются напрямую с STANDARD_PRECISION значащими
    цифрами. Остальные — log2(x) / log2(base) на HIGH_PRECISION, частное
    округляется до ROUND_SCALE дробных знаков (ROUND_HALF_EVEN).

    Args:
        x: Аргумент (>= 0)
        base: Основание (> 0, != 1)

    Returns:
        log_base(x)

    Raises:
        CalculationError:
            NEGATIVE_LOG_ARGUMENT если x < 0,
            ZERO_LOG_ARGUMENT если x == 0,
            INVALID_LOG_BASE если base <= 0 или base == 1

    Examples:
        >>> log_with_base(Decimal(8), Decimal(2))
        Decimal('3.0000000')
        >>> log_with_base(Decimal(81), Decimal(3))
        Decimal('4.00000000')
    """
    if x < 0:
        raise CalculationError(
            MathErrorKind.NEGATIVE_LOG_ARGUMENT,
            f"Logarithm of a negative number: {x}",
        )

    if base == _TEN:
        return log(x, STANDARD_PRECISION)
    if base == _TWO:
        return log2(x, STANDARD_PRECISION)

    if base <= 0 or base == 1:
        raise CalculationError(
            MathErrorKind.INVALID_LOG_BASE,
            f"Invalid logarithm base: {base}",
        )

    log_x = log2(x, HIGH_PRECISION)
    log_base = log2(base, HIGH_PRECISION)
    return divide_to_scale(log_x, log_base, ROUND_SCALE)


# =============================================================================
# КОРНИ
# =============================================================================


def root_with_base(a: Decimal, n: Decimal) -> Decimal:
    """
    Корень степени n из a через exp(ln(a) / n).

    ln(a) / n округляется до HIGH_PRECISION дробных знаков (ROUND_HALF_EVEN),
    exp — HIGH_PRECISION значащих цифр. Для отрицательного a и нечётной
    целой степени возвращается -root(|a|, n).

    Args:
        a: Подкоренное выражение
        n: Степень корня (!= 0)

    Returns:
        a^(1/n)

    Raises:
        CalculationError:
            EVEN_ROOT_OF_NEGATIVE если n чётное целое и a < 0,
            UNDEFINED если n == 0 и a != 0,
            NEGATIVE_LOG_ARGUMENT если a < 0 и n не целое

    Examples:
        >>> root_with_base(Decimal(0), Decimal(3))
        Decimal('0')
    """
    if a == 0:
        return Decimal(0)

    if n == 0:
        raise CalculationError(MathErrorKind.UNDEFINED, f"Root of degree 0 of {a}")

    if a < 0 and exact_context().remainder(n, _TWO) == 0:
        raise CalculationError(
            MathErrorKind.EVEN_ROOT_OF_NEGATIVE,
            f"Root of even degree {n} of a negative number {a}",
        )

    if a < 0 and is_integral(n):
        return root_with_base(a.copy_negate(), n).copy_negate()

    scaled_log = divide_to_scale(ln(a), n, HIGH_PRECISION)
    return exp(scaled_log)


# =============================================================================
# СТЕПЕНИ
# =============================================================================


def _pow_by_squaring(a: Decimal, n: int) -> Decimal:
    """a^n для целого n >= 0; произведения точные."""
    if n == 0:
        return Decimal(1)

    if n % 2 == 1:
        return exact_context().multiply(_pow_by_squaring(a, n - 1), a)

    half = _pow_by_squaring(a, n // 2)
    return exact_context().multiply(half, half)


def pow_(a: Decimal, n: Decimal) -> Decimal:
    """
    a в степени n.

    - n < 0: 1 / a^(-n), ROUND_SCALE знаков (ROUND_HALF_EVEN),
      незначащие нули удаляются
    - n дробное: n округляется до RATIONAL_EXPONENT_SCALE знаков
      (ROUND_HALF_DOWN), сводится к p/q, результат root(a^p, q)
    - n целое: возведение в квадрат, без округления

    Args:
        a: Основание
        n: Показатель

    Returns:
        a^n

    Raises:
        CalculationError:
            NAN если a == 0 и n < 0,
            UNDEFINED если a == 0 и n == 0

    Examples:
        >>> pow_(Decimal(2), Decimal(10))
        Decimal('1024')
        >>> pow_(Decimal(2), Decimal(-3))
        Decimal('0.125')
    """
    if a == 0:
        if n < 0:
            raise CalculationError(MathErrorKind.NAN, f"0 raised to a negative power {n}")
        if n == 0:
            raise CalculationError(MathErrorKind.UNDEFINED, "0 raised to the power 0")
        return Decimal(0)

    if n < 0:
        result = pow_(a, n.copy_negate())
        return strip_trailing_zeros(divide_to_scale(Decimal(1), result, ROUND_SCALE))

    if not is_integral(n):
        exponent = Fraction(set_scale(n, RATIONAL_EXPONENT_SCALE, ROUND_HALF_DOWN))
        return root_with_base(
            _pow_by_squaring(a, exponent.numerator),
            Decimal(exponent.denominator),
        )

    return _pow_by_squaring(a, int(n))


def pow_with_exp(a: Decimal, n: Decimal) -> Decimal:
    """
    a^n через exp(n * ln(a)) на HIGH_PRECISION.

    Raises:
        CalculationError: NEGATIVE_LOG_ARGUMENT / ZERO_LOG_ARGUMENT для a <= 0
    """
    product = precision_context(HIGH_PRECISION).multiply(n, ln(a))
    return exp(product)
