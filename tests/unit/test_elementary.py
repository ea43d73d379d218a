"""
Тесты для Elementary — exp, логарифмы, корни, степени

Проверяемые инварианты:
1. Доменные ошибки логарифмов (отрицательный аргумент, ноль, основание)
2. Основания 2/10 вычисляются напрямую, прочие — с ROUND_SCALE знаками
3. Корень чётной степени из отрицательного числа → EVEN_ROOT_OF_NEGATIVE
4. 0^n: NAN / UNDEFINED / 0
5. Возведение в квадрат совпадает с повторным умножением
"""

from decimal import Decimal

import pytest

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
from src.core.math.errors import CalculationError, MathErrorKind
from src.core.math.precision import HIGH_PRECISION, ROUND_SCALE, STANDARD_PRECISION

TOLERANCE = Decimal("1e-8")


def assert_close(actual: Decimal, expected, tol: Decimal = TOLERANCE) -> None:
    assert abs(actual - Decimal(expected)) <= tol, f"{actual} != {expected}"


# =============================================================================
# ТЕСТЫ: Экспонента и логарифмы
# =============================================================================


class TestExp:
    """exp: HIGH_PRECISION значащих цифр."""

    def test_exp_zero(self):
        """e^0 == 1."""
        assert exp(Decimal(0)) == 1

    def test_exp_one(self):
        """e^1 совпадает с константой E, 20 значащих цифр."""
        result = exp(Decimal(1))
        assert result == Decimal("2.7182818284590452354")
        assert len(result.as_tuple().digits) == HIGH_PRECISION

    def test_exp_negative(self):
        """e^-1 * e^1 ≈ 1."""
        assert_close(exp(Decimal(-1)) * exp(Decimal(1)), 1, Decimal("1e-18"))


class TestLn:
    """ln / log: доменные проверки и точность."""

    def test_ln_one(self):
        """ln(1) == 0."""
        assert ln(Decimal(1)) == 0

    def test_ln_inverse_of_exp(self):
        """ln обратен exp."""
        assert_close(ln(exp(Decimal(2))), 2, Decimal("1e-18"))

    def test_ln_negative(self):
        """Отрицательный аргумент → NEGATIVE_LOG_ARGUMENT."""
        with pytest.raises(CalculationError) as exc_info:
            ln(Decimal(-1))
        assert exc_info.value.kind == MathErrorKind.NEGATIVE_LOG_ARGUMENT

    def test_ln_zero(self):
        """Нулевой аргумент → ZERO_LOG_ARGUMENT."""
        with pytest.raises(CalculationError) as exc_info:
            ln(Decimal(0))
        assert exc_info.value.kind == MathErrorKind.ZERO_LOG_ARGUMENT

    def test_log10_exact_power(self):
        """log10 степени десяти — целое число."""
        assert log(Decimal(1000)) == 3

    def test_log10_negative(self):
        """log10 отрицательного числа → NEGATIVE_LOG_ARGUMENT."""
        with pytest.raises(CalculationError) as exc_info:
            log(Decimal(-1))
        assert exc_info.value.kind == MathErrorKind.NEGATIVE_LOG_ARGUMENT

    def test_log2(self):
        """log2 степеней двойки и дробного аргумента."""
        assert log2(Decimal(8)) == 3
        assert log2(Decimal(1024), 8) == 10
        assert_close(log2(Decimal("0.5")), -1, Decimal("1e-18"))


class TestLogWithBase:
    """log_with_base: прямые основания 2/10 и общий случай."""

    def test_base_two(self):
        """Основание 2 для точной степени двойки."""
        assert log_with_base(Decimal(8), Decimal(2)) == 3

    def test_base_two_standard_precision(self):
        """Основание 2 — 8 значащих цифр."""
        result = log_with_base(Decimal(3), Decimal(2))
        assert result == Decimal("1.5849625")
        assert len(result.as_tuple().digits) == STANDARD_PRECISION

    def test_base_ten(self):
        """Основание 10 для точной степени десяти."""
        assert log_with_base(Decimal(100), Decimal(10)) == 2

    def test_base_ten_standard_precision(self):
        """Основание 10 — 8 значащих цифр."""
        result = log_with_base(Decimal(2), Decimal(10))
        assert result == Decimal("0.30103000")
        assert len(result.as_tuple().digits) == 8

    def test_generic_base(self):
        """Прочие основания — ROUND_SCALE дробных знаков."""
        result = log_with_base(Decimal(81), Decimal(3))
        assert result == 4
        assert result.as_tuple().exponent == -ROUND_SCALE

    def test_generic_base_fraction(self):
        """Дробный результат для произвольного основания."""
        assert log_with_base(Decimal(2), Decimal(4)) == Decimal("0.5")

    def test_negative_argument(self):
        """Отрицательный аргумент → NEGATIVE_LOG_ARGUMENT."""
        with pytest.raises(CalculationError) as exc_info:
            log_with_base(Decimal(-1), Decimal(3))
        assert exc_info.value.kind == MathErrorKind.NEGATIVE_LOG_ARGUMENT

    def test_zero_argument(self):
        """Нулевой аргумент → ZERO_LOG_ARGUMENT."""
        with pytest.raises(CalculationError) as exc_info:
            log_with_base(Decimal(0), Decimal(3))
        assert exc_info.value.kind == MathErrorKind.ZERO_LOG_ARGUMENT

    @pytest.mark.parametrize("base", ["1", "0", "-2"])
    def test_invalid_base(self, base):
        """Основание <= 0 или == 1 → INVALID_LOG_BASE."""
        with pytest.raises(CalculationError) as exc_info:
            log_with_base(Decimal(8), Decimal(base))
        assert exc_info.value.kind == MathErrorKind.INVALID_LOG_BASE


# =============================================================================
# ТЕСТЫ: Корни
# =============================================================================


class TestRootWithBase:
    """root_with_base: exp(ln(a) / n)."""

    def test_zero_radicand(self):
        """Корень из нуля — ноль."""
        assert root_with_base(Decimal(0), Decimal(3)) == 0
        assert root_with_base(Decimal(0), Decimal(2)) == 0

    def test_square_root(self):
        """Квадратный корень."""
        assert_close(root_with_base(Decimal(16), Decimal(2)), 4)
        assert_close(root_with_base(Decimal(2), Decimal(2)), "1.41421356")

    def test_cube_root(self):
        """Кубический корень."""
        assert_close(root_with_base(Decimal(27), Decimal(3)), 3)

    def test_even_root_of_negative(self):
        """Чётный корень из отрицательного → EVEN_ROOT_OF_NEGATIVE."""
        with pytest.raises(CalculationError) as exc_info:
            root_with_base(Decimal(-8), Decimal(2))
        assert exc_info.value.kind == MathErrorKind.EVEN_ROOT_OF_NEGATIVE

    def test_odd_root_of_negative(self):
        """Нечётный корень из отрицательного сохраняет знак."""
        assert_close(root_with_base(Decimal(-8), Decimal(3)), -2)

    def test_fractional_degree_of_negative(self):
        """Дробная степень корня из отрицательного → NEGATIVE_LOG_ARGUMENT."""
        with pytest.raises(CalculationError) as exc_info:
            root_with_base(Decimal(-8), Decimal("2.5"))
        assert exc_info.value.kind == MathErrorKind.NEGATIVE_LOG_ARGUMENT

    def test_zero_degree(self):
        """Корень нулевой степени → UNDEFINED."""
        with pytest.raises(CalculationError) as exc_info:
            root_with_base(Decimal(8), Decimal(0))
        assert exc_info.value.kind == MathErrorKind.UNDEFINED

    def test_high_precision_result(self):
        """Результат — HIGH_PRECISION значащих цифр."""
        result = root_with_base(Decimal(2), Decimal(2))
        assert len(result.as_tuple().digits) == HIGH_PRECISION


# =============================================================================
# ТЕСТЫ: Степени
# =============================================================================


class TestPow:
    """pow_: нулевое основание, отрицательные и дробные показатели."""

    def test_zero_negative_power(self):
        """0 в отрицательной степени → NAN."""
        with pytest.raises(CalculationError) as exc_info:
            pow_(Decimal(0), Decimal(-1))
        assert exc_info.value.kind == MathErrorKind.NAN

    def test_zero_to_zero(self):
        """0^0 → UNDEFINED."""
        with pytest.raises(CalculationError) as exc_info:
            pow_(Decimal(0), Decimal(0))
        assert exc_info.value.kind == MathErrorKind.UNDEFINED

    def test_zero_positive_power(self):
        """0 в положительной степени — ноль."""
        assert pow_(Decimal(0), Decimal(5)) == 0

    def test_negative_exponent(self):
        """Отрицательный показатель без хвостовых нулей."""
        result = pow_(Decimal(2), Decimal(-3))
        assert result == Decimal("0.125")
        assert str(result) == "0.125"

    def test_negative_exponent_rounded(self):
        """1 / a^n округляется до ROUND_SCALE знаков."""
        assert pow_(Decimal(3), Decimal(-1)) == Decimal("0.33333333")

    def test_negative_exponent_integral_result(self):
        """Целый результат отрицательной степени без дробной части."""
        assert str(pow_(Decimal("0.5"), Decimal(-2))) == "4"

    def test_integer_power_exact(self):
        """Целые степени вычисляются точно."""
        assert pow_(Decimal(2), Decimal(10)) == 1024
        assert pow_(Decimal(2), Decimal(100)) == Decimal(2**100)
        assert pow_(Decimal("1.5"), Decimal(2)) == Decimal("2.25")

    def test_negative_base(self):
        """Знак отрицательного основания зависит от чётности показателя."""
        assert pow_(Decimal(-2), Decimal(3)) == -8
        assert pow_(Decimal(-2), Decimal(4)) == 16

    def test_fractional_exponent(self):
        """Дробный показатель через корень."""
        assert_close(pow_(Decimal(4), Decimal("0.5")), 2)
        assert_close(pow_(Decimal(8), Decimal("1.5")), "22.62741700")

    def test_fractional_exponent_half_down_tie(self):
        """Показатель 0.0005 округляется ROUND_HALF_DOWN до нуля."""
        assert pow_(Decimal(4), Decimal("0.0005")) == 1
        assert pow_(Decimal(4), Decimal("0.0006")) > 1

    def test_negative_fractional_exponent(self):
        """Отрицательный дробный показатель."""
        assert pow_(Decimal(2), Decimal("-0.5")) == Decimal("0.70710678")

    @pytest.mark.parametrize("base", ["-3", "2", "1.1", "7"])
    @pytest.mark.parametrize("exponent", range(0, 13))
    def test_matches_repeated_multiplication(self, base, exponent):
        """Возведение в квадрат совпадает с повторным умножением."""
        a = Decimal(base)
        expected = Decimal(1)
        for _ in range(exponent):
            expected *= a
        assert pow_(a, Decimal(exponent)) == expected

    def test_pow_with_exp(self):
        """pow_with_exp через exp(n * ln(a))."""
        assert_close(pow_with_exp(Decimal(2), Decimal(10)), 1024, Decimal("1e-14"))
        assert_close(pow_with_exp(Decimal(9), Decimal("0.5")), 3, Decimal("1e-18"))

    def test_pow_with_exp_requires_positive_base(self):
        """Отрицательное основание → NEGATIVE_LOG_ARGUMENT."""
        with pytest.raises(CalculationError) as exc_info:
            pow_with_exp(Decimal(-2), Decimal(2))
        assert exc_info.value.kind == MathErrorKind.NEGATIVE_LOG_ARGUMENT
