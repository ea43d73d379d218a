"""
Errors — таксономия доменных ошибок вычислений

Каждая ошибка локальна и немедленна: функция сообщает конкретный вид ошибки,
не выполняет частичных вычислений и не повторяет попыток. Ошибка
пробрасывается вызывающему без изменений; сообщения для пользователя
формирует внешний слой (evaluator/CLI).

Undefined-результаты всегда сигнализируются, никогда не возвращаются как
magic number (NaN/Infinity-сентинелы запрещены).
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Final, Optional


# =============================================================================
# ENUMS
# =============================================================================


class MathErrorKind(str, Enum):
    """Вид доменной ошибки"""

    NEGATIVE_LOG_ARGUMENT = "NEGATIVE_LOG_ARGUMENT"
    ZERO_LOG_ARGUMENT = "ZERO_LOG_ARGUMENT"
    INVALID_LOG_BASE = "INVALID_LOG_BASE"
    TANGENT_OF_NINETY = "TANGENT_OF_NINETY"
    FACTORIAL_LIMIT_EXCEEDED = "FACTORIAL_LIMIT_EXCEEDED"
    EVEN_ROOT_OF_NEGATIVE = "EVEN_ROOT_OF_NEGATIVE"
    NAN = "NAN"
    UNDEFINED = "UNDEFINED"


_DEFAULT_MESSAGES: Final[dict[MathErrorKind, str]] = {
    MathErrorKind.NEGATIVE_LOG_ARGUMENT: "Logarithm of a negative number",
    MathErrorKind.ZERO_LOG_ARGUMENT: "Logarithm of zero",
    MathErrorKind.INVALID_LOG_BASE: "Logarithm base must be positive and not equal to 1",
    MathErrorKind.TANGENT_OF_NINETY: "Tangent of 90 degrees is undefined",
    MathErrorKind.FACTORIAL_LIMIT_EXCEEDED: "Factorial argument exceeds the limit",
    MathErrorKind.EVEN_ROOT_OF_NEGATIVE: "Root of even degree of a negative number",
    MathErrorKind.NAN: "Result is not a number",
    MathErrorKind.UNDEFINED: "Result is undefined",
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalculationError(Exception):
    """
    Доменная ошибка precision math library.

    Attributes:
        kind: Вид ошибки (MathErrorKind)
    """

    def __init__(self, kind: MathErrorKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or _DEFAULT_MESSAGES[kind])


# =============================================================================
# RESULT TYPE
# =============================================================================


@dataclass(frozen=True)
class MathResult:
    """Результат вычисления: значение либо вид ошибки."""

    value: Optional[Decimal]
    error: Optional[MathErrorKind]

    # Детали
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Decimal:
        """
        Значение успешного результата.

        Raises:
            CalculationError: Если результат содержит ошибку
        """
        if self.error is not None:
            raise CalculationError(self.error, self.details or None)
        return self.value


def evaluate_safely(func: Callable[..., Decimal], *operands) -> MathResult:
    """
    Вызов функции библиотеки с ошибкой как значением.

    Перехватывается только CalculationError; нарушения контракта вызова
    (TypeError, ValueError) пробрасываются.

    Examples:
        >>> evaluate_safely(ln, Decimal(-1)).error
        <MathErrorKind.NEGATIVE_LOG_ARGUMENT: 'NEGATIVE_LOG_ARGUMENT'>
    """
    try:
        return MathResult(value=func(*operands), error=None)
    except CalculationError as e:
        return MathResult(value=None, error=e.kind, details=str(e))
