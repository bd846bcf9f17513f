"""
Log Weights — мультипликативные курсы → аддитивные веса

Формула:
    x * y = 2 ** (log2(x) + log2(y))

Максимизация произведения курсов эквивалентна максимизации суммы log2,
а максимизация эквивалентна минимизации отрицания:

    weight(rate) = -log2(rate)

Два режима вычисления:
- FLOAT:   math.log2 (платформенный libm, результат может отличаться
           в последнем бите между платформами)
- DECIMAL: ln(rate) / ln(2) в decimal-контексте фиксированной точности,
           один раунд в float — результат одинаков на любой платформе

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rate > 0 и конечен (ValueError иначе)
2. weight(1.0) == 0.0 (мультипликативная единица → аддитивная)
3. DECIMAL режим детерминирован и воспроизводим
"""

import math
from decimal import Context, Decimal, ROUND_HALF_EVEN
from enum import Enum
from typing import Callable, Final

from src.core.math.numerical_safeguards import validate_positive_rate

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Точность decimal-контекста (IEEE 754 decimal128)
LOG_DECIMAL_PRECISION: Final[int] = 34

_LOG_CONTEXT: Final[Context] = Context(prec=LOG_DECIMAL_PRECISION, rounding=ROUND_HALF_EVEN)
_LN2: Final[Decimal] = _LOG_CONTEXT.ln(Decimal(2))


class LogMode(str, Enum):
    """Способ вычисления -log2(rate)."""

    DECIMAL = "decimal"
    FLOAT = "float"


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def neg_log2_float(rate: float) -> float:
    """
    -log2(rate) через math.log2.

    Examples:
        >>> neg_log2_float(2.0)
        -1.0
        >>> neg_log2_float(0.25)
        2.0
    """
    validate_positive_rate(rate)
    return -math.log2(rate)


def neg_log2_decimal(rate: float) -> float:
    """
    -log2(rate) через decimal с фиксированной точностью.

    Decimal(rate) — точное представление float, поэтому единственное
    округление происходит при финальном переводе в float.

    Examples:
        >>> neg_log2_decimal(4.0)
        -2.0
        >>> neg_log2_decimal(1.0)
        0.0
    """
    validate_positive_rate(rate)
    log2_rate = _LOG_CONTEXT.divide(_LOG_CONTEXT.ln(Decimal(rate)), _LN2)
    # 0.0 вместо -0.0 для rate == 1.0
    return float(_LOG_CONTEXT.minus(log2_rate)) if log2_rate else 0.0


def neg_log2_for(mode: LogMode) -> Callable[[float], float]:
    """
    Выбор функции веса по режиму.

    Raises:
        ValueError: Если режим неизвестен
    """
    if mode == LogMode.DECIMAL:
        return neg_log2_decimal
    if mode == LogMode.FLOAT:
        return neg_log2_float
    raise ValueError(f"Unknown log mode: {mode}")
