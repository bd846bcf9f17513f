"""
Numerical Safeguards — Float guards для графового движка

Модуль обеспечивает численную корректность весов графа:
- Проверка, что стоимость ребра сравнима (не NaN) — требуется total order
- Валидация строго положительных курсов перед логарифмированием
- Epsilon-сравнения float для проверки инвариантов путей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN никогда не попадает в матрицу путей (ValueError на входе)
2. log2 вызывается только для конечных, строго положительных значений
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения стоимостей путей
EPS_COST_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения стоимостей путей
EPS_COST_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_comparable(value: float) -> bool:
    """
    Проверка, участвует ли значение в total order.

    В отличие от is_valid_float, ±Inf допустимы: они упорядочены.
    NaN не упорядочен и ломает детерминированную сортировку рёбер.
    """
    return not math.isnan(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_COST_COMPARE_REL,
    abs_tol: float = EPS_COST_COMPARE_ABS,
) -> bool:
    """
    Сравнение стоимостей с учётом машинной точности.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки

    Examples:
        >>> is_close(8.0, 2.0 * 4.0)
        True
        >>> is_close(0.125, 0.126)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_comparable(value: float, name: str) -> None:
    """
    Валидация, что значение не NaN.

    Raises:
        ValueError: Если value — NaN
    """
    if not is_comparable(value):
        raise ValueError(f"{name} must not be NaN, got {value}")


def validate_positive_rate(value: float, name: str = "rate") -> None:
    """
    Валидация курса обмена перед логарифмированием.

    log2(x) определён только для x > 0; Inf даёт -Inf вес и
    бессмысленный "лучший" путь, поэтому тоже отвергается.

    Args:
        value: Курс (множитель конверсии)
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0.0:
        raise ValueError(f"{name} must be positive (> 0), got {value}")
