"""
Fixed Point — конверсия fixed-point ↔ float

Окружающая система хранит цены как целые числа, масштабированные
на FIXED_POINT_PRECISION (10**12), в диапазоне unsigned 128-bit.
Алгоритм путей работает во float.

ФОРМУЛЫ:
    value_float = amount / precision            (корректно округлённое деление int/int)
    amount      = trunc(value_float * precision)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. amount ∈ [0, U128_MAX], иначе ConversionError
2. Обратная конверсия усекает (trunc), никогда не округляет вверх
3. NaN/Inf/отрицательные значения → ConversionError, без fallback
"""

import json
import math
import operator
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Any, Final, Optional

from src.core.errors import ConversionError

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Масштаб fixed-point цен (12 знаков после запятой)
FIXED_POINT_SCALE: Final[int] = 12
FIXED_POINT_PRECISION: Final[int] = 10 ** FIXED_POINT_SCALE

# Верхняя граница amount (unsigned 128-bit)
U128_MAX: Final[int] = 2 ** 128 - 1

# Единица измерения tolerance: parts per million
TOLERANCE_DENOMINATOR: Final[int] = 1_000_000


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_u128(amount: Any, amount_max: int = U128_MAX) -> int:
    """
    Приведение amount к целому в диапазоне [0, amount_max].

    Принимает любой integer-like объект (int, IntEnum, numpy int и т.п.)
    через operator.index; float и Decimal не принимаются — дробный
    amount означает ошибку масштаба у вызывающей стороны.

    Raises:
        ConversionError: Если amount не целый или вне диапазона

    Examples:
        >>> to_u128(5)
        5
        >>> to_u128(-1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ConversionError: ...
    """
    try:
        value = operator.index(amount)
    except TypeError as e:
        raise ConversionError(f"Amount {amount!r} is not an integer value") from e

    if value < 0 or value > amount_max:
        raise ConversionError(f"Amount {value} out of range [0, {amount_max}]")

    return value


def fixed_to_float(
    amount: Any,
    precision: int = FIXED_POINT_PRECISION,
    amount_max: int = U128_MAX,
) -> float:
    """
    fixed-point → float.

    Args:
        amount: Целое fixed-point значение
        precision: Масштаб (default: 10**12)
        amount_max: Верхняя граница amount

    Returns:
        amount / precision

    Raises:
        ConversionError: Если amount вне диапазона

    Examples:
        >>> fixed_to_float(2_500_000_000_000)
        2.5
    """
    return to_u128(amount, amount_max) / precision


def float_to_fixed(
    value: float,
    precision: int = FIXED_POINT_PRECISION,
    amount_max: int = U128_MAX,
) -> int:
    """
    float → fixed-point с усечением.

    Raises:
        ConversionError: Если value NaN/Inf, отрицательное, или результат
            превышает amount_max

    Examples:
        >>> float_to_fixed(0.125)
        125000000000
    """
    if not math.isfinite(value):
        raise ConversionError(f"Cost {value} is not finite")

    scaled = value * precision
    if not math.isfinite(scaled):
        raise ConversionError(f"Cost {value} overflows at precision {precision}")
    if scaled < 0:
        raise ConversionError(f"Cost {value} is negative")

    amount = int(scaled)
    if amount > amount_max:
        raise ConversionError(f"Cost {value} exceeds amount range (max {amount_max})")

    return amount


# =============================================================================
# TOLERANCE
# =============================================================================


def breaches_tolerance(old: int, new: int, tolerance: int) -> bool:
    """
    Превышает ли относительное изменение цены допуск.

    delta = 1_000_000 * |new - old| / old   (целочисленно, ppm)

    Изменение с нулевой цены считается нарушением, если новая цена
    ненулевая (относительное изменение не определено).

    Args:
        old: Предыдущая fixed-point цена
        new: Новая fixed-point цена
        tolerance: Допуск в parts per million

    Returns:
        True если delta > tolerance

    Examples:
        >>> breaches_tolerance(1_000_000, 1_000_001, 1)
        False
        >>> breaches_tolerance(1_002, 1_000, 1_000)
        True
    """
    if old == 0:
        return new != 0

    delta = TOLERANCE_DENOMINATOR * abs(new - old) // old
    return delta > tolerance


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_price(payload: str, target_currency: str, scale: int = FIXED_POINT_SCALE) -> Optional[int]:
    """
    Извлечение цены из JSON-ответа провайдера в fixed-point.

    Ожидаемый формат: {"USDT": 12.789, "ETH": 89.000001}
    Число парсится как Decimal (без потерь float) и усекается до scale
    знаков.

    Args:
        payload: Тело ответа провайдера
        target_currency: Ключ целевой валюты
        scale: Количество десятичных знаков fixed-point

    Returns:
        Цена в fixed-point или None, если payload не JSON-объект,
        ключ отсутствует, или значение не число

    Examples:
        >>> parse_price('{"USDT": 12.789}', "USDT")
        12789000000000
        >>> parse_price('{"USDT": abc}', "USDT") is None
        True
    """
    try:
        data = json.loads(payload, parse_float=Decimal, parse_int=Decimal)
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None

    price = data.get(target_currency)
    if not isinstance(price, Decimal) or not price.is_finite() or price < 0:
        return None

    try:
        scaled = price.scaleb(scale).to_integral_value(rounding=ROUND_DOWN)
    except InvalidOperation:
        return None

    return int(scaled)
