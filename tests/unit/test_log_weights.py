"""
Тесты для Log Weights — -log2(rate)

Проверяемые инварианты:
1. Степени двойки дают точные целые веса в обоих режимах
2. weight(1.0) == +0.0
3. DECIMAL и FLOAT согласованы с точностью до нескольких ulp
4. Неположительные и неконечные курсы отвергаются
"""

import math

import pytest

from src.core.math.log_weights import (
    LogMode,
    neg_log2_decimal,
    neg_log2_float,
    neg_log2_for,
)


ALL_MODES = [neg_log2_float, neg_log2_decimal]


class TestExactPowersOfTwo:
    """Степени двойки."""

    @pytest.mark.parametrize("log_weight", ALL_MODES)
    def test_powers_of_two(self, log_weight):
        """Курсы 2, 4, 0.5, 0.25 → веса -1, -2, 1, 2."""
        assert log_weight(2.0) == -1.0
        assert log_weight(4.0) == -2.0
        assert log_weight(0.5) == 1.0
        assert log_weight(0.25) == 2.0

    @pytest.mark.parametrize("log_weight", ALL_MODES)
    def test_unit_rate_is_zero(self, log_weight):
        """Мультипликативная единица → аддитивная единица."""
        assert log_weight(1.0) == 0.0

    def test_decimal_unit_rate_positive_zero(self):
        """DECIMAL режим возвращает +0.0, а не -0.0."""
        assert math.copysign(1.0, neg_log2_decimal(1.0)) == 1.0

    @pytest.mark.parametrize("log_weight", ALL_MODES)
    def test_reciprocal_rates_cancel(self, log_weight):
        """w(x) + w(1/x) == 0 для точно представимых обратных."""
        assert log_weight(8.0) + log_weight(0.125) == 0.0


class TestModesAgree:
    """DECIMAL и FLOAT дают одинаковый результат с точностью до ulp."""

    @pytest.mark.parametrize("rate", [3.0, 0.1527, 15.09, 2384.99, 1e-12, 0.00002777, 1.0000001])
    def test_agreement(self, rate):
        assert neg_log2_decimal(rate) == pytest.approx(neg_log2_float(rate), rel=1e-14)

    def test_decimal_deterministic(self):
        """Повторный вызов даёт бит-идентичный результат."""
        values = [neg_log2_decimal(0.06626) for _ in range(5)]
        assert len(set(values)) == 1


class TestInvalidRates:
    """Неположительные и неконечные курсы."""

    @pytest.mark.parametrize("log_weight", ALL_MODES)
    @pytest.mark.parametrize("rate", [0.0, -1.0, math.nan, math.inf])
    def test_invalid_rate_raises(self, log_weight, rate):
        with pytest.raises(ValueError):
            log_weight(rate)


class TestNegLog2For:
    """Выбор функции по режиму."""

    def test_modes(self):
        assert neg_log2_for(LogMode.DECIMAL) is neg_log2_decimal
        assert neg_log2_for(LogMode.FLOAT) is neg_log2_float

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Unknown log mode"):
            neg_log2_for("bogus")
