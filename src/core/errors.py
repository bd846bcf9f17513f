"""
Core exception types для расчёта лучших путей.

Обе ошибки фатальны для текущего пересчёта: частичная таблица путей
никогда не возвращается, вызывающая сторона решает — пропустить цикл
обновления, залогировать или поднять алерт.
"""

__all__ = [
    "CalculatorError",
    "NegativeCyclesError",
    "ConversionError",
]


class CalculatorError(Exception):
    """Базовая ошибка калькулятора лучших путей."""
    pass


class NegativeCyclesError(CalculatorError):
    """
    Граф цен содержит цикл с отрицательной суммарной log-стоимостью.

    Эквивалентно замкнутому контуру с произведением курсов > 1
    (арбитражная петля из несогласованных котировок). Таблица путей
    в таком графе не имеет смысла.
    """

    def __init__(self, vertices=None):
        self.vertices = list(vertices or [])
        detail = f" reaching vertices {self.vertices}" if self.vertices else ""
        super().__init__(f"Negative cycle detected in price graph{detail}")


class ConversionError(CalculatorError):
    """
    Fixed-point значение вне рабочего диапазона.

    Возникает при переполнении/потере при конверсии fixed-point ↔ float,
    а также для неположительной цены, у которой нет логарифма.
    """
    pass
