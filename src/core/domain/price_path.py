"""
PricePath — доменная модель лучших путей

Immutable Pydantic модели публичного словаря калькулятора:
- Pair: упорядоченная пара валют (source → target)
- ProviderPair: пара + источник цены
- PathStep: один hop пути через конкретного провайдера
- PricePath: итоговая стоимость пути + последовательность hops

Все суммы — fixed-point целые (масштаб 10**12) в диапазоне unsigned 128-bit.
Полная совместимость с JSON Schema (contracts/schema/best_path_table.json).
"""

from pydantic import BaseModel, Field

from src.core.math.fixed_point import U128_MAX


# =============================================================================
# PAIRS
# =============================================================================


class Pair(BaseModel):
    """
    Упорядоченная пара валют.

    Hashable (frozen=True) — используется как ключ таблицы путей.
    """

    source: str = Field(..., min_length=1, description="Исходная валюта (например, 'BTC')")
    target: str = Field(..., min_length=1, description="Целевая валюта (например, 'USDT')")

    model_config = {"frozen": True}

    def sort_key(self) -> tuple[str, str]:
        """Ключ лексикографической сортировки (source, target)."""
        return (self.source, self.target)

    @property
    def is_self_pair(self) -> bool:
        return self.source == self.target


class ProviderPair(BaseModel):
    """
    Пара валют, котируемая конкретным провайдером.

    Представляет одну наблюдаемую цену от одного источника.
    """

    pair: Pair = Field(..., description="Пара валют")
    provider: str = Field(..., min_length=1, description="Идентификатор источника цены")

    model_config = {"frozen": True}

    def sort_key(self) -> tuple[str, str, str]:
        return (self.pair.source, self.pair.target, self.provider)


# =============================================================================
# PATHS
# =============================================================================


class PathStep(BaseModel):
    """Hop между валютами через провайдера."""

    pair: Pair = Field(..., description="Пара валют данного hop")
    provider: str = Field(..., min_length=1, description="Провайдер, чей курс использован")
    cost: int = Field(..., ge=0, le=U128_MAX, description="Курс hop (fixed-point)")

    model_config = {"frozen": True}


class PricePath(BaseModel):
    """
    Лучший путь для пары валют.

    Инвариант: total_cost равен произведению steps[i].cost (во float-домене,
    до усечения в fixed-point), либо наблюдаемой цене при пустом steps.
    Для self-pair total_cost — мультипликативная единица, steps пуст.
    """

    total_cost: int = Field(..., ge=0, le=U128_MAX, description="Итоговый курс пути (fixed-point)")
    steps: list[PathStep] = Field(default_factory=list, description="Последовательность hops")

    model_config = {"frozen": True}

    @property
    def hop_count(self) -> int:
        return len(self.steps)

    @property
    def providers(self) -> list[str]:
        """Провайдеры по порядку hops."""
        return [step.provider for step in self.steps]
