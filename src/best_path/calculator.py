"""Best Path Calculator — адаптер домен ↔ граф.

Стратегии расчёта (выбираются вызывающей стороной при конструировании):
- FloydWarshallCalculator: лучшие мультипликативные пути через Floyd–Warshall
- NoBestPathCalculator: эхо прямых наблюдений (тесты / bootstrap)

Поток данных FloydWarshallCalculator:
1. Отсортированные уникальные валюты/провайдеры → плотные индексы
2. fixed-point → float (amount / precision)
3. longest_paths_mult на индексном графе
4. Индексы → валюты/провайдеры, float → fixed-point (trunc(cost * precision))

Ошибки:
- NegativeCyclesError пробрасывается без изменений
- ConversionError при выходе за диапазон fixed-point или цене == 0
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

from src.best_path import algo
from src.best_path import graph
from src.core.domain.price_path import Pair, PathStep, PricePath, ProviderPair
from src.core.errors import ConversionError
from src.core.math.fixed_point import (
    FIXED_POINT_PRECISION,
    U128_MAX,
    fixed_to_float,
    float_to_fixed,
    to_u128,
)
from src.core.math.log_weights import LogMode, neg_log2_for

logger = logging.getLogger(__name__)

# Наблюдение: (провайдер + пара, fixed-point цена)
Observation = Tuple[ProviderPair, Any]

# Таблица лучших путей
BestPathTable = dict[Pair, PricePath]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора лучших путей.

    precision — масштаб fixed-point, amount_max — верхняя граница сумм,
    log_mode — способ вычисления -log2 (DECIMAL детерминирован между платформами).
    """

    precision: int = FIXED_POINT_PRECISION
    amount_max: int = U128_MAX
    log_mode: LogMode = LogMode.DECIMAL

    def __post_init__(self):
        if self.precision <= 0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.amount_max < self.precision:
            raise ValueError(
                f"amount_max must be >= precision to represent the unit rate, "
                f"got amount_max={self.amount_max}, precision={self.precision}"
            )
        if not isinstance(self.log_mode, LogMode):
            raise ValueError(f"log_mode must be a LogMode, got {self.log_mode!r}")


# =============================================================================
# STRATEGY INTERFACE
# =============================================================================


class BestPathCalculator(ABC):
    """Стратегия расчёта таблицы лучших путей."""

    def __init__(self, config: CalculatorConfig | None = None):
        self.config = config or CalculatorConfig()

    @abstractmethod
    def calc_best_paths(self, pairs_and_prices: Sequence[Observation]) -> BestPathTable:
        """Таблица Pair → PricePath по снапшоту наблюдаемых цен.

        Raises:
            NegativeCyclesError: Несогласованные котировки (арбитражный контур)
            ConversionError: Цена вне рабочего диапазона fixed-point
        """


# =============================================================================
# NO-OP STRATEGY
# =============================================================================


class NoBestPathCalculator(BestPathCalculator):
    """Эхо прямых наблюдений: PricePath(total_cost=цена, steps=[]).

    При повторе пары (разные провайдеры) побеждает последнее наблюдение.
    """

    def calc_best_paths(self, pairs_and_prices: Sequence[Observation]) -> BestPathTable:
        echoed: BestPathTable = {}
        for provider_pair, price in pairs_and_prices:
            amount = to_u128(price, self.config.amount_max)
            echoed[provider_pair.pair] = PricePath(total_cost=amount, steps=[])

        return {pair: echoed[pair] for pair in sorted(echoed, key=Pair.sort_key)}


# =============================================================================
# FLOYD-WARSHALL STRATEGY
# =============================================================================


class FloydWarshallCalculator(BestPathCalculator):
    """Лучшие пути (максимум произведения курсов) через Floyd–Warshall."""

    def calc_best_paths(self, pairs_and_prices: Sequence[Observation]) -> BestPathTable:
        currencies = sorted({c for pp, _ in pairs_and_prices for c in (pp.pair.source, pp.pair.target)})
        providers = sorted({pp.provider for pp, _ in pairs_and_prices})
        currency_index = {c: i for i, c in enumerate(currencies)}
        provider_index = {p: i for i, p in enumerate(providers)}

        logger.debug(
            "Indexed %d observations: %d currencies, %d providers",
            len(pairs_and_prices), len(currencies), len(providers),
        )

        edges = []
        for provider_pair, price in pairs_and_prices:
            edges.append(
                graph.Edge(
                    pair=graph.Pair(
                        currency_index[provider_pair.pair.source],
                        currency_index[provider_pair.pair.target],
                    ),
                    provider=provider_index[provider_pair.provider],
                    cost=self._to_rate(provider_pair, price),
                )
            )

        paths = algo.longest_paths_mult(edges, log_weight=neg_log2_for(self.config.log_mode))

        table: BestPathTable = {}
        for index_pair, path in paths.items():
            pair = Pair(source=currencies[index_pair.source], target=currencies[index_pair.target])
            table[pair] = PricePath(
                total_cost=self._to_amount(path.total_cost),
                steps=self._to_steps(path.edges, currencies, providers),
            )

        logger.debug("Calculated %d best paths", len(table))
        return table

    def _to_rate(self, provider_pair: ProviderPair, price: Any) -> float:
        amount = to_u128(price, self.config.amount_max)
        if amount == 0:
            raise ConversionError(
                f"Price for {provider_pair.pair.source}->{provider_pair.pair.target} "
                f"via {provider_pair.provider} must be positive, got 0"
            )
        return fixed_to_float(amount, self.config.precision, self.config.amount_max)

    def _to_amount(self, cost: float) -> int:
        return float_to_fixed(cost, self.config.precision, self.config.amount_max)

    def _to_steps(
        self,
        edges: Iterable[graph.Edge],
        currencies: list[str],
        providers: list[str],
    ) -> list[PathStep]:
        return [
            PathStep(
                pair=Pair(source=currencies[e.pair.source], target=currencies[e.pair.target]),
                provider=providers[e.provider],
                cost=self._to_amount(e.cost),
            )
            for e in edges
        ]
