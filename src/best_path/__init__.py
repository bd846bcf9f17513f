"""Best Path — расчёт лучших путей конверсии между валютами.

- graph / algo: индексный граф и Floyd–Warshall
- calculator: стратегии расчёта над доменными моделями
- changes: отбор изменений относительно опубликованной таблицы
"""

from .algo import longest_paths_mult, shortest_paths, unique_cheapest_edges
from .calculator import (
    BestPathCalculator,
    BestPathTable,
    CalculatorConfig,
    FloydWarshallCalculator,
    NoBestPathCalculator,
    Observation,
)
from .changes import PRICE_CHANGE_TOLERANCE_DEFAULT, BestPathChange, select_best_path_changes
from .graph import Edge, Path, TieBreak

__all__ = [
    # Engine
    "Edge",
    "Path",
    "TieBreak",
    "longest_paths_mult",
    "shortest_paths",
    "unique_cheapest_edges",
    # Calculator strategies
    "BestPathCalculator",
    "BestPathTable",
    "CalculatorConfig",
    "FloydWarshallCalculator",
    "NoBestPathCalculator",
    "Observation",
    # Changes
    "PRICE_CHANGE_TOLERANCE_DEFAULT",
    "BestPathChange",
    "select_best_path_changes",
]
