"""Граф для Floyd–Warshall: целочисленные вершины, float веса.

Pair, Edge, Path полностью упорядочены (dataclass order=True) —
детерминированный порядок обхода при дедупликации и построении матрицы.
"""

from dataclasses import dataclass
from enum import Enum

from src.core.math.numerical_safeguards import validate_comparable


class TieBreak(str, Enum):
    """Какое ребро оставлять среди параллельных рёбер одной пары."""

    MINIMUM = "minimum"
    MAXIMUM = "maximum"

    def prefers(self, candidate: float, incumbent: float) -> bool:
        """Строго ли candidate выгоднее incumbent."""
        if self is TieBreak.MINIMUM:
            return candidate < incumbent
        return candidate > incumbent


@dataclass(frozen=True, order=True)
class Pair:
    """Упорядоченная пара индексов вершин."""

    source: int
    target: int

    @property
    def is_self_pair(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True, order=True)
class Edge:
    """Ребро: пара вершин, индекс провайдера, стоимость.

    Порядок лексикографический по (pair, provider, cost).
    """

    pair: Pair
    provider: int
    cost: float

    def __post_init__(self):
        # NaN не участвует в total order
        validate_comparable(self.cost, "Edge cost")

    def with_cost(self, cost: float) -> "Edge":
        return Edge(pair=self.pair, provider=self.provider, cost=cost)


@dataclass(frozen=True)
class Path:
    """Путь: накопленная стоимость + рёбра по порядку от source к target."""

    total_cost: float
    edges: tuple[Edge, ...] = ()

    def add(self, edge: Edge) -> "Path":
        """Новый путь с добавленным ребром (аддитивная стоимость)."""
        return Path(total_cost=self.total_cost + edge.cost, edges=self.edges + (edge,))

    def concat(self, other: "Path") -> "Path":
        """Конкатенация i→k и k→j (аддитивная стоимость)."""
        return Path(total_cost=self.total_cost + other.total_cost, edges=self.edges + other.edges)
