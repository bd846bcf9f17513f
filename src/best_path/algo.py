"""
All-pairs Best Paths — Floyd–Warshall с восстановлением путей

Две задачи:
- shortest_paths: минимальная сумма весов (аддитивный режим)
- longest_paths_mult: максимальное произведение курсов (мультипликативный режим)

Сведение мультипликативной задачи к аддитивной:
    x * y = 2 ** (log2(x) + log2(y))
    max(x * y)  ⇔  max(log2(x) + log2(y))  ⇔  min(-log2(x) - log2(y))

РЕЛАКСАЦИЯ:
    A[i,j] = min(A[i,j], A[i,k] + A[k,j])   для k (внешний), i, j

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок циклов k → i → j сохраняется (корректность инкрементальной релаксации)
2. Замена пути только при строгом улучшении стоимости
3. A[v,v] < 0 для любой v → NegativeCyclesError, частичная таблица не возвращается.
   Диагональ проверяется после каждой внешней итерации k: длина путей
   остаётся O(V), время O(V³)
4. Все итерации по отсортированным вершинам/парам — результат детерминирован
5. В мультипликативном режиме total_cost пересчитывается как произведение
   исходных курсов, а не 2 ** (-сумма логарифмов)
"""

import logging
import math
from typing import Callable, Iterable

from src.best_path.graph import Edge, Pair, Path, TieBreak
from src.core.errors import NegativeCyclesError
from src.core.math.log_weights import neg_log2_decimal

logger = logging.getLogger(__name__)

# Стоимость отсутствующего пути
INFINITE_COST = math.inf


# =============================================================================
# EDGE REDUCER
# =============================================================================


def unique_cheapest_edges(edges: Iterable[Edge], prefer: TieBreak) -> list[Edge]:
    """
    Одно ребро на каждую упорядоченную пару вершин.

    Проход слева направо, замена только при строго более выгодной
    стоимости — при равенстве остаётся первое встреченное ребро.

    Args:
        edges: Рёбра, возможно параллельные (по одному на провайдера)
        prefer: MINIMUM или MAXIMUM стоимость

    Returns:
        Рёбра, отсортированные по паре
    """
    by_pair: dict[Pair, Edge] = {}
    for edge in edges:
        incumbent = by_pair.get(edge.pair)
        if incumbent is None or prefer.prefers(edge.cost, incumbent.cost):
            by_pair[edge.pair] = edge

    return [by_pair[pair] for pair in sorted(by_pair)]


# =============================================================================
# SHORTEST PATHS
# =============================================================================


def shortest_paths(edges: Iterable[Edge]) -> dict[Pair, Path]:
    """
    Кратчайшие пути между всеми парами вершин.

    Параллельные рёбра сводятся к минимальному (TieBreak.MINIMUM).

    Returns:
        Pair → Path для всех достижимых пар, отсортировано по паре.
        Self-pair каждой вершины: Path(0.0, ()).

    Raises:
        NegativeCyclesError: Если граф содержит отрицательный цикл
    """
    return _floyd_warshall(unique_cheapest_edges(edges, TieBreak.MINIMUM))


def _floyd_warshall(edges: list[Edge]) -> dict[Pair, Path]:
    vertices = sorted({v for e in edges for v in (e.pair.source, e.pair.target)})

    matrix: dict[Pair, Path] = {}
    for v in vertices:
        matrix[Pair(v, v)] = Path(total_cost=0.0)
    for e in edges:
        # петля с весом >= 0 не лучше пустого self-path; с весом < 0 ловится ниже
        if e.pair.is_self_pair and e.cost >= 0.0:
            continue
        matrix[e.pair] = Path(total_cost=0.0).add(e)

    for k in vertices:
        for i in vertices:
            if Pair(i, k) not in matrix:
                continue
            for j in vertices:
                # A[i,k] перечитывается: при j == k он мог обновиться в этом же цикле
                ik = matrix[Pair(i, k)]
                kj = matrix.get(Pair(k, j))
                if kj is None:
                    continue
                ij = matrix.get(Pair(i, j))
                ij_cost = ij.total_cost if ij is not None else INFINITE_COST
                if ik.total_cost + kj.total_cost < ij_cost:
                    matrix[Pair(i, j)] = ik.concat(kj)

        # A[v,v] < 0 не вернётся к >= 0: остановка до разрастания путей по контуру
        _raise_on_negative_cycle(matrix, vertices)

    return {pair: matrix[pair] for pair in sorted(matrix)}


def _raise_on_negative_cycle(matrix: dict[Pair, Path], vertices: list[int]) -> None:
    negative = [v for v in vertices if matrix[Pair(v, v)].total_cost < 0.0]
    if negative:
        logger.warning("Negative cycle reaches %d of %d vertices", len(negative), len(vertices))
        raise NegativeCyclesError(negative)


# =============================================================================
# LONGEST PATHS (MULTIPLICATIVE)
# =============================================================================


def longest_paths_mult(
    edges: Iterable[Edge],
    log_weight: Callable[[float], float] = neg_log2_decimal,
) -> dict[Pair, Path]:
    """
    Пути с максимальным произведением курсов между всеми парами.

    1. Дедупликация с TieBreak.MAXIMUM — лучший курс на пару
       (до логарифмирования)
    2. Запоминание исходного курса по (pair, provider)
    3. cost' = -log2(cost)
    4. Floyd–Warshall на преобразованном графе
    5. Восстановление исходных курсов, total_cost = произведение

    Args:
        edges: Рёбра с курсами > 0
        log_weight: Функция веса (-log2), см. src.core.math.log_weights

    Returns:
        Pair → Path; self-pair каждой вершины: Path(1.0, ())

    Raises:
        NegativeCyclesError: Если есть контур с произведением курсов > 1
        ValueError: Если курс не положителен или не конечен
    """
    best = unique_cheapest_edges(edges, TieBreak.MAXIMUM)
    rates = {(e.pair, e.provider): e.cost for e in best}
    weighted = [e.with_cost(log_weight(e.cost)) for e in best]

    result: dict[Pair, Path] = {}
    for pair, path in shortest_paths(weighted).items():
        restored = tuple(e.with_cost(rates[(e.pair, e.provider)]) for e in path.edges)
        total_cost = 1.0
        for e in restored:
            total_cost *= e.cost
        result[pair] = Path(total_cost=total_cost, edges=restored)

    return result
