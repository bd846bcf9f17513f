"""Best Path Changes — отбор изменений между опубликованной и новой таблицей.

В изменения попадают:
- пары из обеих таблиц, у которых total_cost изменился сильнее tolerance
- пары, впервые появившиеся в новой таблице

Пары, отсутствующие в новой таблице, пропускаются: отсутствие цены
в текущем снапшоте не означает удаления пути.
"""

import logging
from dataclasses import dataclass
from typing import Final, Mapping

from src.core.domain.price_path import Pair, PricePath
from src.core.math.fixed_point import breaches_tolerance

logger = logging.getLogger(__name__)

# Допуск изменения цены по умолчанию (ppm): 0.1%
PRICE_CHANGE_TOLERANCE_DEFAULT: Final[int] = 1_000


@dataclass(frozen=True)
class BestPathChange:
    """Изменение лучшего пути для публикации."""

    pair: Pair
    path: PricePath

    # Предыдущая стоимость (None: новая пара)
    old_total_cost: int | None = None

    @property
    def is_new(self) -> bool:
        return self.old_total_cost is None


def select_best_path_changes(
    old_paths: Mapping[Pair, PricePath],
    new_paths: Mapping[Pair, PricePath],
    tolerance: int = PRICE_CHANGE_TOLERANCE_DEFAULT,
) -> list[BestPathChange]:
    """
    Изменения лучших путей, превышающие tolerance.

    Args:
        old_paths: Ранее опубликованная таблица
        new_paths: Свежерассчитанная таблица
        tolerance: Допуск в parts per million

    Returns:
        Сначала изменённые пары (в порядке old_paths), затем новые
        (в порядке new_paths)

    Raises:
        ValueError: Если tolerance < 0
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    changes: list[BestPathChange] = []

    for pair, old_path in old_paths.items():
        new_path = new_paths.get(pair)
        if new_path is None:
            logger.debug("No price calculated for %s -> %s", pair.source, pair.target)
            continue

        old_cost, new_cost = old_path.total_cost, new_path.total_cost
        if breaches_tolerance(old_cost, new_cost, tolerance):
            logger.debug(
                "Price change for %s -> %s in excess of tolerance %d: %d -> %d",
                pair.source, pair.target, tolerance, old_cost, new_cost,
            )
            changes.append(BestPathChange(pair=pair, path=new_path, old_total_cost=old_cost))
        else:
            logger.debug(
                "Skipping price change for %s -> %s within tolerance %d: %d -> %d",
                pair.source, pair.target, tolerance, old_cost, new_cost,
            )

    for pair, new_path in new_paths.items():
        if pair not in old_paths:
            logger.debug("New price for %s -> %s: %d", pair.source, pair.target, new_path.total_cost)
            changes.append(BestPathChange(pair=pair, path=new_path))

    if not changes:
        logger.info("Detected no price changes that breached tolerance level")

    return changes
