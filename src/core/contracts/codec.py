"""
Contract Codec — JSON контракты ↔ доменные модели

Входной снапшот валидируется схемой до построения моделей;
выходная таблица валидируется после сериализации.
"""

from typing import Any, Dict, List, Mapping, Tuple

from src.core.contracts.validators import validate_best_path_table, validate_price_observations
from src.core.domain.price_path import Pair, PricePath, ProviderPair
from src.core.math.fixed_point import to_u128


def observations_from_contract(data: List[Dict[str, Any]]) -> List[Tuple[ProviderPair, int]]:
    """
    price_observations JSON → [(ProviderPair, price)] с сохранением порядка.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_price_observations(data)
    return [
        (
            ProviderPair(
                pair=Pair(source=item["source"], target=item["target"]),
                provider=item["provider"],
            ),
            to_u128(item["price"]),
        )
        for item in data
    ]


def best_path_table_to_contract(table: Mapping[Pair, PricePath]) -> List[Dict[str, Any]]:
    """
    Таблица лучших путей → best_path_table JSON.

    Raises:
        ValidationError: Если результат не соответствует схеме
    """
    data = [
        {
            "source": pair.source,
            "target": pair.target,
            "total_cost": path.total_cost,
            "steps": [
                {
                    "source": step.pair.source,
                    "target": step.pair.target,
                    "provider": step.provider,
                    "cost": step.cost,
                }
                for step in path.steps
            ],
        }
        for pair, path in table.items()
    ]
    validate_best_path_table(data)
    return data
