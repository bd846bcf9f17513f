"""
JSON Schema контракты границы калькулятора

Два контракта (Draft 2020-12, schema/ рядом с модулем):
- price_observations.json: входной снапшот цен
- best_path_table.json: выходная таблица лучших путей

Все суммы — fixed-point целые. Стандартный тип "integer" в jsonschema
принимает 2.0; здесь он переопределён строго (int, но не bool и не float),
чтобы контракт совпадал с to_u128 калькулятора.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, SchemaError
from jsonschema.validators import extend

SCHEMA_DIR = Path(__file__).parent / "schema"


def _is_strict_integer(checker, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


# Draft 2020-12 со строгим "integer" для fixed-point сумм
FixedPointValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Загрузка и meta-validation схемы контракта.

    Args:
        schema_name: Имя схемы без расширения (например, 'best_path_table')
        schema_dir: Каталог схем

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        FixedPointValidator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


# Валидаторы собираются один раз при импорте
PRICE_OBSERVATIONS_VALIDATOR = FixedPointValidator(load_schema("price_observations"))
BEST_PATH_TABLE_VALIDATOR = FixedPointValidator(load_schema("best_path_table"))


def validate_price_observations(data: Any) -> None:
    """
    Валидация снапшота наблюдаемых цен.

    Цена — целое в [1, U128_MAX]: нулевая цена не имеет логарифма
    и отвергается уже на границе.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PRICE_OBSERVATIONS_VALIDATOR.validate(data)


def validate_best_path_table(data: Any) -> None:
    """
    Валидация таблицы лучших путей.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BEST_PATH_TABLE_VALIDATOR.validate(data)
