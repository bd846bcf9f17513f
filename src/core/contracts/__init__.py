"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе калькулятора лучших путей.
"""

from .codec import best_path_table_to_contract, observations_from_contract
from .validators import (
    BEST_PATH_TABLE_VALIDATOR,
    PRICE_OBSERVATIONS_VALIDATOR,
    SCHEMA_DIR,
    FixedPointValidator,
    load_schema,
    validate_best_path_table,
    validate_price_observations,
)

__all__ = [
    # Schemas
    "SCHEMA_DIR",
    "FixedPointValidator",
    "load_schema",
    "PRICE_OBSERVATIONS_VALIDATOR",
    "BEST_PATH_TABLE_VALIDATOR",
    # Functions
    "validate_price_observations",
    "validate_best_path_table",
    # Codec
    "observations_from_contract",
    "best_path_table_to_contract",
]
