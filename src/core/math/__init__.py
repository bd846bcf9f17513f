"""
Core math modules для Best Path

Численные примитивы: float guards, log-веса, fixed-point конверсия.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_COST_COMPARE_ABS,
    EPS_COST_COMPARE_REL,
    is_close,
    is_comparable,
    is_valid_float,
    validate_comparable,
    validate_positive_rate,
)

# Log Weights
from src.core.math.log_weights import (
    LOG_DECIMAL_PRECISION,
    LogMode,
    neg_log2_decimal,
    neg_log2_float,
    neg_log2_for,
)

# Fixed Point
from src.core.math.fixed_point import (
    FIXED_POINT_PRECISION,
    FIXED_POINT_SCALE,
    TOLERANCE_DENOMINATOR,
    U128_MAX,
    breaches_tolerance,
    fixed_to_float,
    float_to_fixed,
    parse_price,
    to_u128,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_COST_COMPARE_ABS",
    "EPS_COST_COMPARE_REL",
    # Numerical Safeguards: Checks
    "is_close",
    "is_comparable",
    "is_valid_float",
    # Numerical Safeguards: Validation
    "validate_comparable",
    "validate_positive_rate",
    # Log Weights
    "LOG_DECIMAL_PRECISION",
    "LogMode",
    "neg_log2_decimal",
    "neg_log2_float",
    "neg_log2_for",
    # Fixed Point: Constants
    "FIXED_POINT_PRECISION",
    "FIXED_POINT_SCALE",
    "TOLERANCE_DENOMINATOR",
    "U128_MAX",
    # Fixed Point: Functions
    "breaches_tolerance",
    "fixed_to_float",
    "float_to_fixed",
    "parse_price",
    "to_u128",
]
