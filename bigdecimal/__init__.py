"""Arbitrary-precision decimal arithmetic with explicit rounding."""

from bigdecimal.big_decimal import MAX_POW_EXPONENT, BigDecimal
from bigdecimal.config import DEFAULT_CONFIG, DecimalConfig, get_config
from bigdecimal.errors import (
    BigDecimalError,
    DivisionByZero,
    DomainError,
    FormatError,
    RoundingRequiredError,
)
from bigdecimal.rounding import RoundingMode

__version__ = "0.1.0"
__all__ = [
    "BigDecimal",
    "BigDecimalError",
    "DEFAULT_CONFIG",
    "DecimalConfig",
    "DivisionByZero",
    "DomainError",
    "FormatError",
    "MAX_POW_EXPONENT",
    "RoundingMode",
    "RoundingRequiredError",
    "__version__",
    "get_config",
]
