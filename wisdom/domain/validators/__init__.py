"""
Validadores de dados.
"""

from .base import Validator, ValidationResult, ValidationConfig
from .column_validator import ColumnValidator, is_real_numeric, column_as_float

__all__ = [
    "Validator",
    "ValidationResult",
    "ValidationConfig",
    "ColumnValidator",
    "is_real_numeric",
    "column_as_float",
]
