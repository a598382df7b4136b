"""
Reescalonador MinMax.

Reescala uma coluna para um intervalo [new_min, new_max].
"""

from .minmax import RangeRescaler, column_min, column_max

__all__ = ["RangeRescaler", "column_min", "column_max"]
