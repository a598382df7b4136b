"""
Reescalonador MinMax.

Mapeia o intervalo observado [min, max] de uma coluna para [new_min, new_max].
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from wisdom.infrastructure.config import Settings, get_settings
from ..base import (
    ColumnTransformer,
    TransformerCharter,
    TransformerRegistry,
    TransformFailure,
    TransformGuardError,
    defined_values,
)


def column_min(values: np.ndarray) -> Optional[float]:
    """Mínimo ignorando ausentes; None se não houver valor definido."""
    defined = defined_values(values)
    if defined.size == 0:
        return None
    return float(np.min(defined))


def column_max(values: np.ndarray) -> Optional[float]:
    """Máximo ignorando ausentes; None se não houver valor definido."""
    defined = defined_values(values)
    if defined.size == 0:
        return None
    return float(np.max(defined))


@TransformerRegistry.register
class RangeRescaler(ColumnTransformer):
    """
    Reescalonador MinMax.
    
    Transformação afim de [old_min, old_max] para [new_min, new_max]:
    x_new = (x - old_min) / (old_max - old_min) * (new_max - new_min) + new_min
    
    Não há restrição new_min < new_max: com new_min > new_max a ordem é
    invertida. Valores ausentes continuam ausentes.
    """
    
    name = "minmax"
    description = "Reescala para [new_min, new_max] usando min/max da coluna"
    
    @dataclass(frozen=True)
    class Charter(TransformerCharter):
        new_min: float = 0.0
        new_max: float = 1.0
        overwrite: bool = True
        
        @classmethod
        def from_settings(cls, settings: Settings = None) -> "RangeRescaler.Charter":
            """Carta com o intervalo e a política padrão das configurações."""
            settings = settings or get_settings()
            return cls(
                new_min=settings.default_new_min,
                new_max=settings.default_new_max,
                overwrite=settings.overwrite_columns,
            )
        
        def found(self) -> "RangeRescaler":
            return RangeRescaler(charter=self)
    
    def __init__(self, charter: "RangeRescaler.Charter"):
        self.charter = charter
        self.new_min = float(charter.new_min)
        self.new_max = float(charter.new_max)
        super().__init__(overwrite=charter.overwrite)
    
    def fit(self, values: np.ndarray) -> Dict[str, float]:
        old_min = column_min(values)
        if old_min is None:
            raise TransformGuardError(
                TransformFailure.UNDEFINED_EXTREMUM, "Coluna sem mínimo definido"
            )
        
        old_max = column_max(values)
        if old_max is None:
            raise TransformGuardError(
                TransformFailure.UNDEFINED_EXTREMUM, "Coluna sem máximo definido"
            )
        
        if old_min == old_max:
            raise TransformGuardError(
                TransformFailure.DEGENERATE_RANGE,
                f"Coluna constante (min == max == {old_min})",
            )
        
        return {
            "min": old_min,
            "max": old_max,
            "new_min": self.new_min,
            "new_max": self.new_max,
        }
    
    def apply(self, values: np.ndarray, params: Dict[str, float]) -> np.ndarray:
        old_min, old_max = params["min"], params["max"]
        new_min, new_max = params["new_min"], params["new_max"]

        span = old_max - old_min
        if np.isfinite(span):
            unit = (values - old_min) / span
        else:
            # Amplitude acima do maior float64: dividir antes de subtrair
            unit = (values / 2 - old_min / 2) / (old_max / 2 - old_min / 2)

        scaled = unit * (new_max - new_min) + new_min

        # Extremos exatos, sem erro de arredondamento
        scaled[values == old_min] = new_min
        scaled[values == old_max] = new_max

        return scaled
    
    def _describe_params(self) -> Dict[str, Any]:
        return {
            "new_min": self.new_min,
            "new_max": self.new_max,
            "overwrite": self.overwrite,
        }
