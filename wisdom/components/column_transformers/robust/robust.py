"""
Escalonador Robust.

Escala usando mediana e IQR (robusto a outliers).
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np

from ..base import (
    ColumnTransformer,
    TransformerCharter,
    TransformerRegistry,
    TransformFailure,
    TransformGuardError,
    defined_values,
)


@TransformerRegistry.register
class RobustScaler(ColumnTransformer):
    """
    Escalonador Robust.
    
    Usa mediana e IQR (Interquartile Range):
    x_new = (x - median) / IQR
    
    Mais robusto a outliers que MinMax ou Z-Score.
    
    Parâmetros:
        quantile_range: Percentis (q_low, q_high) que definem o IQR
    """
    
    name = "robust"
    description = "Escala usando mediana e IQR (robusto a outliers)"
    
    @dataclass(frozen=True)
    class Charter(TransformerCharter):
        quantile_range: Tuple[float, float] = (25.0, 75.0)
        overwrite: bool = True
        
        def __post_init__(self):
            if len(self.quantile_range) != 2:
                raise ValueError(
                    f"quantile_range deve ter 2 valores, recebido: {self.quantile_range}"
                )
            q_low, q_high = self.quantile_range
            if not 0.0 <= q_low < q_high <= 100.0:
                raise ValueError(
                    f"quantile_range deve satisfazer 0 <= q_low < q_high <= 100, "
                    f"recebido: {self.quantile_range}"
                )
            object.__setattr__(self, "quantile_range", (float(q_low), float(q_high)))
        
        def found(self) -> "RobustScaler":
            return RobustScaler(charter=self)
    
    def __init__(self, charter: "RobustScaler.Charter"):
        self.charter = charter
        self.quantile_range = charter.quantile_range
        super().__init__(overwrite=charter.overwrite)
    
    def fit(self, values: np.ndarray) -> Dict[str, float]:
        defined = defined_values(values)
        if defined.size == 0:
            raise TransformGuardError(
                TransformFailure.UNDEFINED_EXTREMUM, "Coluna sem valores definidos"
            )
        
        median = float(np.median(defined))
        q1, q3 = np.percentile(defined, list(self.quantile_range))
        iqr = float(q3 - q1)
        if iqr == 0.0:
            raise TransformGuardError(
                TransformFailure.DEGENERATE_RANGE,
                f"IQR nulo (q1 == q3 == {float(q1)})",
            )
        
        return {"median": median, "iqr": iqr, "q1": float(q1), "q3": float(q3)}
    
    def apply(self, values: np.ndarray, params: Dict[str, float]) -> np.ndarray:
        return (values - params["median"]) / params["iqr"]
    
    def _describe_params(self) -> Dict[str, Any]:
        return {"quantile_range": self.quantile_range, "overwrite": self.overwrite}
