"""
Padronizador Z-Score.

Padroniza uma coluna para média 0 e desvio padrão 1.
"""

from dataclasses import dataclass
from typing import Any, Dict

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
class ZScoreStandardizer(ColumnTransformer):
    """
    Padronizador Z-Score (Standardization).
    
    x_new = (x - mean) / std
    
    Parâmetros:
        ddof: Graus de liberdade do desvio padrão (0 = populacional)
    """
    
    name = "zscore"
    description = "Padroniza para média=0, std=1"
    
    @dataclass(frozen=True)
    class Charter(TransformerCharter):
        ddof: int = 0
        overwrite: bool = True
        
        def __post_init__(self):
            if self.ddof < 0:
                raise ValueError(f"ddof deve ser >= 0, recebido: {self.ddof}")
        
        def found(self) -> "ZScoreStandardizer":
            return ZScoreStandardizer(charter=self)
    
    def __init__(self, charter: "ZScoreStandardizer.Charter"):
        self.charter = charter
        self.ddof = charter.ddof
        super().__init__(overwrite=charter.overwrite)
    
    def fit(self, values: np.ndarray) -> Dict[str, float]:
        defined = defined_values(values)
        if defined.size <= self.ddof:
            raise TransformGuardError(
                TransformFailure.UNDEFINED_EXTREMUM,
                f"Valores definidos insuficientes para std (n={defined.size}, ddof={self.ddof})",
            )
        
        mean = float(np.mean(defined))
        std = float(np.std(defined, ddof=self.ddof))
        if std == 0.0:
            raise TransformGuardError(
                TransformFailure.DEGENERATE_RANGE,
                f"Coluna constante (std == 0, mean == {mean})",
            )
        
        return {"mean": mean, "std": std}
    
    def apply(self, values: np.ndarray, params: Dict[str, float]) -> np.ndarray:
        return (values - params["mean"]) / params["std"]
    
    def _describe_params(self) -> Dict[str, Any]:
        return {"ddof": self.ddof, "overwrite": self.overwrite}
