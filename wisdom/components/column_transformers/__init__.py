"""
Módulo de transformadores de coluna.

Fornece diferentes estratégias para derivar uma coluna numérica nova
a partir de outra coluna da mesma tabela.
"""

from dataclasses import replace
from typing import Optional

import numpy as np
import pandas as pd

from .base import (
    ColumnTransformer,
    TransformerCharter,
    TransformerRegistry,
    TransformerError,
    TransformFailure,
    TransformGuardError,
    TransformResult,
)
from .minmax import RangeRescaler
from .zscore import ZScoreStandardizer
from .robust import RobustScaler


def rescale_column(
    table: pd.DataFrame,
    old_name: str,
    new_name: str,
    new_min: Optional[float] = None,
    new_max: Optional[float] = None,
) -> TransformResult:
    """
    Função de conveniência para reescalar uma coluna.
    
    Args:
        table: Tabela (alterada in-place em caso de sucesso)
        old_name: Coluna de origem
        new_name: Coluna a registrar
        new_min, new_max: Intervalo alvo (padrão: configurações)
    
    Returns:
        TransformResult da transformação
    """
    bounds = {
        key: value
        for key, value in (("new_min", new_min), ("new_max", new_max))
        if value is not None
    }
    charter = replace(RangeRescaler.Charter.from_settings(), **bounds)
    return charter.found().transform(old_name, new_name, table)


def inverse_rescale(
    values,
    old_min: float,
    old_max: float,
    new_min: float = 0.0,
    new_max: float = 1.0,
) -> np.ndarray:
    """
    Função de conveniência para desfazer um reescalonamento MinMax.
    
    Args:
        values: Valores reescalados
        old_min, old_max: Extremos da coluna original (metadata "min"/"max")
        new_min, new_max: Intervalo usado no reescalonamento
    
    Returns:
        Valores na escala original
    """
    if new_max == new_min:
        raise ValueError("Intervalo alvo de largura zero não pode ser invertido")
    if old_max == old_min:
        raise ValueError("Intervalo original de largura zero não pode ser invertido")
    
    arr = np.asarray(values, dtype=np.float64)
    return (arr - new_min) / (new_max - new_min) * (old_max - old_min) + old_min


__all__ = [
    # Base
    "ColumnTransformer",
    "TransformerCharter",
    "TransformerRegistry",
    "TransformerError",
    "TransformFailure",
    "TransformGuardError",
    "TransformResult",
    
    # Transformadores
    "RangeRescaler",
    "ZScoreStandardizer",
    "RobustScaler",
    
    # Funções de conveniência
    "rescale_column",
    "inverse_rescale",
]
