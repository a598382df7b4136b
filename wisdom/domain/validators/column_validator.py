"""
Validador de coluna de origem.

Verifica se uma coluna de uma tabela pode ser lida como float64.
"""

import numpy as np
import pandas as pd
from pandas.api import types as ptypes

from .base import Validator, ValidationResult, ValidationConfig


def is_real_numeric(column: pd.Series) -> bool:
    """True para dtypes inteiros ou de ponto flutuante (exclui bool e complexo)."""
    dtype = column.dtype
    if ptypes.is_bool_dtype(dtype) or ptypes.is_complex_dtype(dtype):
        return False
    return ptypes.is_integer_dtype(dtype) or ptypes.is_float_dtype(dtype)


def column_as_float(column: pd.Series) -> np.ndarray:
    """Converte a coluna para float64, com valores ausentes como NaN."""
    return column.to_numpy(dtype=np.float64, na_value=np.nan)


class ColumnValidator(Validator):
    """
    Validador de colunas numéricas.
    
    Verifica:
    - Existência da coluna (e nome não duplicado)
    - dtype numérico real
    - Valores NaN (aviso) e Inf (erro, por padrão)
    """
    
    name = "column"
    description = "Valida coluna numérica de uma tabela"
    
    def validate(
        self,
        table: pd.DataFrame,
        column_name: str,
        config: ValidationConfig = None
    ) -> ValidationResult:
        """Valida a coluna `column_name` de `table`."""
        cfg = config or ValidationConfig()
        
        if not isinstance(table, pd.DataFrame):
            return ValidationResult.fail(
                f"Tabela deve ser pandas.DataFrame, recebido: {type(table).__name__}"
            )
        
        if column_name not in table.columns:
            return ValidationResult.fail(f"Coluna '{column_name}' não encontrada")
        
        column = table[column_name]
        if isinstance(column, pd.DataFrame):
            return ValidationResult.fail(f"Nome de coluna duplicado: '{column_name}'")
        
        if not is_real_numeric(column):
            return ValidationResult.fail(
                f"Coluna '{column_name}' não é numérica (dtype={column.dtype})"
            )
        
        arr = column_as_float(column)
        result = ValidationResult.ok()
        
        nan_count = int(np.sum(np.isnan(arr)))
        if nan_count > 0:
            if cfg.allow_nan:
                result.add_warning(f"Coluna contém {nan_count} valores ausentes")
            else:
                result.add_error(f"Coluna contém {nan_count} valores ausentes")
        
        inf_count = int(np.sum(np.isinf(arr)))
        if inf_count > 0:
            if cfg.allow_inf:
                result.add_warning(f"Coluna contém {inf_count} valores Inf")
            else:
                result.add_error(f"Coluna contém {inf_count} valores Inf")
        
        finite = arr[np.isfinite(arr)]
        result.metadata = {
            "length": len(arr),
            "dtype": str(column.dtype),
            "nan_count": nan_count,
            "inf_count": inf_count,
            "min": float(np.min(finite)) if len(finite) > 0 else None,
            "max": float(np.max(finite)) if len(finite) > 0 else None,
        }
        
        return result
