"""
wisdom - transformadores de coluna para tabelas numéricas.
"""

from wisdom.components.column_transformers import (
    ColumnTransformer,
    TransformerCharter,
    TransformerRegistry,
    TransformerError,
    TransformFailure,
    TransformResult,
    RangeRescaler,
    ZScoreStandardizer,
    RobustScaler,
    rescale_column,
    inverse_rescale,
)

__version__ = "0.1.0"

__all__ = [
    "ColumnTransformer",
    "TransformerCharter",
    "TransformerRegistry",
    "TransformerError",
    "TransformFailure",
    "TransformResult",
    "RangeRescaler",
    "ZScoreStandardizer",
    "RobustScaler",
    "rescale_column",
    "inverse_rescale",
]
