"""
Componentes de processamento de colunas.

- column_transformers/: Transformadores de coluna (minmax, zscore, robust)
"""

from . import column_transformers
