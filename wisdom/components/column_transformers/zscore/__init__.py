"""
Padronizador Z-Score.

Padroniza uma coluna para média 0 e desvio padrão 1.
"""

from .zscore import ZScoreStandardizer

__all__ = ["ZScoreStandardizer"]
