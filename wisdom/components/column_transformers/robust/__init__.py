"""
Escalonador Robust.

Escala usando mediana e IQR (robusto a outliers).
"""

from .robust import RobustScaler

__all__ = ["RobustScaler"]
