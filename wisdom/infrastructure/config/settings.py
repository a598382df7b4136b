"""
Configurações da biblioteca.

Responsabilidade única: centralizar configurações lidas do ambiente.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Variável {name} deve ser numérica, recebido: {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Variável {name} deve ser inteira, recebido: {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Variável {name} deve ser booleana, recebido: {raw!r}")


@dataclass
class Settings:
    """Configurações da biblioteca."""
    
    # Intervalo alvo padrão do RangeRescaler
    default_new_min: float
    default_new_max: float
    
    # Política para coluna de destino já existente
    overwrite_columns: bool
    
    # Logging
    log_level: str
    transform_log_file: Optional[str]
    max_transform_logs: int
    
    @classmethod
    def from_env(cls) -> "Settings":
        """Cria configurações a partir de variáveis de ambiente."""
        max_logs = _env_int("WISDOM_MAX_TRANSFORM_LOGS", 10000)
        if max_logs < 1:
            raise ValueError(f"WISDOM_MAX_TRANSFORM_LOGS deve ser >= 1, recebido: {max_logs}")
        
        return cls(
            default_new_min=_env_float("WISDOM_DEFAULT_NEW_MIN", 0.0),
            default_new_max=_env_float("WISDOM_DEFAULT_NEW_MAX", 1.0),
            overwrite_columns=_env_bool("WISDOM_OVERWRITE_COLUMNS", True),
            log_level=os.getenv("WISDOM_LOG_LEVEL", "INFO").upper(),
            transform_log_file=os.getenv("WISDOM_TRANSFORM_LOG_FILE") or None,
            max_transform_logs=max_logs,
        )


@lru_cache()
def get_settings() -> Settings:
    """Retorna instância singleton das configurações."""
    return Settings.from_env()
