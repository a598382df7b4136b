"""
Fixtures compartilhadas pelos testes.
"""

import pandas as pd
import pytest

from wisdom.infrastructure.config import get_settings
from wisdom.infrastructure.logging import TransformLogger


WISDOM_ENV_VARS = [
    "WISDOM_DEFAULT_NEW_MIN",
    "WISDOM_DEFAULT_NEW_MAX",
    "WISDOM_OVERWRITE_COLUMNS",
    "WISDOM_LOG_LEVEL",
    "WISDOM_TRANSFORM_LOG_FILE",
    "WISDOM_MAX_TRANSFORM_LOGS",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isola cada teste das variáveis de ambiente e dos singletons."""
    for var in WISDOM_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    TransformLogger._instance = None
    yield
    get_settings.cache_clear()
    TransformLogger._instance = None


@pytest.fixture
def people_table() -> pd.DataFrame:
    return pd.DataFrame({
        "name": ["fred", "john", "sally"],
        "age": [31.0, 24.0, 10.0],
    })
