"""
Classes base para transformadores de coluna.

Define a interface comum que todos os transformadores devem implementar:
uma carta (configuração imutável) cria o transformador via `found()`, e o
transformador lê uma coluna da tabela, calcula a nova coluna e a registra
na mesma tabela.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Type

import numpy as np
import pandas as pd

from wisdom.domain.validators import ColumnValidator, column_as_float
from wisdom.infrastructure.logging import TransformTimer, get_transform_logger

logger = logging.getLogger(__name__)


class TransformFailure(str, Enum):
    """Motivos pelos quais uma transformação não é aplicada."""
    SOURCE_COLUMN_INVALID = "source_column_invalid"
    UNDEFINED_EXTREMUM = "undefined_extremum"
    DEGENERATE_RANGE = "degenerate_range"
    COLUMN_EXISTS = "column_exists"


@dataclass
class TransformerError:
    """Descrição de uma transformação que não foi aplicada."""
    transformer_description: str
    old_column_name: str
    new_column_name: str
    message: str
    reason: TransformFailure

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transformer_description": self.transformer_description,
            "old_column_name": self.old_column_name,
            "new_column_name": self.new_column_name,
            "message": self.message,
            "reason": self.reason.value,
        }

    def __str__(self) -> str:
        return (
            f"{self.transformer_description}: '{self.old_column_name}' → "
            f"'{self.new_column_name}': {self.message}"
        )


class TransformGuardError(Exception):
    """Sinaliza, dentro de fit(), que a transformação não se aplica à coluna."""

    def __init__(self, reason: TransformFailure, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


def empty_column(name: Optional[str] = None) -> pd.Series:
    """Coluna vazia usada como marcador de resultado inválido."""
    return pd.Series([], dtype="float64", name=name)


@dataclass
class TransformResult:
    """
    Resultado de uma transformação.

    Em caso de sucesso, `column` é a coluna registrada na tabela. Em caso de
    falha, `column` é vazia, `success` é False e `error` informa o motivo.
    Pode ser usado como coluna: len(), indexação posicional e iteração.
    """
    column: pd.Series
    success: bool = True
    error: Optional[TransformerError] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, column: pd.Series, **metadata) -> "TransformResult":
        """Factory para resultado válido."""
        return cls(column=column, success=True, metadata=metadata)

    @classmethod
    def invalid(cls, error: Optional[TransformerError] = None) -> "TransformResult":
        """Factory para o marcador inválido/vazio."""
        name = error.new_column_name if error is not None else None
        return cls(column=empty_column(name), success=False, error=error)

    @property
    def is_valid(self) -> bool:
        return self.success

    @property
    def reason(self) -> Optional[TransformFailure]:
        return self.error.reason if self.error is not None else None

    def to_numpy(self) -> np.ndarray:
        return self.column.to_numpy(dtype=np.float64)

    def __len__(self) -> int:
        return len(self.column)

    def __getitem__(self, position: int) -> float:
        return float(self.column.iloc[position])

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_numpy())


class TransformerCharter(ABC):
    """
    Carta (configuração imutável) de um transformador.

    Pode ser guardada e reutilizada; cada `found()` cria um transformador
    independente de qualquer tabela.
    """

    @abstractmethod
    def found(self) -> "ColumnTransformer":
        """Cria o transformador configurado por esta carta."""
        pass


class ColumnTransformer(ABC):
    """
    Interface base para todos os transformadores de coluna.

    Cada transformador deve:
    1. Ter um nome único (class attribute `name`)
    2. Declarar uma carta aninhada `Charter` (TransformerCharter)
    3. Implementar `fit()` para calcular os parâmetros a partir da coluna,
       levantando TransformGuardError quando a coluna não se presta
    4. Implementar `apply()` para calcular os novos valores

    `transform()` nunca levanta exceção por causa dos dados: falhas voltam
    como TransformResult inválido e a tabela não é alterada.
    """

    name: str = "base"
    description: str = "Transformador base abstrato"

    Charter: Type[TransformerCharter]

    def __init__(self, overwrite: bool = True):
        self.overwrite = overwrite
        self._validator = ColumnValidator()
        # Erros de configuração do logging surgem aqui, não em transform()
        self._transform_logger = get_transform_logger()

    @abstractmethod
    def fit(self, values: np.ndarray) -> Dict[str, float]:
        """
        Calcula os parâmetros da transformação.

        Args:
            values: Coluna de origem em float64 (NaN = ausente)

        Returns:
            Parâmetros usados por apply() e devolvidos em metadata

        Raises:
            TransformGuardError: Se a transformação não se aplica
        """
        pass

    @abstractmethod
    def apply(self, values: np.ndarray, params: Dict[str, float]) -> np.ndarray:
        """Calcula os novos valores (float64, mesmo tamanho da entrada)."""
        pass

    def transform(self, old_name: str, new_name: str, table: pd.DataFrame) -> TransformResult:
        """
        Lê `old_name` de `table`, registra a coluna transformada como
        `new_name` e a retorna.

        Returns:
            TransformResult válido com a nova coluna, ou o marcador inválido
        """
        with TransformTimer() as timer:
            result = self._run(old_name, new_name, table)

        try:
            self._transform_logger.log_transform(
                transformer=self.name,
                old_column=str(old_name),
                new_column=str(new_name),
                rows=len(result),
                latency_ms=timer.latency_ms,
                success=result.success,
                reason=result.reason.value if result.reason is not None else None,
                error=result.error.message if result.error is not None else None,
            )
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Erro ao registrar transformação {self.name}: {e}")
        return result

    def _run(self, old_name: str, new_name: str, table: pd.DataFrame) -> TransformResult:
        validation = self._validator.validate(table, old_name)
        if not validation.is_valid:
            return self._fail(
                TransformFailure.SOURCE_COLUMN_INVALID,
                old_name,
                new_name,
                "; ".join(validation.errors),
            )

        if not self.overwrite and new_name in table.columns:
            return self._fail(
                TransformFailure.COLUMN_EXISTS,
                old_name,
                new_name,
                f"Coluna '{new_name}' já existe e overwrite=False",
            )

        values = column_as_float(table[old_name])

        try:
            params = self.fit(values)
        except TransformGuardError as e:
            return self._fail(e.reason, old_name, new_name, e.message)

        new_values = np.asarray(self.apply(values, params), dtype=np.float64)
        new_column = pd.Series(new_values, index=table.index, name=new_name, dtype="float64")
        table[new_name] = new_column

        return TransformResult.ok(
            new_column,
            transformer=self.name,
            old_column=old_name,
            new_column=new_name,
            **params,
        )

    def _fail(
        self,
        reason: TransformFailure,
        old_name: str,
        new_name: str,
        message: str,
    ) -> TransformResult:
        error = TransformerError(
            transformer_description=repr(self),
            old_column_name=old_name,
            new_column_name=new_name,
            message=message,
            reason=reason,
        )
        return TransformResult.invalid(error)

    def _describe_params(self) -> Dict[str, Any]:
        return {"overwrite": self.overwrite}

    def __repr__(self) -> str:
        params_str = ", ".join(f"{k}={v}" for k, v in self._describe_params().items())
        return f"{self.__class__.__name__}({params_str})"


def defined_values(values: np.ndarray) -> np.ndarray:
    """Valores não ausentes da coluna."""
    return values[~np.isnan(values)]


class TransformerRegistry:
    """
    Registro de transformadores disponíveis.

    Permite descobrir transformadores pelo nome e criá-los a partir de
    parâmetros da carta.
    """

    _transformers: Dict[str, Type[ColumnTransformer]] = {}

    @classmethod
    def register(cls, transformer_class: Type[ColumnTransformer]) -> Type[ColumnTransformer]:
        """
        Decorator para registrar um transformador.

        Usage:
            @TransformerRegistry.register
            class MyTransformer(ColumnTransformer):
                name = "my_transformer"
                ...
        """
        cls._transformers[transformer_class.name] = transformer_class
        return transformer_class

    @classmethod
    def get(cls, name: str) -> Type[ColumnTransformer]:
        """
        Obtém uma classe de transformador pelo nome.

        Raises:
            ValueError: Se transformador não registrado
        """
        if name not in cls._transformers:
            available = list(cls._transformers.keys())
            raise ValueError(f"Transformador '{name}' não encontrado. Disponíveis: {available}")
        return cls._transformers[name]

    @classmethod
    def charter(cls, name: str, **params) -> TransformerCharter:
        """Cria a carta de um transformador registrado."""
        return cls.get(name).Charter(**params)

    @classmethod
    def create(cls, name: str, **params) -> ColumnTransformer:
        """Cria um transformador a partir dos parâmetros da sua carta."""
        return cls.charter(name, **params).found()

    @classmethod
    def list_transformers(cls) -> List[str]:
        """Lista todos os transformadores registrados."""
        return list(cls._transformers.keys())
