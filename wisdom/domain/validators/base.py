"""
Classes base para validadores de dados.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Any


@dataclass
class ValidationResult:
    """Resultado de uma validação."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def ok(cls, **metadata) -> "ValidationResult":
        """Factory para resultado válido."""
        return cls(is_valid=True, metadata=metadata)
    
    @classmethod
    def fail(cls, error: str, **metadata) -> "ValidationResult":
        """Factory para resultado inválido."""
        return cls(is_valid=False, errors=[error], metadata=metadata)
    
    def add_error(self, error: str):
        """Adiciona erro e marca como inválido."""
        self.errors.append(error)
        self.is_valid = False
    
    def add_warning(self, warning: str):
        """Adiciona aviso (não invalida)."""
        self.warnings.append(warning)


@dataclass
class ValidationConfig:
    """Configuração para validação de coluna."""
    allow_nan: bool = True
    allow_inf: bool = False


class Validator(ABC):
    """
    Classe base abstrata para validadores.
    
    Cada validador implementa uma verificação específica.
    """
    
    name: str = "base"
    description: str = "Validador base"
    
    @abstractmethod
    def validate(self, *args: Any, config: ValidationConfig = None) -> ValidationResult:
        """
        Valida os dados.
        
        Returns:
            ValidationResult com resultado
        """
        pass
