"""
Logging estruturado para transformações de coluna.

Este módulo fornece:
- Registro estruturado de cada chamada a transform()
- Métricas agregadas (sucesso, latência, falhas por motivo)
- Exportação dos registros para arquivo
"""

from __future__ import annotations

import csv
import json
import logging
import sys
import threading
import time
from dataclasses import dataclass, field, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional

from wisdom.infrastructure.config import get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


# =============================================================================
# DATACLASSES
# =============================================================================

@dataclass
class TransformLog:
    """Registro de uma chamada de transformação."""

    # Identificação
    transform_id: str
    timestamp: str
    transformer: str

    # Colunas
    old_column: str
    new_column: str
    rows: int

    # Métricas
    latency_ms: float

    # Status
    success: bool
    reason: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


@dataclass
class TransformMetrics:
    """Métricas agregadas de transformações."""

    total_transforms: int = 0
    successful_transforms: int = 0
    failed_transforms: int = 0

    total_latency_ms: float = 0.0
    min_latency_ms: float = float('inf')
    max_latency_ms: float = 0.0

    # Falhas por motivo (TransformFailure.value)
    failures_by_reason: dict = field(default_factory=dict)

    # Por transformador
    by_transformer: dict = field(default_factory=dict)

    @property
    def avg_latency_ms(self) -> float:
        if self.total_transforms == 0:
            return 0.0
        return self.total_latency_ms / self.total_transforms

    @property
    def success_rate(self) -> float:
        if self.total_transforms == 0:
            return 0.0
        return self.successful_transforms / self.total_transforms

    def to_dict(self) -> dict:
        return {
            "total_transforms": self.total_transforms,
            "successful_transforms": self.successful_transforms,
            "failed_transforms": self.failed_transforms,
            "success_rate": round(self.success_rate, 3),
            "avg_latency_ms": round(self.avg_latency_ms, 3),
            "min_latency_ms": round(self.min_latency_ms, 3) if self.min_latency_ms != float('inf') else 0,
            "max_latency_ms": round(self.max_latency_ms, 3),
            "failures_by_reason": dict(self.failures_by_reason),
            "by_transformer": {k: dict(v) for k, v in self.by_transformer.items()},
        }


# =============================================================================
# TRANSFORM LOGGER
# =============================================================================

class TransformLogger:
    """
    Logger estruturado para transformações de coluna.

    Fornece:
    - Registro de cada transformação (buffer em memória limitado)
    - Métricas agregadas
    - Persistência opcional em JSON lines
    """

    _instance: Optional["TransformLogger"] = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        settings = get_settings()
        self._logs: list[TransformLog] = []
        self._metrics = TransformMetrics()
        self._max_logs = settings.max_transform_logs
        self._log_file: Optional[Path] = None
        self._enabled = True
        self._counter = 0
        self._initialized = True

        if settings.transform_log_file:
            self.configure(log_file=settings.transform_log_file, max_logs=self._max_logs)

    @classmethod
    def get_instance(cls) -> "TransformLogger":
        """Retorna instância singleton."""
        return cls()

    def configure(
        self,
        log_file: str | Path = None,
        max_logs: int = 10000,
        enabled: bool = True
    ):
        """
        Configura o logger.

        Args:
            log_file: Arquivo JSON lines para persistir registros (opcional)
            max_logs: Máximo de registros em memória
            enabled: Se False, desativa o registro
        """
        if max_logs < 1:
            raise ValueError(f"max_logs deve ser >= 1, recebido: {max_logs}")

        self._max_logs = max_logs
        self._enabled = enabled
        self._log_file = None

        if log_file:
            self._log_file = Path(log_file)
            self._log_file.parent.mkdir(parents=True, exist_ok=True)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def log_transform(
        self,
        transformer: str,
        old_column: str,
        new_column: str,
        rows: int,
        latency_ms: float,
        success: bool = True,
        reason: str = None,
        error: str = None,
    ) -> Optional[TransformLog]:
        """
        Registra uma transformação.

        Returns:
            TransformLog criado, ou None se o logger estiver desativado
        """
        if not self._enabled:
            return None

        with self._lock:
            self._counter += 1
            transform_id = f"tf_{self._counter:08d}"

        log = TransformLog(
            transform_id=transform_id,
            timestamp=datetime.now().isoformat(),
            transformer=transformer,
            old_column=old_column,
            new_column=new_column,
            rows=rows,
            latency_ms=latency_ms,
            success=success,
            reason=reason,
            error=error,
        )

        with self._lock:
            self._update_metrics(log)
            self._logs.append(log)

            if len(self._logs) > self._max_logs:
                self._logs = self._logs[-self._max_logs:]

        if self._log_file:
            self._write_to_file(log)

        if success:
            logger.debug(
                f"Transform: {transformer} | {old_column} → {new_column} | "
                f"rows={rows} | latency={latency_ms:.3f}ms"
            )
        else:
            logger.warning(
                f"Transform FAILED: {transformer} | {old_column} → {new_column} | "
                f"reason={reason} | error={error}"
            )

        return log

    def _update_metrics(self, log: TransformLog):
        """Atualiza métricas agregadas."""
        m = self._metrics

        m.total_transforms += 1

        if log.success:
            m.successful_transforms += 1
        else:
            m.failed_transforms += 1
            key = log.reason or "unknown"
            m.failures_by_reason[key] = m.failures_by_reason.get(key, 0) + 1

        m.total_latency_ms += log.latency_ms
        m.min_latency_ms = min(m.min_latency_ms, log.latency_ms)
        m.max_latency_ms = max(m.max_latency_ms, log.latency_ms)

        if log.transformer not in m.by_transformer:
            m.by_transformer[log.transformer] = {"count": 0, "errors": 0}
        m.by_transformer[log.transformer]["count"] += 1
        if not log.success:
            m.by_transformer[log.transformer]["errors"] += 1

    def _write_to_file(self, log: TransformLog):
        """Escreve registro em arquivo."""
        try:
            with open(self._log_file, "a", encoding="utf-8") as f:
                f.write(log.to_json() + "\n")
        except OSError as e:
            logger.error(f"Erro ao escrever log de transformação: {e}")

    def get_metrics(self) -> TransformMetrics:
        """Retorna métricas agregadas."""
        return self._metrics

    def get_recent_logs(self, n: int = 100) -> list[TransformLog]:
        """Retorna os N registros mais recentes."""
        if n <= 0:
            return []
        return self._logs[-n:]

    def get_logs_by_transformer(self, transformer: str, n: int = 100) -> list[TransformLog]:
        """Retorna registros de um transformador específico."""
        if n <= 0:
            return []
        filtered = [l for l in self._logs if l.transformer == transformer]
        return filtered[-n:]

    def clear_logs(self):
        """Limpa registros em memória."""
        with self._lock:
            self._logs.clear()

    def reset_metrics(self):
        """Reseta métricas."""
        with self._lock:
            self._metrics = TransformMetrics()

    def export_logs(self, path: str | Path, format: str = "json") -> bool:
        """
        Exporta registros para arquivo.

        Args:
            path: Caminho do arquivo
            format: "json" ou "csv"

        Returns:
            True se exportou com sucesso
        """
        if format not in ("json", "csv"):
            raise ValueError(f"Formato '{format}' não suportado. Use 'json' ou 'csv'")

        try:
            path = Path(path)
            path.parent.mkdir(parents=True, exist_ok=True)

            if format == "json":
                with open(path, "w", encoding="utf-8") as f:
                    json.dump([l.to_dict() for l in self._logs], f, indent=2, default=str)

            else:
                if not self._logs:
                    return True

                with open(path, "w", newline="", encoding="utf-8") as f:
                    writer = csv.DictWriter(f, fieldnames=self._logs[0].to_dict().keys())
                    writer.writeheader()
                    for log in self._logs:
                        writer.writerow(log.to_dict())

            logger.info(f"Logs de transformação exportados para {path}")
            return True

        except OSError as e:
            logger.error(f"Erro ao exportar logs: {e}")
            return False


# =============================================================================
# CONTEXT MANAGER PARA TIMING
# =============================================================================

class TransformTimer:
    """Context manager para medir tempo de transformação."""

    def __init__(self):
        self.start_time: float = 0
        self.end_time: float = 0
        self.latency_ms: float = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.end_time = time.perf_counter()
        self.latency_ms = (self.end_time - self.start_time) * 1000


# =============================================================================
# FUNÇÕES DE CONVENIÊNCIA
# =============================================================================

def get_transform_logger() -> TransformLogger:
    """Retorna instância singleton do logger."""
    return TransformLogger.get_instance()


def log_transform(**kwargs) -> Optional[TransformLog]:
    """Atalho para registrar transformação."""
    return get_transform_logger().log_transform(**kwargs)


def get_transform_metrics() -> dict:
    """Retorna métricas como dict."""
    return get_transform_logger().get_metrics().to_dict()


def configure_logging(level: str | int = None) -> logging.Logger:
    """
    Configura o logger do pacote para aplicações.

    Usa WISDOM_LOG_LEVEL quando `level` não é informado.
    """
    if level is None:
        level = get_settings().log_level

    package_logger = logging.getLogger("wisdom")
    package_logger.setLevel(level)

    if not any(getattr(h, "_wisdom_handler", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._wisdom_handler = True
        package_logger.addHandler(handler)

    return package_logger
