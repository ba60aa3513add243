"""
Configuración centralizada de Logging y Métricas.

Principios SRE:
1. Logs legibles para humanos (Consola) y opcionalmente persistentes (Archivo).
2. Eventos estructurados en JSON con correlation_id por operación.
3. Latencia y saturación (RAM vía psutil) en cada caso de uso instrumentado.
"""

from __future__ import annotations

import functools
import inspect
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable, Optional

import psutil

logger = logging.getLogger("price_catalog")


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configura el root logger con consola y, si se indica, archivo.
    `log_file` por defecto se toma de CATALOG_LOG_FILE.
    """
    log_file = log_file or os.getenv("CATALOG_LOG_FILE")

    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    if log_file:
        # Formateador detallado para archivo (Forensics)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
            )
        )
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        logging.getLogger(__name__).debug(f"Logs persistentes en: {log_file}")


class _OperationTrace:
    """Estado de una ejecución instrumentada: id, reloj de inicio y RAM inicial."""

    def __init__(self, operation_name: str, target: str):
        self.operation_name = operation_name
        self.target = target
        self.correlation_id = ObservabilityService.get_correlation_id()
        self.start_ram = ObservabilityService._get_ram_usage_mb()
        self._start = time.perf_counter()

    @property
    def elapsed(self) -> float:
        return round(time.perf_counter() - self._start, 4)

    def emit(self, phase: str, level: str = "INFO", **payload: Any) -> None:
        ObservabilityService.log_event(
            event_name=f"{self.operation_name}.{phase}",
            correlation_id=self.correlation_id,
            payload={"target": self.target, **payload},
            level=level,
        )


class ObservabilityService:

    # Si LOG_FORMAT=PRETTY, los eventos se imprimen con indentación
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return uuid.uuid4().hex[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            rss = psutil.Process(os.getpid()).memory_info().rss
        except psutil.Error:
            return 0.0
        return round(rss / 1024 / 1024, 2)

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ) -> None:
        """Emite un log estructurado en JSON."""
        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }
        indent = 4 if ObservabilityService.PRETTY_PRINT else None
        msg = json.dumps(log_entry, indent=indent, default=str)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.info(msg)

    @staticmethod
    def measure_latency(operation_name: str, target_arg: Optional[str] = None):
        """
        Decorador: eventos started/completed/failed con duración y RAM.

        `target_arg` nombra el parámetro cuyo valor se registra como "target"
        (ej: "title"). Las excepciones se registran y se re-lanzan sin modificar.
        """

        def decorator(func: Callable):
            signature = inspect.signature(func)

            def resolve_target(args: tuple, kwargs: dict) -> str:
                if target_arg is None:
                    return "n/a"
                try:
                    bound = signature.bind(*args, **kwargs)
                except TypeError:
                    return "n/a"
                return str(bound.arguments.get(target_arg))

            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                trace = _OperationTrace(operation_name, resolve_target(args, kwargs))
                trace.emit("started", start_ram_mb=trace.start_ram)

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    trace.emit(
                        "failed",
                        level="ERROR",
                        duration_sec=trace.elapsed,
                        crash_ram_mb=ObservabilityService._get_ram_usage_mb(),
                        error_type=type(e).__name__,
                        error_msg=str(e),
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                trace.emit(
                    "completed",
                    duration_sec=trace.elapsed,
                    end_ram_mb=end_ram,
                    ram_delta_mb=round(end_ram - trace.start_ram, 2),
                    status="success",
                )
                return result

            return wrapper

        return decorator
