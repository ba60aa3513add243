# src/price_catalog/modules/catalog/domain/ports/clock.py
"""
Puerto para la fuente de tiempo.

Arquitectura: Domain Port (Interface)
Responsabilidad: Abstraer "ahora" para que `created_at` y "hoy" sean reproducibles en tests.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """
    Implementaciones esperadas:
    - SystemClock (Infraestructura)
    - FixedClock (Testing)
    """

    def now(self) -> datetime:
        """Instante actual con zona horaria UTC."""
        ...
