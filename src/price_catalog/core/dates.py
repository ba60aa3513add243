"""
Utilidades de fecha/hora en UTC.

Arquitectura: Modular Monolith
Capa: Core (Shared Kernel)
Responsabilidad: Obtener el instante actual y su fecha de calendario en UTC.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Instante actual, con zona horaria UTC."""
    return datetime.now(timezone.utc)


def to_utc_date(instant: datetime) -> date:
    """
    Fecha de calendario (UTC) de un instante.
    Un datetime sin zona horaria se interpreta como UTC.
    """
    if instant.tzinfo is None:
        return instant.date()
    return instant.astimezone(timezone.utc).date()
