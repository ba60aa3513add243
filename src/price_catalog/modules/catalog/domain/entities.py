# src/price_catalog/modules/catalog/domain/entities.py
"""
Entidades del dominio de Catálogo.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Representar un artículo de catálogo con precio, inmutable tras su creación.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from price_catalog.core.numbers import round_half_up

# === Guía de Organización ===
# ✅ IDENTIDAD: item_id lo asigna el IdGenerator, nunca la entidad.
# 🔒 INMUTABILIDAD: frozen=True. El almacenamiento es solo de inserción.

PRICE_SCALE = 2


@dataclass(frozen=True)
class CatalogItem:
    """
    Artículo persistido en el catálogo.

    Invariantes:
    1. price siempre tiene exactamente PRICE_SCALE decimales (HALF_UP).
    2. created_at es un instante UTC fijado al crear.
    """

    item_id: int
    title: str
    price: Decimal
    created_at: datetime

    @classmethod
    def create_new(
        cls, item_id: int, title: str, price: Decimal, created_at: datetime
    ) -> CatalogItem:
        """Factory method: escala el precio y conserva el título tal cual llega."""
        return cls(
            item_id=item_id,
            title=title,
            price=round_half_up(price, PRICE_SCALE),
            created_at=created_at,
        )
