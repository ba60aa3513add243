# src/price_catalog/modules/catalog/application/use_cases.py
"""
Casos de Uso del Catálogo.

Arquitectura: Modular Monolith
Capa: Application
Responsabilidad: Coordinar validación, creación, asignación de ID y persistencia de artículos,
y exponer el reporte de precio medio diario.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Union, cast

from price_catalog.core.dates import to_utc_date
from price_catalog.core.numbers import to_decimal

# === Imports de Dominio ===
from price_catalog.modules.catalog.domain.entities import CatalogItem
from price_catalog.modules.catalog.domain.exceptions import InvalidArgument
from price_catalog.modules.catalog.domain.ports.clock import Clock
from price_catalog.modules.catalog.domain.ports.id_generator import IdGenerator
from price_catalog.modules.catalog.domain.ports.repository import ItemRepository
from price_catalog.modules.catalog.domain.statistics import compute_daily_averages
from price_catalog.modules.catalog.domain.validators import ItemValidator

# === Infraestructura transversal (Observabilidad) ===
from price_catalog.modules.catalog.infrastructure.observability import (
    ObservabilityService,
)

PriceInput = Union[Decimal, int, float, str]

logger = logging.getLogger("catalog.app")


class CatalogService:
    """
    Caso de Uso Principal del catálogo.

    Colaboradores:
    - repository: ItemRepository (Puerto)
    - id_generator: IdGenerator (Puerto)
    - clock: Clock (Puerto; SystemClock se elige en la composición)

    Sin estado propio entre llamadas. La unicidad del título se comprueba
    contra un snapshot (find_all -> validar -> store): bajo concurrencia es
    una carrera conocida que solo el almacenamiento puede cerrar.
    """

    def __init__(
        self,
        repository: ItemRepository,
        id_generator: IdGenerator,
        clock: Clock,
        validator: Optional[ItemValidator] = None,
    ):
        self.repo = repository
        self.ids = id_generator
        self.clock = clock
        self.validator = validator or ItemValidator()

    @ObservabilityService.measure_latency(operation_name="add_item", target_arg="title")
    def add_item(self, title: Optional[str], price: Optional[PriceInput]) -> CatalogItem:
        """
        Valida y persiste un artículo nuevo.

        Returns:
            El CatalogItem almacenado (con id y precio escalado).

        Raises:
            InvalidArgument: Si el título o el precio violan las reglas.
            Cualquier error del repositorio se propaga sin traducir.
        """
        try:
            # 1. Formato del título antes de consultar el almacenamiento
            self.validator.validate_title_format(title)

            # Unicidad contra snapshot fresco (nunca cacheado)
            existing_titles = {item.title for item in self.repo.find_all()}
            self.validator.validate_title_unique(title, existing_titles)

            # 2. Precio (comparado antes de redondear)
            amount = self._coerce_price(price)
            self.validator.validate_price(amount)
        except InvalidArgument as e:
            logger.warning(f"[REJECT] title={title!r} price={price!r}: {e.message}")
            raise

        # 3-4. Identidad y construcción (ya validados: no son None)
        item = CatalogItem.create_new(
            item_id=self.ids.next_id(),
            title=cast(str, title),
            price=cast(Decimal, amount),
            created_at=self.clock.now(),
        )

        # 5. Persistencia
        self.repo.store(item)
        logger.info(f"[NEW] Artículo {item.item_id} '{item.title}' a {item.price}")
        return item

    @ObservabilityService.measure_latency(operation_name="get_statistics")
    def get_statistics(self) -> dict[date, Decimal]:
        """
        Precio medio por día UTC, sin incluir el día actual.
        Un diccionario vacío es un resultado válido.
        """
        items = self.repo.find_all()
        today = to_utc_date(self.clock.now())
        statistics = compute_daily_averages(items, today)
        logger.info(
            f"Estadísticas: {len(items)} artículos, {len(statistics)} días (hoy={today})"
        )
        return statistics

    @staticmethod
    def _coerce_price(price: Optional[PriceInput]) -> Optional[Decimal]:
        if price is None:
            return None
        try:
            return to_decimal(price)
        except ValueError as e:
            raise InvalidArgument("Price is not a valid number") from e
