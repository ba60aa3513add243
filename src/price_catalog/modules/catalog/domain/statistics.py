# src/price_catalog/modules/catalog/domain/statistics.py
"""
Agregador de estadísticas diarias.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Promediar precios por día de calendario UTC, excluyendo el día actual.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from price_catalog.core.dates import to_utc_date
from price_catalog.core.numbers import mean_half_up
from price_catalog.modules.catalog.domain.entities import PRICE_SCALE, CatalogItem


def group_prices_by_day(items: Iterable[CatalogItem]) -> dict[date, list[Decimal]]:
    """Agrupa los precios por fecha UTC de `created_at`."""
    prices_by_day: dict[date, list[Decimal]] = defaultdict(list)
    for item in items:
        prices_by_day[to_utc_date(item.created_at)].append(item.price)
    return dict(prices_by_day)


def compute_daily_averages(
    items: Iterable[CatalogItem], today: date
) -> dict[date, Decimal]:
    """
    Precio medio por día (HALF_UP, 2 decimales).

    El día `today` se excluye siempre, aunque sus artículos sean históricos:
    la exclusión depende del reloj, no de los datos.
    """
    return {
        day: mean_half_up(prices, PRICE_SCALE)
        for day, prices in group_prices_by_day(items).items()
        if day != today
    }
