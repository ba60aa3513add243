# src/price_catalog/modules/catalog/__init__.py
"""
Módulo de Catálogo de precios.
"""

from __future__ import annotations

# Application
from .application.use_cases import CatalogService

# Domain
from .domain.entities import CatalogItem
from .domain.exceptions import CatalogError, InvalidArgument, StorageError
from .domain.ports import Clock, IdGenerator, ItemRepository
from .domain.statistics import compute_daily_averages
from .domain.validators import ItemValidator

# Infrastructure
from .infrastructure.adapters import (
    AtomicIdGenerator,
    FixedClock,
    InMemoryItemRepository,
    JsonFileItemRepository,
    SystemClock,
)

__all__ = [
    "CatalogItem",
    "CatalogError",
    "InvalidArgument",
    "StorageError",
    "Clock",
    "IdGenerator",
    "ItemRepository",
    "ItemValidator",
    "compute_daily_averages",
    "CatalogService",
    "AtomicIdGenerator",
    "FixedClock",
    "InMemoryItemRepository",
    "JsonFileItemRepository",
    "SystemClock",
]
