# src/price_catalog/modules/catalog/infrastructure/adapters.py
"""
Adaptadores de Infraestructura para el Catálogo.

Arquitectura: Modular Monolith
Capa: Infrastructure (Adapters)
Responsabilidad: Implementar los puertos del dominio con tecnologías concretas (memoria, JSON, reloj).
"""

import itertools
import json
import logging
import os
import threading
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, cast

from price_catalog.core.dates import utc_now

# === Imports de Dominio ===
from price_catalog.modules.catalog.domain.entities import CatalogItem
from price_catalog.modules.catalog.domain.exceptions import StorageError
from price_catalog.modules.catalog.domain.ports.repository import ItemRepository

logger = logging.getLogger(__name__)


class InMemoryItemRepository(ItemRepository):
    """
    Almacenamiento en memoria del proceso.
    Útil para tests y para ejecuciones sin disco.
    """

    def __init__(self, items: Optional[list[CatalogItem]] = None):
        self._items: list[CatalogItem] = list(items or [])
        self._lock = threading.Lock()

    def store(self, item: CatalogItem) -> None:
        with self._lock:
            self._items.append(item)
        logger.debug(f"Artículo guardado en memoria: {item.item_id}")

    def find_all(self) -> list[CatalogItem]:
        with self._lock:
            return list(self._items)


class JsonFileItemRepository(ItemRepository):
    """
    Persistencia simple basada en un archivo JSON único.
    Los precios se guardan como texto para no perder escala decimal.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._lock = threading.Lock()
        self._ensure_db_exists()

    def _ensure_db_exists(self) -> None:
        if not os.path.exists(self.db_path):
            logger.info(f"Inicializando nueva DB en: {self.db_path}")
            self._save_db({"items": []})

    def _load_db(self) -> dict[str, Any]:
        try:
            with open(self.db_path) as f:
                return cast(dict[str, Any], json.load(f))
        except json.JSONDecodeError as e:
            logger.error(f"DB corrupta en {self.db_path}")
            raise StorageError(f"No se puede leer la DB {self.db_path}: {e}") from e

    def _save_db(self, data: dict[str, Any]) -> None:
        # Escritura atómica: archivo temporal + rename
        tmp_path = f"{self.db_path}.tmp"
        with open(tmp_path, "w") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.db_path)

    @staticmethod
    def _to_dto(item: CatalogItem) -> dict[str, Any]:
        return {
            "id": item.item_id,
            "title": item.title,
            "price": str(item.price),
            "created_at": item.created_at.isoformat(),
        }

    @staticmethod
    def _from_dto(item_data: dict[str, Any]) -> CatalogItem:
        return CatalogItem(
            item_id=int(item_data["id"]),
            title=item_data["title"],
            price=Decimal(item_data["price"]),
            created_at=datetime.fromisoformat(item_data["created_at"]),
        )

    def store(self, item: CatalogItem) -> None:
        with self._lock:
            data = self._load_db()
            try:
                data["items"].append(self._to_dto(item))
            except (KeyError, TypeError, AttributeError) as e:
                logger.error(f"Esquema inválido al guardar en {self.db_path}: {e}")
                raise StorageError(f"Esquema inválido en {self.db_path}: {e}") from e
            self._save_db(data)
        logger.debug(f"Artículo guardado: {item.item_id} | {item.title}")

    def find_all(self) -> list[CatalogItem]:
        with self._lock:
            data = self._load_db()

        try:
            return [self._from_dto(item_data) for item_data in data["items"]]
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            logger.error(f"Error reconstruyendo artículos desde DB: {e}", exc_info=True)
            raise StorageError(f"Esquema inválido en {self.db_path}: {e}") from e


class AtomicIdGenerator:
    """
    Contador monotónico protegido por lock.
    Cada instancia es independiente: inyectar la misma en todos los servicios del proceso.
    """

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    @classmethod
    def continuing_from(cls, items: list[CatalogItem]) -> "AtomicIdGenerator":
        """Arranca después del mayor id almacenado (persistencia entre ejecuciones)."""
        start = max((item.item_id for item in items), default=-1) + 1
        return cls(start=start)

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


class SystemClock:
    """Reloj real del sistema en UTC."""

    def now(self) -> datetime:
        return utc_now()


class FixedClock:
    """
    Reloj controlable (Fake) para tests y demos.
    Un instante sin zona horaria se asume UTC.
    """

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, **kwargs: float) -> None:
        """Avanza el reloj, ej: clock.advance(days=1)."""
        self._instant = self._instant + timedelta(**kwargs)
