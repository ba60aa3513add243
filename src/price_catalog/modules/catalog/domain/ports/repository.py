# src/price_catalog/modules/catalog/domain/ports/repository.py
"""
Puerto (Interface) para la persistencia de artículos del catálogo.

Arquitectura: Modular Monolith
Capa: Domain -> Ports
Responsabilidad: Abstraer el almacenamiento (JSON, DB, memoria).
"""

from abc import ABC, abstractmethod

# === Imports de Tipos de Dominio ===
from price_catalog.modules.catalog.domain.entities import CatalogItem


class ItemRepository(ABC):
    """
    Contrato de almacenamiento solo-inserción.
    No existen operaciones de actualización ni borrado.
    """

    @abstractmethod
    def store(self, item: CatalogItem) -> None:
        """
        Persiste un artículo nuevo.
        Al retornar, el artículo debe ser visible para `find_all` en el mismo hilo.
        Los fallos se propagan tal cual al llamador.
        """
        pass

    @abstractmethod
    def find_all(self) -> list[CatalogItem]:
        """
        Snapshot completo de los artículos almacenados, sin orden garantizado.
        """
        pass
