# src/price_catalog/modules/catalog/domain/ports/id_generator.py
"""
Puerto para la generación de identificadores.

Arquitectura: Domain Port (Interface)
Responsabilidad: Entregar identificadores enteros únicos durante la vida del proceso.
"""

from __future__ import annotations

from typing import Protocol


class IdGenerator(Protocol):
    """
    Contrato abstracto para fuentes de identificadores.

    Implementaciones esperadas:
    - AtomicIdGenerator (Infraestructura, contador con lock)
    - Secuencia externa de base de datos (uso distribuido)
    """

    def next_id(self) -> int:
        """
        Devuelve el siguiente identificador.
        Cada valor se entrega como máximo una vez, incluso con acceso concurrente.
        """
        ...
