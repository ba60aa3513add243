# src/price_catalog/modules/catalog/domain/validators.py
"""
Reglas de negocio para nuevos artículos.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Validar título y precio antes de crear un CatalogItem.
"""

from __future__ import annotations

from collections.abc import Collection
from decimal import Decimal

from price_catalog.modules.catalog.domain.exceptions import InvalidArgument

# === Guía de Organización ===
# ✅ PUREZA: Sin I/O. Los títulos existentes llegan como snapshot.
# ❌ SIN EFECTOS: Validar nunca genera IDs ni persiste.

MIN_TITLE_LENGTH = 3
MAX_TITLE_LENGTH = 20
MIN_PRICE = 15


class ItemValidator:
    """
    Valida las entradas de `add_item`.

    El mensaje de longitud histórico repite el límite inferior
    ("from 3 to 3"). Se conserva por compatibilidad con los clientes que
    comparan el texto; `legacy_length_message=False` usa el rango real.
    """

    def __init__(self, legacy_length_message: bool = True):
        self.legacy_length_message = legacy_length_message

    @property
    def length_error_message(self) -> str:
        upper = MIN_TITLE_LENGTH if self.legacy_length_message else MAX_TITLE_LENGTH
        return f"Title length should be from {MIN_TITLE_LENGTH} to {upper}"

    def validate_title(self, title: str | None, existing_titles: Collection[str]) -> None:
        """
        Raises:
            InvalidArgument: Título ausente, en blanco, fuera de rango o repetido.
        """
        self.validate_title_format(title)
        self.validate_title_unique(title, existing_titles)

    def validate_title_format(self, title: str | None) -> None:
        """
        Reglas que no necesitan el catálogo: obligatorio y longitud.

        Raises:
            InvalidArgument: Título ausente, en blanco o fuera de rango.
        """
        if title is None or not title.strip():
            raise InvalidArgument("Title is mandatory")

        # La longitud se mide sobre el título sin recortar.
        if len(title) < MIN_TITLE_LENGTH or len(title) > MAX_TITLE_LENGTH:
            raise InvalidArgument(self.length_error_message)

    @staticmethod
    def validate_title_unique(title: str | None, existing_titles: Collection[str]) -> None:
        """Coincidencia exacta, sensible a mayúsculas."""
        if title in existing_titles:
            raise InvalidArgument("Title is not unique")

    def validate_price(self, price: Decimal | None) -> None:
        """
        Compara el precio sin redondear contra MIN_PRICE.

        Raises:
            InvalidArgument: Precio ausente o menor que el mínimo.
        """
        if price is None:
            raise InvalidArgument("Price is mandatory")

        if price < MIN_PRICE:
            raise InvalidArgument(f"Price is less than {MIN_PRICE}")
