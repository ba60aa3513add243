"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Aritmética decimal exacta con redondeo HALF_UP (numbers.py)
   • Conversión de instantes a fechas de calendario UTC (dates.py)
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Entidades del catálogo (CatalogItem)
   • Reglas de negocio (precio mínimo, longitud de título)

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/
"""

from .dates import to_utc_date, utc_now
from .numbers import mean_half_up, round_half_up, to_decimal

__all__ = [
    "mean_half_up",
    "round_half_up",
    "to_decimal",
    "to_utc_date",
    "utc_now",
]
