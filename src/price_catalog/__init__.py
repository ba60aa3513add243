"""price_catalog: catálogo de artículos con precio y estadísticas diarias."""

__version__ = "0.1.0"
