# src/price_catalog/modules/catalog/domain/exceptions.py
"""
Excepciones del dominio de Catálogo.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.
"""


class CatalogError(Exception):
    """Clase base para errores en el módulo de catálogo."""

    pass


class InvalidArgument(CatalogError, ValueError):
    """
    Un argumento de entrada viola una regla de negocio (título o precio).
    El mensaje es legible por humanos y forma parte del contrato observable.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageError(CatalogError):
    """El almacenamiento de referencia no puede leer o escribir su estado."""

    pass
