"""
Interfaz de Línea de Comandos (CLI) para el Módulo de Catálogo.

Arquitectura: Interface Adapter
Responsabilidad: Traducir comandos de terminal a casos de uso del dominio.
"""

import argparse
import logging
import os
import sys
from typing import Optional

from price_catalog.modules.catalog.application.use_cases import CatalogService
from price_catalog.modules.catalog.domain.exceptions import InvalidArgument
from price_catalog.modules.catalog.infrastructure.adapters import (
    AtomicIdGenerator,
    JsonFileItemRepository,
    SystemClock,
)
from price_catalog.modules.catalog.infrastructure.observability import (
    configure_logging,
)

DEFAULT_DB_PATH = "./catalog.json"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="price-catalog", description="Catálogo de artículos con precio"
    )
    parser.add_argument(
        "--db",
        default=os.getenv("CATALOG_DB_PATH", DEFAULT_DB_PATH),
        help="Ruta al archivo JSON de estado (env: CATALOG_DB_PATH)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Mostrar logs de depuración"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Agregar un artículo")
    add_parser.add_argument("title", help="Título (3 a 20 caracteres, único)")
    add_parser.add_argument("price", help="Precio (mínimo 15)")

    subparsers.add_parser("stats", help="Precio medio por día (sin hoy)")
    subparsers.add_parser("list", help="Listar artículos almacenados")
    return parser


def build_service(db_path: str) -> CatalogService:
    """Composición (Wiring): ensamblar las dependencias reales."""
    repo = JsonFileItemRepository(db_path)
    ids = AtomicIdGenerator.continuing_from(repo.find_all())
    return CatalogService(repo, ids, SystemClock())


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        service = build_service(args.db)

        if args.command == "add":
            item = service.add_item(args.title, args.price)
            print(f"✅ Artículo {item.item_id} guardado: {item.title} | {item.price}")

        elif args.command == "stats":
            statistics = service.get_statistics()
            if not statistics:
                print("✨ No hay estadísticas (sin artículos de días anteriores).")
                return EXIT_OK
            print(f"{'FECHA':<12} | {'PROMEDIO'}")
            print("-" * 30)
            for day in sorted(statistics):
                print(f"{day.isoformat():<12} | {statistics[day]}")

        elif args.command == "list":
            items = sorted(service.repo.find_all(), key=lambda i: i.item_id)
            if not items:
                print("✨ El catálogo está vacío.")
                return EXIT_OK
            print(f"{'ID':<6} | {'TÍTULO':<20} | {'PRECIO':>10} | {'CREADO (UTC)'}")
            print("-" * 70)
            for item in items:
                print(
                    f"{item.item_id:<6} | {item.title:<20} | {item.price:>10} | "
                    f"{item.created_at.isoformat()}"
                )

    except InvalidArgument as e:
        print(f"⚠️  Entrada inválida: {e.message}", file=sys.stderr)
        return EXIT_INVALID
    except Exception as e:
        print(f"❌ Error fatal: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
