import json
import logging
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def seeded_db_factory(tmp_path):
    """
    Factory para crear una DB JSON con artículos de días anteriores.
    Permite probar estadísticas sin esperar a que cambie el día real.
    """

    def _create_db(prices_by_days_ago: dict[int, list[str]]):
        db_path = tmp_path / "catalog.json"
        now = datetime.now(timezone.utc)
        items = []
        next_id = 0
        for days_ago, prices in prices_by_days_ago.items():
            for price in prices:
                items.append(
                    {
                        "id": next_id,
                        "title": f"seed{next_id}",
                        "price": price,
                        "created_at": (now - timedelta(days=days_ago)).isoformat(),
                    }
                )
                next_id += 1

        db_path.write_text(json.dumps({"items": items}))
        return db_path

    return _create_db


@pytest.fixture(autouse=True)
def restore_root_logging():
    """La CLI reconfigura el root logger; se restaura tras cada test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
