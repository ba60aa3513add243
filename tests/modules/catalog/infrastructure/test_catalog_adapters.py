# tests/modules/catalog/infrastructure/test_catalog_adapters.py
"""
Tests de Integración para Adaptadores de Infraestructura.
Los de JSON requieren acceso a disco (usamos tmp_path).
"""

import json
import threading
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from price_catalog.modules.catalog.domain.entities import CatalogItem
from price_catalog.modules.catalog.domain.exceptions import StorageError
from price_catalog.modules.catalog.infrastructure.adapters import (
    AtomicIdGenerator,
    FixedClock,
    InMemoryItemRepository,
    JsonFileItemRepository,
    SystemClock,
)

CREATED = datetime(2024, 5, 20, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_item():
    return CatalogItem.create_new(7, "expected", Decimal("15.004"), CREATED)


# === Tests para InMemoryItemRepository ===


def test_memory_repository_read_your_writes(sample_item):
    repo = InMemoryItemRepository()

    repo.store(sample_item)

    assert repo.find_all() == [sample_item]


def test_memory_repository_returns_a_copy(sample_item):
    repo = InMemoryItemRepository([sample_item])

    snapshot = repo.find_all()
    snapshot.clear()

    assert repo.find_all() == [sample_item]


# === Tests para JsonFileItemRepository ===


def test_json_repository_save_and_retrieve(tmp_path, sample_item):
    """
    Escenario: Guardar un artículo en un archivo JSON nuevo y recuperarlo.
    """
    # Arrange
    db_file = tmp_path / "catalog.json"
    repo = JsonFileItemRepository(str(db_file))

    # Act
    repo.store(sample_item)
    retrieved = repo.find_all()

    # Assert
    assert retrieved == [sample_item]
    assert str(retrieved[0].price) == "15.00"
    assert retrieved[0].created_at.tzinfo is not None

    # El precio se guarda como texto (sin pasar por float)
    with open(db_file) as f:
        content = json.load(f)
    assert content["items"][0]["price"] == "15.00"


def test_json_repository_survives_reopen(tmp_path, sample_item):
    db_path = str(tmp_path / "catalog.json")
    JsonFileItemRepository(db_path).store(sample_item)

    reopened = JsonFileItemRepository(db_path)

    assert reopened.find_all() == [sample_item]


def test_json_repository_starts_empty(tmp_path):
    repo = JsonFileItemRepository(str(tmp_path / "empty.json"))

    assert repo.find_all() == []


def test_json_repository_corrupt_file_raises_storage_error(tmp_path):
    db_file = tmp_path / "corrupt.json"
    db_file.write_text("{not json")
    repo = JsonFileItemRepository(str(db_file))

    with pytest.raises(StorageError):
        repo.find_all()


def test_json_repository_invalid_schema_raises_storage_error(tmp_path):
    db_file = tmp_path / "schema.json"
    db_file.write_text(json.dumps({"items": [{"id": 1, "title": "x"}]}))
    repo = JsonFileItemRepository(str(db_file))

    with pytest.raises(StorageError):
        repo.find_all()


@pytest.mark.parametrize("content", [{}, {"items": None}, {"items": "text"}])
def test_json_repository_store_with_invalid_schema_raises_storage_error(
    tmp_path, sample_item, content
):
    """
    Escenario: La DB existe pero no tiene una lista 'items'.
    Resultado: store() falla con StorageError, igual que find_all().
    """
    db_file = tmp_path / "schema.json"
    db_file.write_text(json.dumps(content))
    repo = JsonFileItemRepository(str(db_file))

    with pytest.raises(StorageError):
        repo.store(sample_item)

    # El archivo no se reescribe
    assert json.loads(db_file.read_text()) == content


# === Tests para AtomicIdGenerator ===


def test_id_generator_starts_at_zero_and_increments():
    ids = AtomicIdGenerator()

    assert [ids.next_id() for _ in range(3)] == [0, 1, 2]


def test_id_generator_continues_after_highest_stored_id(sample_item):
    ids = AtomicIdGenerator.continuing_from([sample_item])

    assert ids.next_id() == 8


def test_id_generator_continuing_from_empty_starts_at_zero():
    assert AtomicIdGenerator.continuing_from([]).next_id() == 0


def test_id_generator_never_repeats_under_threads():
    """
    Escenario: 8 hilos piden 500 IDs cada uno.
    Resultado: 4000 IDs distintos.
    """
    ids = AtomicIdGenerator()
    results: list[int] = []
    lock = threading.Lock()

    def worker():
        local = [ids.next_id() for _ in range(500)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 4000
    assert len(set(results)) == 4000


# === Tests para Clocks ===


def test_system_clock_is_utc():
    assert SystemClock().now().tzinfo == timezone.utc


def test_fixed_clock_assumes_utc_and_advances():
    clock = FixedClock(datetime(2024, 5, 20, 23, 0))

    clock.advance(hours=2)

    assert clock.now() == datetime(2024, 5, 21, 1, 0, tzinfo=timezone.utc)
    assert clock.now() - CREATED == timedelta(hours=15)
