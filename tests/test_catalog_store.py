import pytest

from katalog.application.catalog_store import CatalogStore
from katalog.domain.entities import SIMPLE_POLICY, Product
from katalog.domain.exceptions import PersistenceWriteError
from katalog.infrastructure.storage.gateway import PersistenceGateway
from katalog.infrastructure.storage.seed import SIMPLE_SEED, seed_catalog
from katalog.utils import MonotonicIdGenerator


def test_store_starts_from_seed_when_storage_is_empty(store: CatalogStore):
    assert store.all() == SIMPLE_SEED
    assert len(store) == 2


def test_create_prepends_with_fresh_id(store: CatalogStore):
    """New records go first and never reuse an existing id."""
    existing_ids = {p.id for p in store.all()}

    product = store.create({"name": "Gula Pasir", "description": "Gula pasir 1kg"})

    assert product.id not in existing_ids
    assert store.all()[0] == product
    assert len(store) == 3


def test_rapid_creates_get_distinct_increasing_ids(gateway: PersistenceGateway):
    """Ids stay unique even when the clock does not move between creates."""
    store = CatalogStore(
        gateway, id_generator=MonotonicIdGenerator(floor=2, clock=lambda: 5)
    )
    first = store.create({"name": "Satu"})
    second = store.create({"name": "Dua"})
    third = store.create({"name": "Tiga"})

    assert [first.id, second.id, third.id] == [5, 6, 7]


def test_id_generator_starts_above_loaded_ids(gateway: PersistenceGateway):
    gateway.save([Product(id=9_999_999_999_999, name="Masa Depan")])
    store = CatalogStore(gateway)

    product = store.create({"name": "Baru"})

    assert product.id > 9_999_999_999_999


def test_mutations_are_written_through(gateway: PersistenceGateway):
    store = CatalogStore(gateway)
    created = store.create({"name": "Kopi", "description": "Kopi hitam"})
    assert gateway.load() == list(store.all())

    store.update(created.id, {"name": "Kopi Susu", "description": ""})
    assert gateway.load() == list(store.all())

    store.delete(1)
    assert gateway.load() == list(store.all())
    assert [p.name for p in gateway.load()] == ["Kopi Susu", "Minuman"]


def test_update_replaces_whole_record_and_keeps_position(store: CatalogStore):
    updated = store.update(2, {"name": "Minuman Segar"})

    assert updated == Product(id=2, name="Minuman Segar", description="")
    assert [p.id for p in store.all()] == [1, 2]
    assert store.get(2) == updated


def test_update_is_idempotent(store: CatalogStore):
    fields = {"name": "Makanan Ringan", "description": "Camilan"}
    store.update(1, fields)
    once = store.all()
    store.update(1, fields)
    assert store.all() == once


def test_update_unknown_id_is_a_silent_no_op(store: CatalogStore, gateway):
    before = store.all()
    assert store.update(404, {"name": "Hantu"}) is None
    assert store.all() == before
    # Nothing was written either
    assert gateway.store.get(gateway.key) is None


def test_delete_removes_record(store: CatalogStore):
    assert store.delete(1) is True
    assert store.get(1) is None
    assert len(store) == 1


def test_delete_unknown_id_is_a_silent_no_op(store: CatalogStore):
    before = store.all()
    assert store.delete(404) is False
    assert store.all() == before


def test_failed_write_leaves_memory_unchanged(flaky_store):
    """Memory and storage never diverge when a write fails twice."""
    gateway = PersistenceGateway(flaky_store(failures=2), seed_catalog(SIMPLE_POLICY))
    store = CatalogStore(gateway)
    before = store.all()

    with pytest.raises(PersistenceWriteError):
        store.create({"name": "Gagal"})

    assert store.all() == before


def test_all_returns_immutable_snapshot(store: CatalogStore):
    snapshot = store.all()
    store.create({"name": "Teh"})
    assert len(snapshot) == 2
    assert isinstance(snapshot, tuple)
