from arbiter.storage.in_memory_arbitrator_store import InMemoryArbitratorStore
from conftest import build_record


def test_empty_store_loads_none() -> None:
    store = InMemoryArbitratorStore()

    assert store.load_persisted() is None
    assert store.persist_count == 0


def test_seeded_store_returns_copy() -> None:
    """Loaded records are detached from the stored one."""
    store = InMemoryArbitratorStore(build_record())

    loaded = store.load_persisted()
    loaded.languages.append("xx")

    assert store.load_persisted().languages == ["de", "en"]
    assert store.persist_count == 0


def test_persist_replaces_and_counts() -> None:
    store = InMemoryArbitratorStore()
    record = build_record()

    store.persist(record)
    record.web_url = "changed"
    store.persist(build_record(fee=9))

    assert store.persist_count == 2
    assert store.load_persisted().fee == 9
    assert store.load_persisted().web_url == "https://alice.example"
