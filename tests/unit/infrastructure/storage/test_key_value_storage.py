import threading

import pytest

from core.exceptions import ConfigurationError, StorageError
from infrastructure.storage import InMemoryStorage, SqlKeyValueStorage, create_storage


@pytest.fixture(params=["memory", "sql"])
def kv(request, tmp_path):
    if request.param == "memory":
        backend = InMemoryStorage()
    else:
        backend = SqlKeyValueStorage(f"sqlite:///{tmp_path / 'kv.db'}")
    yield backend
    backend.close()


def test_missing_key_loads_none(kv):
    assert kv.load("absent") is None


def test_save_load_and_overwrite(kv):
    kv.save("mind-haven-user", {"name": "Ada", "email": "ada@example.com"})
    kv.save("mind-haven-user", {"name": "Ada L.", "email": "ada@example.com"})

    assert kv.load("mind-haven-user") == {"name": "Ada L.", "email": "ada@example.com"}
    assert kv.keys() == ["mind-haven-user"]


def test_unicode_values_survive(kv):
    kv.save("note", ["café", "🙂"])

    assert kv.load("note") == ["café", "🙂"]


def test_delete_is_idempotent(kv):
    kv.save("a", 1)

    kv.delete("a")
    kv.delete("a")

    assert kv.load("a") is None
    assert kv.keys() == []


def test_unserialisable_value_raises_storage_error(kv):
    with pytest.raises(StorageError) as exc_info:
        kv.save("bad", {"value": object()})

    assert exc_info.value.operation == "save"


def test_corrupt_value_raises_storage_error():
    backend = InMemoryStorage()
    backend._write("broken", "{not json")

    with pytest.raises(StorageError) as exc_info:
        backend.load("broken")

    assert exc_info.value.operation == "load"


def test_sql_storage_persists_across_instances(tmp_path):
    url = f"sqlite:///{tmp_path / 'persist.db'}"
    first = SqlKeyValueStorage(url)
    first.save("mind-haven-entries", [{"id": 1}])
    first.close()

    second = SqlKeyValueStorage(url)
    try:
        assert second.load("mind-haven-entries") == [{"id": 1}]
    finally:
        second.close()


def test_create_storage_rejects_unknown_backend():
    with pytest.raises(ConfigurationError) as exc_info:
        create_storage("redis")

    assert exc_info.value.key == "STORAGE_BACKEND"


def test_create_storage_memory():
    assert isinstance(create_storage(" Memory "), InMemoryStorage)


def test_in_memory_sqlite_is_shared_with_worker_threads():
    kv = SqlKeyValueStorage("sqlite:///:memory:")
    kv.save("mind-haven-settings", {"privacy": {"analytics": False}})

    seen = {}
    worker = threading.Thread(target=lambda: seen.update(value=kv.load("mind-haven-settings")))
    worker.start()
    worker.join()

    assert seen["value"] == {"privacy": {"analytics": False}}
    kv.close()
