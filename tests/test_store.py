import json

from database.manager import JsonStore, MemoryStore, StorageWriteError, create_store
from models.enums import StorageKeys


def test_missing_key_returns_default(json_store):
    assert json_store.get(StorageKeys.HABITS) is None
    assert json_store.get(StorageKeys.HABITS, []) == []


def test_set_get_remove(json_store):
    assert json_store.set(StorageKeys.HABITS, [{"id": "habit_1"}]) is True
    assert json_store.get("habit_tracker_habits") == [{"id": "habit_1"}]

    assert json_store.remove(StorageKeys.HABITS) is True
    assert json_store.get(StorageKeys.HABITS) is None


def test_keys_share_one_document(json_store):
    json_store.set(StorageKeys.HABITS, [])
    json_store.set(StorageKeys.AUTH_TOKEN, "token")

    document = json.loads(json_store.path.read_text(encoding="utf-8"))
    assert document["habit_tracker_habits"] == []
    assert document["habit_tracker_auth_token"] == "token"
    assert document[JsonStore.VERSION_KEY] == JsonStore.CURRENT_VERSION


def test_clear_all_removes_only_app_keys(json_store):
    json_store.set(StorageKeys.HABITS, [])
    json_store.set(StorageKeys.USER, {"id": "u"})
    json_store.set("other_app", 1)

    assert json_store.clear_all() is True
    assert json_store.get(StorageKeys.HABITS) is None
    assert json_store.get(StorageKeys.USER) is None
    assert json_store.get("other_app") == 1


def test_corrupted_file_reads_as_absent_and_is_preserved(tmp_path):
    path = tmp_path / "habits.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonStore(path)

    assert store.get(StorageKeys.HABITS, []) == []
    assert store.set(StorageKeys.HABITS, []) is True
    assert (tmp_path / "habits.json.corrupt").read_text(encoding="utf-8") == "{not json"
    assert store.get(StorageKeys.HABITS) == []


def test_unserializable_value_is_reported_not_raised(json_store, memory_store):
    assert json_store.set(StorageKeys.HABITS, [object()]) is False
    assert memory_store.set(StorageKeys.HABITS, {1, 2}) is False
    assert not json_store.path.with_suffix(".json.tmp").exists()


def test_memory_store_returns_copies(memory_store):
    value = [{"id": "habit_1"}]
    memory_store.set(StorageKeys.HABITS, value)
    value.append({"id": "habit_2"})

    assert memory_store.get(StorageKeys.HABITS) == [{"id": "habit_1"}]


def test_write_failure_is_logged(memory_store, caplog, monkeypatch):
    def broken_write(key, value):
        raise StorageWriteError("disk full")

    monkeypatch.setattr(memory_store, "_write", broken_write)
    assert memory_store.set(StorageKeys.HABITS, []) is False
    assert "disk full" in caplog.text


def test_create_store(tmp_path):
    assert isinstance(create_store(tmp_path / "h.json"), JsonStore)
    assert isinstance(create_store(tmp_path / "h.json", persist=False), MemoryStore)
