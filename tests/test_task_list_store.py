import json
import logging

import pytest

from core import StoreCorruptionError, Task
from infrastructure.local_storage import LocalStorage
from infrastructure.task_list_store import LocalTaskListStore


def _store(tmp_path, **kwargs) -> LocalTaskListStore:
    return LocalTaskListStore(LocalStorage(tmp_path / "store"), **kwargs)


def test_load_missing_key_returns_empty(tmp_path):
    assert _store(tmp_path).load() == []


def test_roundtrip_preserves_id_text_completed(tmp_path):
    store = _store(tmp_path)
    tasks = [
        Task(1700000000002, "b", completed=True),
        Task(1700000000001, "牛乳を買う"),
    ]
    store.load()
    store.save(tasks)
    loaded = _store(tmp_path).load()
    assert [(t.id, t.text, t.completed) for t in loaded] == [(t.id, t.text, t.completed) for t in tasks]
    assert [t.created_at for t in loaded] == [t.created_at for t in tasks]


def test_saved_blob_uses_browser_keys(tmp_path):
    store = _store(tmp_path)
    store.save([Task(5, "x", created_at="2024-05-01T10:00:00.000Z")])
    raw = json.loads(store.storage.get_item("todos"))
    assert raw == [{"id": 5, "text": "x", "completed": False, "createdAt": "2024-05-01T10:00:00.000Z"}]


def test_loads_blob_written_by_browser(tmp_path):
    storage = LocalStorage(tmp_path / "store")
    storage.set_item(
        "todos",
        '[{"id":1712345678901,"text":"牛乳","completed":false,"createdAt":"2024-04-05T12:00:00.000Z"}]',
    )
    tasks = LocalTaskListStore(storage).load()
    assert tasks[0].id == 1712345678901
    assert tasks[0].text == "牛乳"


def test_null_blob_is_empty(tmp_path):
    store = _store(tmp_path)
    store.storage.set_item("todos", "null")
    assert store.load() == []


@pytest.mark.parametrize(
    "blob",
    [
        "{not json",
        '{"id": 1}',
        '[{"text": "no id"}]',
        '[{"id": 1, "text": "   "}]',
        '[{"id": 1, "text": "a"}, {"id": 1, "text": "b"}]',
        '["plain string"]',
        '[{"id": 1, "text": "a", "completed": "false"}]',
    ],
)
def test_corrupt_blob_fails_by_default(tmp_path, blob):
    store = _store(tmp_path)
    store.storage.set_item("todos", blob)
    with pytest.raises(StoreCorruptionError) as exc:
        store.load()
    assert exc.value.key == "todos"


def test_corrupt_blob_reset_backs_up_and_warns(tmp_path, caplog):
    store = _store(tmp_path, on_corrupt="reset")
    store.storage.set_item("todos", "{broken")
    with caplog.at_level(logging.WARNING, logger="tasklist.store"):
        assert store.load() == []
    assert store.storage.get_item("todos.corrupt") == "{broken"
    assert store.last_load_warning
    assert any("corrupt" in rec.getMessage() for rec in caplog.records)


def test_invalid_policy_rejected(tmp_path):
    with pytest.raises(ValueError):
        _store(tmp_path, on_corrupt="ignore")


class TestLocalStorage:
    def test_set_get_remove(self, tmp_path):
        storage = LocalStorage(tmp_path)
        assert storage.get_item("k") is None
        storage.set_item("k", "value")
        assert storage.get_item("k") == "value"
        assert storage.keys() == ["k"]
        assert storage.remove_item("k") is True
        assert storage.remove_item("k") is False

    def test_set_overwrites_without_leftovers(self, tmp_path):
        storage = LocalStorage(tmp_path)
        storage.set_item("k", "one")
        storage.set_item("k", "two")
        assert storage.get_item("k") == "two"
        assert [p.name for p in tmp_path.iterdir()] == ["k.json"]

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", "a\\b", ".."])
    def test_rejects_traversal_keys(self, tmp_path, key):
        storage = LocalStorage(tmp_path)
        with pytest.raises(ValueError):
            storage.set_item(key, "x")
        with pytest.raises(ValueError):
            storage.get_item(key)
