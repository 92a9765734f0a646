import json
import logging
from typing import List, Optional, Sequence

from core import StoreCorruptionError, Task
from application.ports import TaskListStore
from infrastructure.local_storage import LocalStorage
from interface.constants import STORE_KEY


logger = logging.getLogger("tasklist.store")


class LocalTaskListStore(TaskListStore):
    """Whole task list serialized as one JSON blob under a single key."""

    def __init__(self, storage: LocalStorage, key: str = STORE_KEY, on_corrupt: str = "fail"):
        if on_corrupt not in ("fail", "reset"):
            raise ValueError(f"Invalid on_corrupt policy: {on_corrupt!r}")
        self.storage = storage
        self.key = key
        self.on_corrupt = on_corrupt
        self.last_load_warning: Optional[str] = None

    @property
    def backup_key(self) -> str:
        return f"{self.key}.corrupt"

    def load(self) -> List[Task]:
        self.last_load_warning = None
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            return self._parse(raw)
        except StoreCorruptionError as exc:
            if self.on_corrupt != "reset":
                raise
            self.storage.set_item(self.backup_key, raw)
            self.last_load_warning = str(exc)
            logger.warning("Stored task list is corrupt, starting empty (backup %s): %s", self.backup_key, exc)
            return []

    def _parse(self, raw: str) -> List[Task]:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreCorruptionError(self.key, f"invalid JSON: {exc}") from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise StoreCorruptionError(self.key, f"expected a list, got {type(data).__name__}")
        tasks = [Task.from_dict(item, key=self.key) for item in data]
        seen = set()
        for task in tasks:
            if task.id in seen:
                raise StoreCorruptionError(self.key, f"duplicate task id {task.id!r}")
            seen.add(task.id)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps([task.to_dict() for task in tasks], ensure_ascii=False)
        self.storage.set_item(self.key, payload)
