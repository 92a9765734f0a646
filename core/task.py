"""Task record and its storage representation.

The serialized form uses the keys ``id``, ``text``, ``completed`` and
``createdAt`` so blobs written by the browser version of the list load
unchanged.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Union

from .errors import StoreCorruptionError

TaskId = Union[int, str]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_task_id(existing: Iterable[TaskId] = ()) -> int:
    """Millisecond timestamp id, bumped past any numeric id already in use."""
    candidate = int(time.time() * 1000)
    numeric = [tid for tid in existing if isinstance(tid, int) and not isinstance(tid, bool)]
    if numeric:
        candidate = max(candidate, max(numeric) + 1)
    return candidate


@dataclass
class Task:
    """A single to-do item.

    Only ``text`` and ``completed`` change after creation.
    """

    id: TaskId
    text: str
    completed: bool = False
    created_at: str = field(default_factory=_now_iso)

    @classmethod
    def new(cls, text: str, existing_ids: Iterable[TaskId] = ()) -> "Task":
        return cls(id=new_task_id(existing_ids), text=text)

    def toggle(self) -> None:
        self.completed = not self.completed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], key: str = "todos") -> "Task":
        if not isinstance(raw, Mapping):
            raise StoreCorruptionError(key, f"task record is not an object: {raw!r}")
        tid = raw.get("id")
        if tid is None or isinstance(tid, (bool, float, list, dict)):
            raise StoreCorruptionError(key, f"task record has no usable id: {raw!r}")
        text = raw.get("text")
        if not isinstance(text, str) or not text.strip():
            raise StoreCorruptionError(key, f"task {tid!r} has empty text")
        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise StoreCorruptionError(key, f"task {tid!r} has non-boolean completed: {completed!r}")
        created = raw.get("createdAt") or raw.get("created_at") or ""
        return cls(
            id=tid,
            text=text.strip(),
            completed=completed,
            created_at=str(created),
        )
