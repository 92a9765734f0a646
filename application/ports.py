from typing import Protocol, List, Sequence
from core import Task


class TaskListStore(Protocol):
    def load(self) -> List[Task]:
        ...

    def save(self, tasks: Sequence[Task]) -> None:
        ...


class UserPrompts(Protocol):
    def confirm(self, message: str) -> bool:
        ...

    def notify(self, message: str) -> None:
        ...
