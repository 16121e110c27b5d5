import logging
import threading
from dataclasses import replace
from datetime import timedelta
from typing import Any, List, Mapping, Optional

from ..core.errors import InvalidTask, TaskNotFound
from .models import Priority, Status, Task, TaskStats, utcnow

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "priority", "status")


class TaskStore:
    """In-memory task collection with a monotonically increasing id counter.

    Tasks are immutable snapshots; updates replace the stored object. One lock
    guards both the list and the counter so ids stay unique under the thread
    pool FastAPI runs sync handlers on.
    """

    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self, status: Optional[Status] = None, priority: Optional[Priority] = None) -> List[Task]:
        with self._lock:
            tasks = list(self._tasks)
        if status is not None:
            tasks = [t for t in tasks if t.status == status]
        if priority is not None:
            tasks = [t for t in tasks if t.priority == priority]
        return tasks

    def get(self, task_id: int) -> Task:
        with self._lock:
            return self._tasks[self._index_of(task_id)]

    def create(
        self,
        title: str,
        description: str = "",
        priority: Priority = Priority.MEDIUM,
        status: Status = Status.PENDING,
    ) -> Task:
        if not title:
            raise InvalidTask("O título da tarefa não pode ser vazio")
        now = utcnow()
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description or "",
                priority=Priority(priority),
                status=Status(status),
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._tasks.append(task)
        logger.info("Created task %d (%s)", task.id, task.title)
        return task

    def update(self, task_id: int, changes: Mapping[str, Any]) -> Task:
        """Replace the fields present in ``changes``; ``id``/``created_at`` are ignored."""
        fields = {k: changes[k] for k in UPDATABLE_FIELDS if k in changes}
        if "title" in fields and not fields["title"]:
            raise InvalidTask("O título da tarefa não pode ser vazio")
        if "priority" in fields:
            fields["priority"] = Priority(fields["priority"])
        if "status" in fields:
            fields["status"] = Status(fields["status"])
        if fields.get("description") is None:
            fields.pop("description", None)

        with self._lock:
            idx = self._index_of(task_id)
            current = self._tasks[idx]
            now = utcnow()
            # updated_at must strictly increase even on coarse clocks
            if now <= current.updated_at:
                now = current.updated_at + timedelta(microseconds=1)
            updated = replace(current, updated_at=now, **fields)
            self._tasks[idx] = updated
        logger.info("Updated task %d fields=%s", task_id, sorted(fields))
        return updated

    def delete(self, task_id: int) -> Task:
        with self._lock:
            removed = self._tasks.pop(self._index_of(task_id))
        logger.info("Deleted task %d", task_id)
        return removed

    def stats(self) -> TaskStats:
        with self._lock:
            tasks = list(self._tasks)
        by_status = {s: 0 for s in Status}
        by_priority = {p: 0 for p in Priority}
        for t in tasks:
            by_status[t.status] += 1
            by_priority[t.priority] += 1
        return TaskStats(total=len(tasks), by_status=by_status, by_priority=by_priority)

    def clear(self) -> None:
        """Drop every task. The id counter keeps counting."""
        with self._lock:
            self._tasks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: int) -> int:
        # caller holds the lock
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        raise TaskNotFound()
