import logging
import threading
import uuid
from datetime import date, timedelta
from typing import Dict, List, Optional

from fastapi import Request

from .models import Priority, Status, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Thread-safe in-memory task collection keyed by id.

    Each call is atomic on its own; nothing spans several calls, so a
    read-modify-save sequence is last-writer-wins.
    """

    def __init__(self):
        self._tasks: Dict[uuid.UUID, Task] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, task_id) -> bool:
        with self._lock:
            return task_id in self._tasks

    def list_all(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())

    def get(self, task_id: uuid.UUID) -> Optional[Task]:
        with self._lock:
            return self._tasks.get(task_id)

    def save(self, task: Task) -> Task:
        with self._lock:
            self._tasks[task.id] = task
        logger.debug("Saved task %s", task.id)
        return task

    def delete(self, task_id: uuid.UUID) -> bool:
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is None:
            logger.debug("Delete of absent task %s ignored", task_id)
            return False
        logger.debug("Deleted task %s", task_id)
        return True

    def list_by_status(self, status: Status) -> List[Task]:
        with self._lock:
            return [t for t in self._tasks.values() if t.status == status]

    def list_by_priority(self, priority: Priority) -> List[Task]:
        with self._lock:
            return [t for t in self._tasks.values() if t.priority == priority]

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()


def seed_example_tasks(store: TaskStore) -> List[Task]:
    today = date.today()
    seeded = [
        store.save(Task(
            None,
            "Complete project setup",
            "Set up FastAPI project with Docker",
            "HIGH",
            "IN_PROGRESS",
            today + timedelta(days=1),
            ["backend", "urgent"],
        )),
        store.save(Task(
            None,
            "Write documentation",
            "Prepare API documentation",
            "MEDIUM",
            "PENDING",
            today + timedelta(days=3),
            ["docs"],
        )),
    ]
    logger.info("Seeded %d example tasks", len(seeded))
    return seeded


def get_store(request: Request) -> TaskStore:
    return request.app.state.store
