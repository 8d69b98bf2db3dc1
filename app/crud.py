import logging
from typing import List
from uuid import UUID

from . import models, schemas
from .errors import InvalidFilterError, TaskNotFoundError
from .store import TaskStore

logger = logging.getLogger(__name__)


def get_task(store: TaskStore, task_id: UUID) -> models.Task:
    task = store.get(task_id)
    if task is None:
        logger.warning("Task %s not found", task_id)
        raise TaskNotFoundError(task_id)
    return task


def get_tasks(store: TaskStore) -> List[models.Task]:
    return store.list_all()


def get_tasks_by_status(store: TaskStore, status: str) -> List[models.Task]:
    if not models.is_valid_status(status):
        logger.warning("Rejected status filter %r", status)
        raise InvalidFilterError("status", status, models.Status.__members__)
    return store.list_by_status(models.Status[status.strip().upper()])


def get_tasks_by_priority(store: TaskStore, priority: str) -> List[models.Task]:
    if not models.is_valid_priority(priority):
        logger.warning("Rejected priority filter %r", priority)
        raise InvalidFilterError("priority", priority, models.Priority.__members__)
    return store.list_by_priority(models.Priority[priority.strip().upper()])


def create_task(store: TaskStore, task_in: schemas.TaskCreate) -> models.Task:
    task = store.save(models.Task(**task_in.model_dump()))
    logger.info("Created task %s", task.id)
    return task


def replace_task(store: TaskStore, task_id: UUID, task_in: schemas.TaskCreate) -> models.Task:
    task = get_task(store, task_id)
    task.title = task_in.title
    task.description = task_in.description
    task.priority = task_in.priority
    task.status = task_in.status
    task.due_date = task_in.due_date
    task.tags = task_in.tags
    store.save(task)
    logger.info("Replaced task %s", task_id)
    return task


def patch_task(store: TaskStore, task_id: UUID, task_in: schemas.TaskUpdate) -> models.Task:
    task = get_task(store, task_id)
    data = task_in.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in data.items():
        setattr(task, field, value)
    store.save(task)
    logger.info("Patched task %s fields=%s", task_id, sorted(data))
    return task


def delete_task(store: TaskStore, task_id: UUID, strict: bool = False) -> None:
    if not store.delete(task_id):
        if strict:
            logger.warning("Task %s not found", task_id)
            raise TaskNotFoundError(task_id)
        return
    logger.info("Deleted task %s", task_id)
