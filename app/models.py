import enum
import uuid
from datetime import date, datetime, timezone
from typing import List, Optional, Union


class Priority(str, enum.Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Status(str, enum.Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    IN_PROGRESS = "IN_PROGRESS"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _match(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    return enum_cls.__members__.get(value.strip().upper())


def is_valid_priority(value) -> bool:
    return _match(Priority, value) is not None


def is_valid_status(value) -> bool:
    return _match(Status, value) is not None


class Task:
    """In-memory task entity.

    Enum fields are coerced leniently: unknown strings fall back to
    ``Priority.LOW`` / ``Status.PENDING`` at construction, and are ignored by
    the setters. Every applied change refreshes ``updated_at``.
    """

    def __init__(
        self,
        id: Optional[uuid.UUID] = None,
        title: Optional[str] = None,
        description: Optional[str] = None,
        priority: Union[str, Priority, None] = None,
        status: Union[str, Status, None] = None,
        due_date: Optional[date] = None,
        tags: Optional[List[str]] = None,
    ):
        self._id = id if id is not None else uuid.uuid4()
        now = _utcnow()
        self._created_at = now
        self._updated_at = now
        self._title = title
        self._description = description
        self._priority = _match(Priority, priority) or Priority.LOW
        self._status = _match(Status, status) or Status.PENDING
        self._due_date = due_date
        self._tags = list(tags) if tags is not None else []

    def __repr__(self):
        return f"Task(id={self._id}, title={self._title!r}, priority={self.priority_name}, status={self.status_name})"

    def _touch(self):
        # updated_at never goes backwards, even if the wall clock does
        self._updated_at = max(_utcnow(), self._updated_at)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def title(self) -> Optional[str]:
        return self._title

    @title.setter
    def title(self, value: Optional[str]):
        self._title = value
        self._touch()

    @property
    def description(self) -> Optional[str]:
        return self._description

    @description.setter
    def description(self, value: Optional[str]):
        self._description = value
        self._touch()

    @property
    def priority(self) -> Priority:
        return self._priority

    @priority.setter
    def priority(self, value: Union[str, Priority]):
        matched = _match(Priority, value)
        if matched is None:
            return
        self._priority = matched
        self._touch()

    @property
    def priority_name(self) -> str:
        return self._priority.name

    @property
    def status(self) -> Status:
        return self._status

    @status.setter
    def status(self, value: Union[str, Status]):
        matched = _match(Status, value)
        if matched is None:
            return
        self._status = matched
        self._touch()

    @property
    def status_name(self) -> str:
        return self._status.name

    @property
    def due_date(self) -> Optional[date]:
        return self._due_date

    @due_date.setter
    def due_date(self, value: Optional[date]):
        self._due_date = value
        self._touch()

    @property
    def tags(self) -> List[str]:
        return list(self._tags)

    @tags.setter
    def tags(self, value: Optional[List[str]]):
        self._tags = list(value) if value is not None else []
        self._touch()
