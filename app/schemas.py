from datetime import date, datetime
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import Priority, Status

Tag = Annotated[str, Field(max_length=20)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskBase(_CamelModel):
    title: str = Field(min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    priority: str
    status: Optional[str] = None
    due_date: Optional[date] = None
    tags: Optional[List[Tag]] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v


class TaskCreate(TaskBase):
    @field_validator("due_date")
    @classmethod
    def due_date_not_past(cls, v: Optional[date]) -> Optional[date]:
        if v is not None and v < date.today():
            raise ValueError("Due date must be today or in the future")
        return v


class TaskUpdate(_CamelModel):
    title: Optional[str] = Field(default=None, min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    priority: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[date] = None
    tags: Optional[List[Tag]] = None


class TaskOut(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: UUID
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Priority
    status: Status
    due_date: Optional[date] = None
    tags: List[str] = []
    created_at: datetime
    updated_at: datetime
