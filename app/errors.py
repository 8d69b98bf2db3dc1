"""
Domain errors for the Task Management API.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned by the API."""

    code: str
    message: str
    detail: Dict[str, Any] = {}


class TaskAPIError(Exception):
    """Base exception for task operations."""

    status_code = 500

    def __init__(self, code: str, message: str, detail: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.detail = detail or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(code=self.code, message=self.message, detail=self.detail)


class TaskNotFoundError(TaskAPIError):
    """No task stored under the requested id."""

    status_code = 404

    def __init__(self, task_id):
        super().__init__(
            "TASK_NOT_FOUND",
            f"Task not found with id: {task_id}",
            {"id": str(task_id)},
        )


class InvalidFilterError(TaskAPIError):
    """Filter value does not name a member of the enum being filtered on."""

    status_code = 400

    def __init__(self, field: str, value: str, allowed):
        super().__init__(
            "INVALID_FILTER",
            f"Invalid {field}: {value}",
            {"field": field, "value": value, "allowed": list(allowed)},
        )
