# helpdesk/core/schemas.py
from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapped around every JSON API response."""

    success: bool
    message: str = ""
    data: T | None = None


class IdPayload(BaseModel):
    id: int
