"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """``{"success": ..., "message": ..., "data": ...}``, shown to the user verbatim."""

    success: bool = True
    message: str | None = None
    count: int | None = None
    data: DataT | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str | None = None
