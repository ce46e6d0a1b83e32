"""
Common response models and utilities.

Generic response wrappers and error schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response wrapper."""

    success: bool = True
    message: str | None = None
    data: T


class PaginationInfo(BaseModel):
    limit: int
    offset: int


class ListResponse(BaseModel, Generic[T]):
    """Success wrapper for list endpoints."""

    success: bool = True
    data: list[T]
    count: int
    pagination: PaginationInfo


class MessageResponse(BaseModel):
    """Error response for not-found and rejected operations."""

    success: bool = False
    message: str


class FieldErrorModel(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Validation error envelope."""

    success: bool = False
    message: str = Field(default="Invalid data")
    errors: list[FieldErrorModel]
