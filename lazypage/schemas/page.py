"""
Page schemas.

Serializable view of a single page produced by the paginator.
"""

from typing import Any, Generic, Literal, TypeVar, Union
from pydantic import BaseModel, Field

T = TypeVar("T")

PageLink = Union[Literal[False], int]


class PageSummary(BaseModel, Generic[T]):
    """Summary of one page of a query result."""

    count: int = Field(..., ge=0, description="Number of items in this page")
    previous_page: PageLink = Field(..., description="Previous page number, or false on the first page")
    current_page: int = Field(..., ge=1, description="Current page number (starting from 1)")
    next_page: PageLink = Field(..., description="Next page number, or false when no more rows exist")
    per_page: int = Field(..., ge=1, description="Items per page")
    items: list[T] = Field(default_factory=list, description="Rows of this page")

    class Config:
        json_schema_extra = {
            "example": {
                "count": 2,
                "previous_page": 1,
                "current_page": 2,
                "next_page": 3,
                "per_page": 2,
                "items": [{"id": 3}, {"id": 4}]
            }
        }


RowPageSummary = PageSummary[dict[str, Any]]
