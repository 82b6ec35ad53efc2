# /app/models/history_model.py

from pydantic import BaseModel
from typing import List, Optional


class PageRequest(BaseModel):
    """Pagination inputs after clamping. `language` is already lower-cased."""
    page: int
    limit: int
    language: Optional[str] = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class HistoryItem(BaseModel):
    id: str
    prompt: str
    code: str
    # Display name of the language tag, e.g. "Python" rather than "python".
    language: str
    timestamp: str


class PaginationMeta(BaseModel):
    page: int
    limit: int
    totalCount: int
    totalPages: int
    hasNextPage: bool
    hasPreviousPage: bool


class HistoryResponse(BaseModel):
    """
    Defines the data contract for the GET /api/history response.
    """
    success: bool = True
    data: List[HistoryItem]
    pagination: PaginationMeta
