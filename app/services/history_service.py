# /app/services/history_service.py

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Optional

from .database_service import DatabaseService
from ..core.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..db.models.generation_models import Generation
from ..models.history_model import HistoryItem, HistoryResponse, PageRequest, PaginationMeta

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# --- HELPER FUNCTIONS ---

def _parse_int(value: Any) -> Optional[int]:
    """
    Lenient integer parse for query-string values: "3" -> 3, "3abc" -> 3,
    "abc" -> None. Anything that is not a str or int yields None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


def to_iso(value: datetime) -> str:
    # SQLite hands back naive datetimes; they were written as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _to_history_item(record: Generation) -> HistoryItem:
    display = record.language_relation.display_name if record.language_relation else None
    return HistoryItem(
        id=record.id,
        prompt=record.prompt,
        code=record.code,
        language=display or record.language,
        timestamp=to_iso(record.timestamp),
    )


# --- PAGINATION ---

def resolve_page_request(page: Any = None, limit: Any = None, language: Optional[str] = None) -> PageRequest:
    """
    Turns raw query values into a valid page request. Bad input is corrected,
    never rejected:
      - page: missing, non-numeric or < 1 becomes 1
      - limit: missing or non-numeric becomes 10, then clamped to [1, 100]
      - language: lower-cased; blank means no filter
    """
    page_number = _parse_int(page)
    if page_number is None or page_number < 1:
        page_number = DEFAULT_PAGE

    page_size = _parse_int(limit)
    if page_size is None:
        page_size = DEFAULT_PAGE_SIZE
    page_size = min(MAX_PAGE_SIZE, max(1, page_size))

    language_filter = language.strip().lower() if isinstance(language, str) and language.strip() else None

    return PageRequest(page=page_number, limit=page_size, language=language_filter)


def build_pagination(page: int, limit: int, total_count: int) -> PaginationMeta:
    total_pages = math.ceil(total_count / limit) if total_count > 0 else 0
    return PaginationMeta(
        page=page,
        limit=limit,
        totalCount=total_count,
        totalPages=total_pages,
        hasNextPage=page < total_pages,
        hasPreviousPage=page > 1,
    )


# --- PUBLIC SERVICE FUNCTIONS ---

def get_history(
    db: DatabaseService,
    page: Any = None,
    limit: Any = None,
    language: Optional[str] = None
) -> HistoryResponse:
    """
    Returns one page of past generations, most recent first, plus the
    metadata needed to page through the rest. A page past the end comes
    back empty with hasNextPage=False.
    """
    request = resolve_page_request(page, limit, language)

    total_count = db.count_generations(language=request.language)
    # Past the end there is nothing to fetch; huge offsets would also overflow the driver.
    records = []
    if request.skip < total_count:
        records = db.list_generations(language=request.language, skip=request.skip, take=request.limit)
    logger.debug(
        "History page=%s limit=%s language=%s -> %s of %s",
        request.page, request.limit, request.language, len(records), total_count
    )

    return HistoryResponse(
        data=[_to_history_item(record) for record in records],
        pagination=build_pagination(request.page, request.limit, total_count),
    )
