# /app/routers/history_router.py

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import Optional

# Import the Pydantic models that define our API contract
from ..models import history_model
from ..models.generation_model import ErrorResponse

# Import the services that contain our business logic
from ..services import history_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "", # Maps to /api/history
    response_model=history_model.HistoryResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Get Generation History"
)
def get_history(
    # Plain strings on purpose: malformed values are clamped, not rejected with a 422.
    page: Optional[str] = None,
    limit: Optional[str] = None,
    language: Optional[str] = None,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Endpoint to retrieve past generations, newest first, one page at a time.
    """
    try:
        return history_service.get_history(db=db, page=page, limit=limit, language=language)
    except Exception:
        logger.exception("Error fetching generation history")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Failed to fetch history").model_dump(),
        )
