# /app/routers/health_router.py

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Service and Database Health")
def health_check(db: DatabaseService = Depends(get_db_service)):
    """Reports whether the API is up and the database answers a trivial query."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        db.ping()
    except Exception as e:
        logger.error("Health check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "database": "disconnected", "error": str(e)},
        )
    return {"status": "ok", "database": "connected", "timestamp": timestamp}
