# /app/routers/generate_router.py

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..core.deps import get_code_client
from ..core.exceptions import CodeGenerationError
from ..models import generation_model
from ..services import codegen_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.gemini_service import GeminiCodeClient

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=generation_model.ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/generate",
    response_model=generation_model.GenerateResponse,
    responses={
        400: {"model": generation_model.ErrorResponse},
        500: {"model": generation_model.ErrorResponse},
    },
    summary="Generate Code",
    description="Generates code for a prompt in the requested language and saves it to the history."
)
async def generate_code(
    request: generation_model.GenerateRequest,
    db: DatabaseService = Depends(get_db_service),
    client: GeminiCodeClient = Depends(get_code_client)
):
    try:
        return await codegen_service.generate_code(
            db=db,
            client=client,
            prompt=request.prompt,
            language=request.language
        )
    except CodeGenerationError as e:
        logger.error("Code generation failed: %s", e)
        return _error(str(e))
    except Exception:
        logger.exception("Unexpected error in /generate")
        return _error("Failed to generate code")
