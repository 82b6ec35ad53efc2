# /app/core/deps.py

from fastapi import Request

from ..services.gemini_service import GeminiCodeClient


def get_code_client(request: Request) -> GeminiCodeClient:
    """
    FastAPI dependency that provides the model client built by the lifespan
    handler in `app.main`.
    """
    return request.app.state.code_client
