# /app/main.py

# --- Core FastAPI Imports ---
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from .core import config
from .core.logging_config import setup_logging
from .db.database import init_db
from .models.generation_model import ErrorResponse
from .routers import generate_router, history_router, health_router
from .services.gemini_service import GeminiCodeClient

logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once on startup: this is the only place the model client is built.
    setup_logging(config.LOG_LEVEL)
    init_db()
    app.state.code_client = GeminiCodeClient(
        api_key=config.get_gemini_api_key(),
        model_name=config.GEMINI_MODEL,
        temperature=config.GEMINI_TEMPERATURE,
    )
    logger.info("Code generation backend started (model=%s)", config.GEMINI_MODEL)
    yield
    logger.info("Code generation backend shutting down")


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Code Generation Backend API",
    description="Generates code from natural-language prompts and keeps a browsable history.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# --- Error Translation ---
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reports malformed request bodies as `{success: false, error}` with a 400."""
    message = "Invalid request payload"
    errors = exc.errors()
    if errors:
        location = errors[0].get("loc", ())
        field = next((part for part in reversed(location) if isinstance(part, str) and part != "body"), None)
        if field:
            message = f"{field.capitalize()} is required and must be a string"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(),
    )


# --- API Router Inclusion ---
app.include_router(generate_router.router, tags=["Generate"])
app.include_router(history_router.router, prefix="/api/history", tags=["History"])
app.include_router(health_router.router, tags=["Health Check"])


# --- Root Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple endpoint to confirm the API is online."""
    return {"status": "Code Generation Backend is running!", "version": app.version}
