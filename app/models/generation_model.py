# /app/models/generation_model.py

from pydantic import BaseModel, Field, field_validator


class GenerateRequest(BaseModel):
    """
    Body of POST /generate. Both fields must be real, non-blank strings;
    numbers or lists are not coerced.
    """
    prompt: str = Field(..., min_length=1, strict=True)
    language: str = Field(..., min_length=1, strict=True)

    @field_validator("prompt", "language")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("language")
    @classmethod
    def strip_language(cls, value: str) -> str:
        return value.strip()


class GenerateResponse(BaseModel):
    success: bool = True
    code: str
    language: str
    prompt: str
    generationId: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Uniform failure body returned by every endpoint."""
    success: bool = False
    error: str
