# /app/services/codegen_service.py

import logging

from .code_normalizer import normalize_code
from .database_service import DatabaseService
from .gemini_service import GeminiCodeClient
from .history_service import to_iso
from .prompt_library import build_code_prompt
from ..core.exceptions import CodeGenerationError
from ..models.generation_model import GenerateResponse

logger = logging.getLogger(__name__)


async def generate_code(
    db: DatabaseService,
    client: GeminiCodeClient,
    prompt: str,
    language: str
) -> GenerateResponse:
    """
    Asks the model for code, cleans the answer, files it under its language
    tag and returns the saved record. Nothing is written unless the model
    produced usable code.
    """
    raw_code = await client.generate(build_code_prompt(prompt, language))
    code = normalize_code(raw_code)
    if not code:
        raise CodeGenerationError("Failed to generate code: No code generated in the response")

    canonical = language.lower()
    language_record = db.find_or_create_language(name=canonical, display_name=language)
    generation = db.create_generation(
        prompt=prompt,
        code=code,
        language=canonical,
        language_id=language_record.id,
    )
    logger.info("Saved generation %s (%s, %d chars)", generation.id, canonical, len(code))

    return GenerateResponse(
        code=code,
        language=language,
        prompt=prompt,
        generationId=generation.id,
        timestamp=to_iso(generation.timestamp),
    )
