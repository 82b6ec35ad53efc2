# /app/services/gemini_service.py

import logging
import google.generativeai as genai
from google.generativeai.types import GenerationConfig

from ..core.exceptions import CodeGenerationError

logger = logging.getLogger(__name__)


class GeminiCodeClient:
    """
    Thin wrapper around a Gemini model. One instance is built at startup and
    shared by every request; it holds no per-request state.
    """

    def __init__(self, api_key: str, model_name: str, temperature: float = 0.2):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.model = genai.GenerativeModel(model_name)
        self.config = GenerationConfig(temperature=temperature)

    async def generate(self, prompt: str) -> str:
        """Sends a text prompt and returns the raw response text."""
        try:
            response = await self.model.generate_content_async(prompt, generation_config=self.config)
            if not response.parts:
                raise ValueError("AI model returned an empty response.")
            return response.text
        except Exception as e:
            logger.error("Gemini call failed (model=%s): %s", self.model_name, e)
            raise CodeGenerationError(f"Failed to generate code: {e}") from e
