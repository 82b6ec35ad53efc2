# /app/core/config.py

import os
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
# The second argument is a default value for local development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./codegen.db")

# --- Generative model ---
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.2"))

# --- HTTP ---
CORS_ORIGINS: List[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- History pagination ---
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def get_gemini_api_key() -> str:
    """
    Returns the Gemini API key, accepting the older variable names as fallbacks.
    Read lazily so that importing the app never requires a key.
    """
    api_key: Optional[str] = (
        os.getenv("GEMINI_API_KEY")
        or os.getenv("GOOGLE_AI_API_KEY")
        or os.getenv("GOOGLE_API_KEY")
    )
    if not api_key:
        raise ValueError("FATAL ERROR: GEMINI_API_KEY or GOOGLE_AI_API_KEY environment variable is not set.")
    return api_key
