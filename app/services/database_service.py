# /app/services/database_service.py

from typing import List, Optional, Generator
from sqlalchemy import text
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db
from app.db.models.generation_models import Generation, Language

# --- Repository Imports ---
from .database_helpers.generation_repository_sql import GenerationRepositorySQL
from .database_helpers.language_repository_sql import LanguageRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """Wraps one SQLAlchemy session and exposes the repositories behind it."""
        if db_session is None:
            raise ValueError("A database session is required.")
        self.db = db_session
        self.language_repo = LanguageRepositorySQL(db_session)
        self.generation_repo = GenerationRepositorySQL(db_session)

    # --- LANGUAGE METHODS (DELEGATED) ---
    def find_or_create_language(self, name: str, display_name: str) -> Language: return self.language_repo.find_or_create_language(name, display_name)

    # --- GENERATION METHODS (DELEGATED) ---
    def create_generation(self, prompt: str, code: str, language: str, language_id: str) -> Generation:
        return self.generation_repo.create_generation(prompt, code, language, language_id)
    def count_generations(self, language: Optional[str] = None) -> int: return self.generation_repo.count_generations(language)
    def list_generations(self, language: Optional[str] = None, skip: int = 0, take: int = 10) -> List[Generation]:
        return self.generation_repo.list_generations(language=language, skip=skip, take=take)

    # --- HEALTH ---
    def ping(self) -> None:
        """Round-trips a trivial query; raises if the database is unreachable."""
        self.db.execute(text("SELECT 1"))


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
