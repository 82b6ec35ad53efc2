# /app/services/database_helpers/generation_repository_sql.py

from typing import List, Optional
from sqlalchemy.orm import Session, Query, joinedload
from app.db.models.generation_models import Generation


class GenerationRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _filtered(self, language: Optional[str]) -> Query:
        query = self.db.query(Generation)
        if language:
            query = query.filter(Generation.language == language)
        return query

    def create_generation(self, prompt: str, code: str, language: str, language_id: str) -> Generation:
        """Creates a new Generation record linked to an existing language tag."""
        new_generation = Generation(prompt=prompt, code=code, language=language, language_id=language_id)
        self.db.add(new_generation)
        self.db.commit()
        self.db.refresh(new_generation)
        return new_generation

    def count_generations(self, language: Optional[str] = None) -> int:
        return self._filtered(language).count()

    def list_generations(self, language: Optional[str] = None, skip: int = 0, take: int = 10) -> List[Generation]:
        """
        Returns one page of generations, most recent first. The id is a
        secondary sort key so rows sharing a timestamp keep a fixed order.
        """
        return (
            self._filtered(language)
            .options(joinedload(Generation.language_relation))
            .order_by(Generation.timestamp.desc(), Generation.id.desc())
            .offset(skip)
            .limit(take)
            .all()
        )
