# /app/services/database_helpers/language_repository_sql.py

import uuid
from typing import Optional
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.db.models.generation_models import Language

# Supported dialects. Each INSERT supports ON CONFLICT DO NOTHING.
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class LanguageRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_or_create_language(self, name: str, display_name: str) -> Language:
        """
        Atomic find-or-create keyed by the unique `name` column.
        An existing tag is returned untouched; concurrent callers never
        produce duplicates because the database resolves the conflict.
        Only PostgreSQL and SQLite are supported.
        """
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Language upsert is not supported on the '{dialect}' dialect.")

        values = {"id": f"lang_{uuid.uuid4().hex[:16]}", "name": name, "display_name": display_name}
        stmt = insert(Language).values(**values).on_conflict_do_nothing(index_elements=["name"])
        self.db.execute(stmt)
        self.db.commit()
        return self.get_language_by_name(name)

    def get_language_by_name(self, name: str) -> Optional[Language]:
        return self.db.query(Language).filter(Language.name == name).first()
