# /tests/conftest.py

import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.deps import get_code_client
from app.db.base import Base
from app.db.database import get_db
from app.db.models.generation_models import Generation
from app.main import app
from app.services.database_service import DatabaseService


class FakeCodeClient:
    """Stands in for GeminiCodeClient; records every prompt it is sent."""

    def __init__(self, response="```python\nprint('hello')\n```", error=None):
        self.response = response
        self.error = error
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database per test, shared across sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session)


@pytest.fixture
def fake_client():
    return FakeCodeClient()


@pytest.fixture
def client(session_factory, fake_client):
    """TestClient with the database and model client swapped out. The lifespan is not run."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_code_client] = lambda: fake_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_generations(db_service, db_session):
    """
    Returns a helper that inserts `count` generations for one language, one
    minute apart, starting from `start`. Returns the inserted rows oldest first.
    """
    def _seed(count, language="Python", start=None):
        start = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        tag = db_service.find_or_create_language(language.lower(), language)
        rows = []
        for i in range(count):
            row = Generation(
                prompt=f"{language} prompt {i}",
                code=f"code {i}",
                language=tag.name,
                language_id=tag.id,
                timestamp=start + timedelta(minutes=i),
            )
            db_session.add(row)
            rows.append(row)
        db_session.commit()
        return rows

    return _seed
