# /app/db/models/generation_models.py

"""
ORM models for generated code and the language tags it is filed under.
"""

import threading
import time
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


_id_lock = threading.Lock()
_last_id_ns = 0


def _new_id(prefix: str) -> str:
    # Fixed-width hex nanoseconds first, strictly increasing within the process,
    # so ids sort in creation order.
    global _last_id_ns
    with _id_lock:
        _last_id_ns = max(time.time_ns(), _last_id_ns + 1)
        stamp = _last_id_ns
    return f"{prefix}_{stamp:016x}{uuid.uuid4().hex[:8]}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Language(Base):
    """
    A language tag, unique by its canonical lower-case `name`.
    `display_name` keeps the casing the tag was first created with.
    """
    id = Column(String, primary_key=True, index=True, default=lambda: _new_id("lang"))
    name = Column(String, unique=True, index=True, nullable=False)
    display_name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    generations = relationship("Generation", back_populates="language_relation")


class Generation(Base):
    """
    One prompt/code pair. Rows are immutable once written.
    `language` is denormalized from the tag and always equals `language_relation.name`.
    """
    id = Column(String, primary_key=True, index=True, default=lambda: _new_id("gen"))
    prompt = Column(Text, nullable=False)
    code = Column(Text, nullable=False)
    language = Column(String, index=True, nullable=False)
    language_id = Column(String, ForeignKey("languages.id"), nullable=False, index=True)
    timestamp = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    language_relation = relationship("Language", back_populates="generations")
