"""
SQLAlchemy database models for Word Scramble Bot.
Rounds live in memory only; the database holds dictionary lookups.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    String,
    Integer,
    Boolean,
    DateTime,
    UniqueConstraint,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class WordCache(Base):
    """
    Cache for dictionary lookup results.

    Stores definitive answers (found / not found) to avoid repeated API calls.
    """
    __tablename__ = "word_cache"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    word: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    language: Mapped[str] = mapped_column(String(10), nullable=False, default="en")

    is_valid: Mapped[bool] = mapped_column(Boolean, nullable=False)
    word_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    validated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    __table_args__ = (
        UniqueConstraint("word", "language", name="unique_word_per_language"),
    )
