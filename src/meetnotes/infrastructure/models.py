"""SQLAlchemy ORM models."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


def _new_summary_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SummaryModel(Base):
    """SQLAlchemy model for summaries table.

    Identity and creation time are assigned here on insert, never by callers.
    Only generated_summary is updated after creation.
    """

    __tablename__ = "summaries"
    __table_args__ = (Index("ix_summaries_created_at", "created_at"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_summary_id)
    original_transcript: Mapped[str] = mapped_column(Text, nullable=False)
    custom_prompt: Mapped[str] = mapped_column(Text, nullable=False, default="")
    generated_summary: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
