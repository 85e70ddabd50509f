"""Post domain model."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, func
from sqlmodel import Field, SQLModel

MAX_POST_CONTENT_LENGTH = 100


class Post(SQLModel, table=True):
    """Text post owned by exactly one member."""

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_member_created_at", "member_id", "created_at"),
    )

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    # The owner is fixed at creation; nothing reassigns it.
    member_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("members.id", ondelete="CASCADE"),
            nullable=False,
        )
    )
    content: str = Field(
        sa_column=Column(String(MAX_POST_CONTENT_LENGTH), nullable=False)
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        ),
    )
