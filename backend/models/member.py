"""Member domain model."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlmodel import Field, SQLModel

MAX_MEMBER_NAME_LENGTH = 50


class Member(SQLModel, table=True):
    """Registered account; the name is the login identifier."""

    __tablename__ = "members"

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    name: str = Field(
        sa_column=Column(String(MAX_MEMBER_NAME_LENGTH), unique=True, nullable=False, index=True)
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False)
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        ),
    )
