"""Hashtag domain model."""

from __future__ import annotations

from sqlalchemy import Column, Integer, String
from sqlmodel import Field, SQLModel

MAX_TAG_NAME_LENGTH = 100


class Hashtag(SQLModel, table=True):
    """Shared tag; one row per distinct tag name."""

    __tablename__ = "hashtags"

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    tag_name: str = Field(
        sa_column=Column(String(MAX_TAG_NAME_LENGTH), unique=True, nullable=False, index=True)
    )
