"""Post to hashtag association."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, Integer
from sqlmodel import Field, SQLModel


class PostHashtag(SQLModel, table=True):
    """Links a post to a hashtag; position keeps the order the tags were given in."""

    __tablename__ = "post_hashtags"
    __table_args__ = (
        Index("ix_post_hashtags_hashtag_id_post_id", "hashtag_id", "post_id"),
    )

    post_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        )
    )
    hashtag_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("hashtags.id", ondelete="CASCADE"),
            primary_key=True,
        )
    )
    position: int = Field(
        sa_column=Column(Integer, nullable=False)
    )
