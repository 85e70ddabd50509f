"""Post like mutations."""

from __future__ import annotations

import logging
from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from db.errors import is_unique_violation
from models import Like

from .common import eq
from .lookups import require_member, require_post

logger = logging.getLogger(__name__)


async def add_like(session: AsyncSession, post_id: int, member_id: int) -> bool:
    """Record that the member liked the post.

    Liking an already-liked post succeeds without adding a second row.
    """
    await require_member(session, member_id)
    await require_post(session, post_id)

    like_entity = cast(Any, Like)
    member_id_column = cast(ColumnElement[int], Like.member_id)
    post_id_column = cast(ColumnElement[int], Like.post_id)
    existing_like = await session.execute(
        select(like_entity).where(
            eq(member_id_column, member_id), eq(post_id_column, post_id)
        )
    )
    if existing_like.scalar_one_or_none() is not None:
        return True

    session.add(Like(member_id=member_id, post_id=post_id))
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        if not is_unique_violation(exc):
            raise
        return True

    logger.info("Added like", extra={"member_id": member_id, "post_id": post_id})
    return True
