"""Existence lookups shared by the member, post and like services."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Member, Post

from .common import eq
from .errors import BusinessError, ErrorCode


async def require_member(session: AsyncSession, member_id: int) -> Member:
    """Return the member or raise MEMBER_DOES_NOT_EXISTS."""
    result = await session.execute(select(Member).where(eq(Member.id, member_id)).limit(1))
    member = result.scalar_one_or_none()
    if member is None:
        raise BusinessError(
            ErrorCode.MEMBER_DOES_NOT_EXISTS,
            f"Member not found. ID: {member_id}",
        )
    return member


async def require_post(session: AsyncSession, post_id: int) -> Post:
    """Return the post or raise POST_DOES_NOT_EXISTS."""
    result = await session.execute(select(Post).where(eq(Post.id, post_id)).limit(1))
    post = result.scalar_one_or_none()
    if post is None:
        raise BusinessError(
            ErrorCode.POST_DOES_NOT_EXISTS,
            f"Post not found. ID: {post_id}",
        )
    return post


async def require_owned_post(
    session: AsyncSession,
    *,
    member_id: int,
    post_id: int,
) -> Post:
    """Return the post only when member_id owns it.

    A post owned by someone else is reported exactly like a missing one.
    """
    result = await session.execute(
        select(Post)
        .where(eq(Post.id, post_id), eq(Post.member_id, member_id))
        .limit(1)
    )
    post = result.scalar_one_or_none()
    if post is None:
        raise BusinessError(
            ErrorCode.POST_DOES_NOT_EXISTS,
            f"Post not found. ID: {post_id}",
        )
    return post
