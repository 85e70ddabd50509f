"""Post creation, editing, deletion and feed queries."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, cast

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from db.errors import is_unique_violation
from models import Hashtag, Like, Member, Post, PostHashtag
from models.post import MAX_POST_CONTENT_LENGTH

from .common import asc, desc, eq, in_
from .errors import BusinessError, ErrorCode
from .lookups import require_member, require_owned_post
from .schemas import MemberView, PageInput, PostView

logger = logging.getLogger(__name__)


def validate_content(content: str | None) -> str:
    """Return the content unchanged when it is a non-blank string of at most 100 chars."""
    if content is None or not content.strip():
        raise BusinessError(
            ErrorCode.POST_CONTENT_IS_REQUIRED,
            "Post content is required",
        )
    if len(content) > MAX_POST_CONTENT_LENGTH:
        raise BusinessError(
            ErrorCode.CONTENT_MUST_BE_100_LENGTH_OR_LESS,
            f"Post content must be at most {MAX_POST_CONTENT_LENGTH} characters",
        )
    return content


def _unique_in_order(tags: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for tag in tags:
        if tag in seen:
            continue
        seen.add(tag)
        ordered.append(tag)
    return ordered


async def _resolve_hashtags(session: AsyncSession, tags: Sequence[str]) -> list[Hashtag]:
    """Reuse existing hashtag rows by exact name and stage new rows for the rest."""
    tag_names = _unique_in_order(tags)
    if not tag_names:
        return []

    result = await session.execute(
        select(Hashtag).where(in_(Hashtag.tag_name, tag_names))
    )
    existing = {hashtag.tag_name: hashtag for hashtag in result.scalars().all()}

    hashtags: list[Hashtag] = []
    for tag_name in tag_names:
        hashtag = existing.get(tag_name)
        if hashtag is None:
            hashtag = Hashtag(tag_name=tag_name)
            session.add(hashtag)
        hashtags.append(hashtag)
    return hashtags


async def _collect_hashtag_names(
    session: AsyncSession,
    post_ids: Sequence[int],
) -> dict[int, list[str]]:
    if not post_ids:
        return {}

    post_id_column = cast(ColumnElement[int], PostHashtag.post_id)
    tag_name_column = cast(ColumnElement[str], Hashtag.tag_name)
    result = await session.execute(
        select(post_id_column, tag_name_column)
        .join_from(
            cast(Any, PostHashtag),
            cast(Any, Hashtag),
            eq(Hashtag.id, PostHashtag.hashtag_id),
        )
        .where(in_(post_id_column, post_ids))
        .order_by(asc(post_id_column), asc(PostHashtag.position))
    )
    names: dict[int, list[str]] = {}
    for post_id, tag_name in result.all():
        names.setdefault(post_id, []).append(tag_name)
    return names


async def _build_post_views(
    session: AsyncSession,
    rows: Sequence[tuple[Post, Member]],
) -> list[PostView]:
    post_ids = [post.id for post, _ in rows if post.id is not None]
    hashtag_names = await _collect_hashtag_names(session, post_ids)
    views: list[PostView] = []
    for post, owner in rows:
        if post.id is None or owner.id is None:
            raise ValueError("Post record missing identifier")
        views.append(
            PostView(
                id=post.id,
                content=post.content,
                created_at=post.created_at,
                owner=MemberView(id=owner.id, name=owner.name),
                hashtags=hashtag_names.get(post.id, []),
            )
        )
    return views


def _post_with_owner_query() -> Any:
    return select(cast(Any, Post), cast(Any, Member)).join_from(
        cast(Any, Post), cast(Any, Member), eq(Member.id, Post.member_id)
    )


def _newest_first(query: Any) -> Any:
    return query.order_by(desc(Post.created_at), desc(Post.id))


async def _fetch_post_views(session: AsyncSession, query: Any) -> list[PostView]:
    result = await session.execute(query)
    rows = [(post, owner) for post, owner in result.all()]
    return await _build_post_views(session, rows)


async def _insert_post(
    session: AsyncSession,
    member_id: int,
    content: str,
    tags: Sequence[str],
) -> int:
    hashtags = await _resolve_hashtags(session, tags)
    post = Post(member_id=member_id, content=content)
    session.add(post)
    await session.flush()
    if post.id is None:
        raise ValueError("Post record missing identifier")
    for position, hashtag in enumerate(hashtags):
        if hashtag.id is None:
            raise ValueError("Hashtag record missing identifier")
        session.add(PostHashtag(post_id=post.id, hashtag_id=hashtag.id, position=position))
    await session.commit()
    return post.id


async def create_post(
    session: AsyncSession,
    member_id: int,
    content: str | None,
    tags: Sequence[str] | None = None,
) -> bool:
    validated_content = validate_content(content)
    member = await require_member(session, member_id)
    if member.id is None:
        raise ValueError("Member record missing identifier")
    owner_id = member.id
    tag_names = list(tags or [])

    try:
        post_id = await _insert_post(session, owner_id, validated_content, tag_names)
    except IntegrityError as exc:
        await session.rollback()
        if not is_unique_violation(exc):
            raise
        # Another request created one of the hashtags first; retry once against that row.
        logger.warning(
            "Hashtag created concurrently, retrying post insert",
            extra={"member_id": member_id},
        )
        try:
            post_id = await _insert_post(session, owner_id, validated_content, tag_names)
        except Exception:
            await session.rollback()
            raise
    except Exception:
        await session.rollback()
        raise

    logger.info(
        "Created post",
        extra={"member_id": member_id, "post_id": post_id},
    )
    return True


async def get_post(session: AsyncSession, post_id: int) -> PostView:
    query = _post_with_owner_query().where(eq(Post.id, post_id)).limit(1)
    views = await _fetch_post_views(session, query)
    if not views:
        raise BusinessError(
            ErrorCode.POST_DOES_NOT_EXISTS,
            f"Post not found. ID: {post_id}",
        )
    return views[0]


async def get_my_posts(session: AsyncSession, member_id: int) -> list[PostView]:
    await require_member(session, member_id)
    query = _newest_first(_post_with_owner_query().where(eq(Post.member_id, member_id)))
    return await _fetch_post_views(session, query)


async def get_all(session: AsyncSession) -> list[PostView]:
    return await _fetch_post_views(session, _newest_first(_post_with_owner_query()))


async def get_all_liked_by_member(session: AsyncSession, member_id: int) -> list[PostView]:
    """Return the posts the member liked, most recent like first."""
    await require_member(session, member_id)
    query = (
        _post_with_owner_query()
        .join(Like, eq(Like.post_id, Post.id))
        .where(eq(Like.member_id, member_id))
        .order_by(desc(Like.created_at), desc(Post.id))
    )
    return await _fetch_post_views(session, query)


async def update_post(
    session: AsyncSession,
    member_id: int,
    post_id: int,
    content: str | None,
) -> bool:
    await require_member(session, member_id)
    post = await require_owned_post(session, member_id=member_id, post_id=post_id)
    post.content = validate_content(content)
    session.add(post)
    try:
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Updated post", extra={"member_id": member_id, "post_id": post_id})
    return True


async def delete_post(session: AsyncSession, member_id: int, post_id: int) -> bool:
    await require_member(session, member_id)
    post = await require_owned_post(session, member_id=member_id, post_id=post_id)

    # Hashtags are shared between posts and are left in place.
    try:
        await session.execute(delete(PostHashtag).where(eq(PostHashtag.post_id, post_id)))
        await session.execute(delete(Like).where(eq(Like.post_id, post_id)))
        await session.delete(post)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Deleted post", extra={"member_id": member_id, "post_id": post_id})
    return True


async def find_all_by_hashtag(
    session: AsyncSession,
    tag_name: str,
    page: PageInput,
) -> list[PostView]:
    result = await session.execute(
        select(Hashtag).where(eq(Hashtag.tag_name, tag_name)).limit(1)
    )
    hashtag = result.scalar_one_or_none()
    if hashtag is None:
        raise BusinessError(
            ErrorCode.HASHTAG_DOES_NOT_EXISTS,
            f"Hashtag not found: {tag_name}",
        )

    query = _newest_first(
        _post_with_owner_query()
        .join(PostHashtag, eq(PostHashtag.post_id, Post.id))
        .where(eq(PostHashtag.hashtag_id, hashtag.id))
    )
    if page.offset > 0:
        query = query.offset(page.offset)
    query = query.limit(page.size)
    return await _fetch_post_views(session, query)


__all__ = [
    "validate_content",
    "create_post",
    "get_post",
    "get_my_posts",
    "get_all",
    "get_all_liked_by_member",
    "update_post",
    "delete_post",
    "find_all_by_hashtag",
]
