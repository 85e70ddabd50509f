"""Tests for the like mutation."""

from collections.abc import Awaitable, Callable

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Like, Post
from services import BusinessError, ErrorCode
from services import likes as like_service

CreateMember = Callable[..., Awaitable[int]]


async def _create_post(session: AsyncSession, member_id: int, content: str = "hi") -> int:
    post = Post(member_id=member_id, content=content)
    session.add(post)
    await session.commit()
    assert post.id is not None
    return post.id


async def _like_count(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(Like))
    return int(result.scalar_one())


@pytest.mark.asyncio
async def test_add_like_is_idempotent(
    db_session: AsyncSession,
    create_member: CreateMember,
):
    author_id = await create_member("alice")
    fan_id = await create_member("bob")
    post_id = await _create_post(db_session, author_id)

    assert await like_service.add_like(db_session, post_id, fan_id) is True
    assert await like_service.add_like(db_session, post_id, fan_id) is True

    assert await _like_count(db_session) == 1


@pytest.mark.asyncio
async def test_add_like_to_own_post(
    db_session: AsyncSession,
    create_member: CreateMember,
):
    author_id = await create_member("alice")
    post_id = await _create_post(db_session, author_id)

    assert await like_service.add_like(db_session, post_id, author_id) is True
    assert await _like_count(db_session) == 1


@pytest.mark.asyncio
async def test_add_like_missing_post(
    db_session: AsyncSession,
    create_member: CreateMember,
):
    fan_id = await create_member("bob")

    with pytest.raises(BusinessError) as exc_info:
        await like_service.add_like(db_session, 4242, fan_id)

    assert exc_info.value.code == ErrorCode.POST_DOES_NOT_EXISTS
    assert await _like_count(db_session) == 0


@pytest.mark.asyncio
async def test_add_like_missing_member(
    db_session: AsyncSession,
    create_member: CreateMember,
):
    author_id = await create_member("alice")
    post_id = await _create_post(db_session, author_id)

    with pytest.raises(BusinessError) as exc_info:
        await like_service.add_like(db_session, post_id, 999)

    assert exc_info.value.code == ErrorCode.MEMBER_DOES_NOT_EXISTS


@pytest.mark.asyncio
async def test_like_endpoints(
    async_client: AsyncClient,
    db_session: AsyncSession,
    create_member: CreateMember,
    auth_headers: Callable[[int], dict[str, str]],
):
    author_id = await create_member("alice")
    fan_id = await create_member("bob")
    post_id = await _create_post(db_session, author_id)

    anonymous = await async_client.post(f"/api/v1/posts/{post_id}/likes")
    assert anonymous.status_code == status.HTTP_401_UNAUTHORIZED

    for _ in range(2):
        liked = await async_client.post(
            f"/api/v1/posts/{post_id}/likes",
            headers=auth_headers(fan_id),
        )
        assert liked.status_code == status.HTTP_200_OK
        assert liked.json() == {"success": True}

    likers = await async_client.get(f"/api/v1/posts/{post_id}/likes")
    assert likers.status_code == status.HTTP_200_OK
    assert likers.json() == [{"id": fan_id, "name": "bob"}]

    liked_posts = await async_client.get("/api/v1/posts/liked", headers=auth_headers(fan_id))
    assert [post["id"] for post in liked_posts.json()] == [post_id]

    missing = await async_client.get("/api/v1/posts/999999/likes")
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json()["code"] == "POST_DOES_NOT_EXISTS"
