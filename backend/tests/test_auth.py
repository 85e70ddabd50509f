"""End-to-end tests for registration, login and the authentication middleware."""

from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any, cast

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from core import create_access_token
from models import Member

CreateMember = Callable[..., Awaitable[int]]


def _eq(column: Any, value: Any) -> ColumnElement[bool]:
    return cast(ColumnElement[bool], column == value)


@pytest.mark.asyncio
async def test_register_creates_member(async_client: AsyncClient, db_session: AsyncSession):
    response = await async_client.post(
        "/api/v1/auth/register",
        json={"name": "alice", "password": "pw1"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {"success": True}
    result = await db_session.execute(select(Member).where(_eq(Member.name, "alice")))
    member = result.scalar_one()
    assert member.password_hash != "pw1"


@pytest.mark.asyncio
async def test_register_conflict(async_client: AsyncClient):
    payload = {"name": "alice", "password": "pw1"}
    await async_client.post("/api/v1/auth/register", json=payload)

    response = await async_client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["code"] == "ID_IS_DUPLICATE"


@pytest.mark.asyncio
async def test_register_validates_payload(async_client: AsyncClient):
    response = await async_client.post(
        "/api/v1/auth/register",
        json={"name": "", "password": "pw1"},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


@pytest.mark.asyncio
async def test_login_then_read_my_info(async_client: AsyncClient):
    await async_client.post("/api/v1/auth/register", json={"name": "alice", "password": "pw1"})

    login = await async_client.post(
        "/api/v1/auth/login",
        json={"name": "alice", "password": "pw1"},
    )
    assert login.status_code == status.HTTP_200_OK
    body = login.json()
    assert body["token_type"] == "bearer"

    me = await async_client.get(
        "/api/v1/members/me",
        headers={"Authorization": f"Bearer {body['access_token']}"},
    )
    assert me.status_code == status.HTTP_200_OK
    assert me.json()["name"] == "alice"


@pytest.mark.asyncio
async def test_login_rejects_wrong_password(async_client: AsyncClient):
    await async_client.post("/api/v1/auth/register", json={"name": "alice", "password": "pw1"})

    response = await async_client.post(
        "/api/v1/auth/login",
        json={"name": "alice", "password": "nope"},
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["code"] == "LOGIN_FAILED"


@pytest.mark.asyncio
async def test_my_info_requires_identity(async_client: AsyncClient):
    response = await async_client.get("/api/v1/members/me")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["code"] == "AUTHENTICATION_REQUIRED"


@pytest.mark.asyncio
async def test_my_info_for_unknown_member(
    async_client: AsyncClient,
    auth_headers: Callable[[int], dict[str, str]],
):
    response = await async_client.get("/api/v1/members/me", headers=auth_headers(31337))

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["code"] == "MEMBER_DOES_NOT_EXISTS"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "authorization",
    [
        "Bearer not-a-jwt",
        "Basic YWxpY2U6cHcx",
        "bearer lowercase-scheme",
        "",
    ],
)
async def test_unusable_authorization_header_is_treated_as_anonymous(
    async_client: AsyncClient,
    authorization: str,
):
    public = await async_client.get("/api/v1/posts", headers={"Authorization": authorization})
    private = await async_client.get("/api/v1/members/me", headers={"Authorization": authorization})

    assert public.status_code == status.HTTP_200_OK
    assert private.status_code == status.HTTP_401_UNAUTHORIZED
    assert private.json()["code"] == "AUTHENTICATION_REQUIRED"


@pytest.mark.asyncio
async def test_expired_token_is_treated_as_anonymous(
    async_client: AsyncClient,
    create_member: CreateMember,
):
    member_id = await create_member("alice")
    expired = create_access_token(str(member_id), expires_delta=timedelta(seconds=-5))
    headers = {"Authorization": f"Bearer {expired}"}

    public = await async_client.get("/api/v1/posts", headers=headers)
    private = await async_client.get("/api/v1/members/me", headers=headers)

    assert public.status_code == status.HTTP_200_OK
    assert private.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient):
    response = await async_client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_register_rejects_password_longer_than_bcrypt_accepts(
    async_client: AsyncClient,
    db_session: AsyncSession,
):
    ascii_long = await async_client.post(
        "/api/v1/auth/register",
        json={"name": "longpw", "password": "a" * 80},
    )
    # 37 two-byte characters are 74 bytes.
    multibyte_long = await async_client.post(
        "/api/v1/auth/register",
        json={"name": "accents", "password": "é" * 37},
    )

    assert ascii_long.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
    assert multibyte_long.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
    result = await db_session.execute(select(Member))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_password_at_bcrypt_limit_registers_and_logs_in(async_client: AsyncClient):
    password = "a" * 72

    register = await async_client.post(
        "/api/v1/auth/register",
        json={"name": "longpw", "password": password},
    )
    login = await async_client.post(
        "/api/v1/auth/login",
        json={"name": "longpw", "password": password},
    )
    too_long_login = await async_client.post(
        "/api/v1/auth/login",
        json={"name": "longpw", "password": "a" * 80},
    )

    assert register.status_code == status.HTTP_201_CREATED
    assert login.status_code == status.HTTP_200_OK
    assert too_long_login.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
