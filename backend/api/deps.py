"""Shared FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_session
from services import BusinessError, ErrorCode
from services.auth import MEMBER_AUTHORITY, AuthenticatedIdentity, identity_from_request


async def get_db() -> AsyncIterator[AsyncSession]:
    async for session in get_session():
        yield session


def get_identity(request: Request) -> AuthenticatedIdentity | None:
    """Return the identity the authentication middleware attached, if any."""
    return identity_from_request(request)


def require_identity(
    identity: AuthenticatedIdentity | None = Depends(get_identity),
) -> AuthenticatedIdentity:
    if identity is None or not identity.has_authority(MEMBER_AUTHORITY):
        raise BusinessError(
            ErrorCode.AUTHENTICATION_REQUIRED,
            "Authentication is required for this operation",
        )
    return identity
