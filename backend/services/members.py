"""Member registration, login and profile lookups."""

from __future__ import annotations

import logging
from typing import Any, cast

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from core import create_access_token, hash_password, needs_rehash, verify_password
from db.errors import is_unique_violation
from models import Like, Member

from .common import asc, eq
from .errors import BusinessError, ErrorCode
from .lookups import require_member, require_post
from .schemas import MemberView, TokenView

logger = logging.getLogger(__name__)


def _duplicate_name_error(name: str) -> BusinessError:
    return BusinessError(
        ErrorCode.ID_IS_DUPLICATE,
        f"Member name is already taken: {name}",
    )


async def _name_exists(session: AsyncSession, name: str) -> bool:
    result = await session.execute(select(exists().where(eq(Member.name, name))))
    return bool(result.scalar())


async def register(session: AsyncSession, name: str, password: str) -> bool:
    if await _name_exists(session, name):
        raise _duplicate_name_error(name)

    member = Member(name=name, password_hash=hash_password(password))
    session.add(member)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        if is_unique_violation(exc):
            logger.warning("Concurrent registration for the same name", extra={"member_name": name})
            raise _duplicate_name_error(name) from exc
        raise

    logger.info("Registered member", extra={"member_id": member.id})
    return True


async def login(session: AsyncSession, name: str, password: str) -> TokenView:
    """Check credentials and issue an access token for the member."""
    result = await session.execute(select(Member).where(eq(Member.name, name)).limit(1))
    member = result.scalar_one_or_none()
    if member is None or not verify_password(password, member.password_hash):
        raise BusinessError(ErrorCode.LOGIN_FAILED, "Invalid name or password")

    if needs_rehash(member.password_hash):
        member.password_hash = hash_password(password)
        try:
            await session.commit()
        except Exception:
            await session.rollback()
            raise

    return TokenView(access_token=create_access_token(str(member.id)))


async def find_my_info(session: AsyncSession, member_id: int) -> MemberView:
    member = await require_member(session, member_id)
    return MemberView.model_validate(member)


async def find_all_liked_members_for_post(
    session: AsyncSession,
    post_id: int,
) -> list[MemberView]:
    """Return every member who liked the post, earliest like first."""
    await require_post(session, post_id)

    member_entity = cast(Any, Member)
    like_post_id_column = cast(ColumnElement[int], Like.post_id)
    result = await session.execute(
        select(member_entity)
        .join(Like, eq(Like.member_id, Member.id))
        .where(eq(like_post_id_column, post_id))
        .order_by(asc(Like.created_at), asc(Member.id))
    )
    return [MemberView.model_validate(member) for member in result.scalars().all()]
