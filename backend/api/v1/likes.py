"""Like endpoints for posts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db, require_identity
from services import MemberView
from services import likes as like_service
from services import members as member_service
from services.auth import AuthenticatedIdentity

from .schemas import MutationResponse

router = APIRouter(prefix="/posts", tags=["likes"])


@router.get("/{post_id}/likes", response_model=list[MemberView])
async def list_post_likers(
    post_id: int,
    session: AsyncSession = Depends(get_db),
) -> list[MemberView]:
    return await member_service.find_all_liked_members_for_post(session, post_id)


@router.post("/{post_id}/likes", status_code=status.HTTP_200_OK, response_model=MutationResponse)
async def add_like(
    post_id: int,
    session: AsyncSession = Depends(get_db),
    identity: AuthenticatedIdentity = Depends(require_identity),
) -> MutationResponse:
    success = await like_service.add_like(session, post_id, identity.member_id)
    return MutationResponse(success=success)
