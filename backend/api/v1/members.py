"""Member profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db, require_identity
from services import MemberView
from services import members as member_service
from services.auth import AuthenticatedIdentity

router = APIRouter(prefix="/members", tags=["members"])


@router.get("/me", response_model=MemberView)
async def read_my_info(
    session: AsyncSession = Depends(get_db),
    identity: AuthenticatedIdentity = Depends(require_identity),
) -> MemberView:
    return await member_service.find_my_info(session, identity.member_id)
