"""Registration and login endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from services import TokenView
from services import members as member_service

from .schemas import CredentialsRequest, MutationResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def register(
    payload: CredentialsRequest,
    session: AsyncSession = Depends(get_db),
) -> MutationResponse:
    success = await member_service.register(session, payload.name, payload.password)
    return MutationResponse(success=success)


@router.post("/login", response_model=TokenView)
async def login(
    payload: CredentialsRequest,
    session: AsyncSession = Depends(get_db),
) -> TokenView:
    return await member_service.login(session, payload.name, payload.password)
