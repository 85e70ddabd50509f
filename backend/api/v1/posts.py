"""Post creation, retrieval and editing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db, require_identity
from services import PostView
from services import posts as post_service
from services.auth import AuthenticatedIdentity

from .schemas import CreatePostRequest, MutationResponse, UpdatePostRequest

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MutationResponse)
async def create_post(
    payload: CreatePostRequest,
    session: AsyncSession = Depends(get_db),
    identity: AuthenticatedIdentity = Depends(require_identity),
) -> MutationResponse:
    success = await post_service.create_post(
        session,
        identity.member_id,
        payload.content,
        payload.tags,
    )
    return MutationResponse(success=success)


@router.get("", response_model=list[PostView])
async def list_posts(session: AsyncSession = Depends(get_db)) -> list[PostView]:
    return await post_service.get_all(session)


# Static paths are registered before /{post_id} so they are not parsed as ids.
@router.get("/me", response_model=list[PostView])
async def list_my_posts(
    session: AsyncSession = Depends(get_db),
    identity: AuthenticatedIdentity = Depends(require_identity),
) -> list[PostView]:
    return await post_service.get_my_posts(session, identity.member_id)


@router.get("/liked", response_model=list[PostView])
async def list_liked_posts(
    session: AsyncSession = Depends(get_db),
    identity: AuthenticatedIdentity = Depends(require_identity),
) -> list[PostView]:
    return await post_service.get_all_liked_by_member(session, identity.member_id)


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: int,
    session: AsyncSession = Depends(get_db),
) -> PostView:
    return await post_service.get_post(session, post_id)


@router.patch("/{post_id}", response_model=MutationResponse)
async def update_post(
    post_id: int,
    payload: UpdatePostRequest,
    session: AsyncSession = Depends(get_db),
    identity: AuthenticatedIdentity = Depends(require_identity),
) -> MutationResponse:
    success = await post_service.update_post(
        session,
        identity.member_id,
        post_id,
        payload.content,
    )
    return MutationResponse(success=success)


@router.delete("/{post_id}", response_model=MutationResponse)
async def delete_post(
    post_id: int,
    session: AsyncSession = Depends(get_db),
    identity: AuthenticatedIdentity = Depends(require_identity),
) -> MutationResponse:
    success = await post_service.delete_post(session, identity.member_id, post_id)
    return MutationResponse(success=success)
