"""Hashtag search endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from services import PageInput, PostView
from services import posts as post_service

from .pagination import get_page_input

router = APIRouter(prefix="/hashtags", tags=["hashtags"])


@router.get("/{tag_name}/posts", response_model=list[PostView])
async def list_posts_by_hashtag(
    tag_name: str,
    page: PageInput = Depends(get_page_input),
    session: AsyncSession = Depends(get_db),
) -> list[PostView]:
    return await post_service.find_all_by_hashtag(session, tag_name, page)
