"""Version 1 API routers."""

from fastapi import APIRouter

from . import auth, hashtags, likes, members, posts

router = APIRouter(prefix="/api/v1")
router.include_router(auth.router)
router.include_router(members.router)
router.include_router(posts.router)
router.include_router(likes.router)
router.include_router(hashtags.router)

__all__ = ["router"]
