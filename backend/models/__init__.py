"""SQLModel models package."""

from .hashtag import Hashtag
from .like import Like
from .member import Member
from .post import Post
from .post_hashtag import PostHashtag

__all__ = [
    "Member",
    "Post",
    "Hashtag",
    "PostHashtag",
    "Like",
]
