"""Business logic services."""

from .errors import BusinessError, ErrorCode
from .schemas import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MemberView,
    PageInput,
    PostView,
    TokenView,
)

__all__ = [
    "BusinessError",
    "ErrorCode",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "MemberView",
    "PageInput",
    "PostView",
    "TokenView",
]
