"""Read projections returned by the service layer."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class MemberView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class PostView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    created_at: datetime
    owner: MemberView
    hashtags: list[str] = Field(default_factory=list)


class PageInput(BaseModel):
    """Zero-based page request."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return self.page * self.size


class TokenView(BaseModel):
    access_token: str
    token_type: str = "bearer"
