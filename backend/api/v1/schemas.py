"""Request and response bodies for the v1 API."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from models.hashtag import MAX_TAG_NAME_LENGTH
from models.member import MAX_MEMBER_NAME_LENGTH

# bcrypt only reads the first 72 bytes of a password and rejects longer input.
MAX_PASSWORD_BYTES = 72

TagName = Annotated[str, Field(min_length=1, max_length=MAX_TAG_NAME_LENGTH)]


class MutationResponse(BaseModel):
    success: bool = True


class CredentialsRequest(BaseModel):
    name: str = Field(min_length=1, max_length=MAX_MEMBER_NAME_LENGTH)
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class CreatePostRequest(BaseModel):
    # Content rules are enforced by the post service so the error codes stay stable.
    content: str | None = None
    tags: list[TagName] | None = None

    @field_validator("tags")
    @classmethod
    def _tags_not_blank(cls, value: list[str] | None) -> list[str] | None:
        if value is not None and any(not tag.strip() for tag in value):
            raise ValueError("Tag names must not be blank")
        return value


class UpdatePostRequest(BaseModel):
    content: str | None = None
