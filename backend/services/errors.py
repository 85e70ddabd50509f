"""Business error taxonomy shared by every service."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    MEMBER_DOES_NOT_EXISTS = "MEMBER_DOES_NOT_EXISTS"
    POST_DOES_NOT_EXISTS = "POST_DOES_NOT_EXISTS"
    ID_IS_DUPLICATE = "ID_IS_DUPLICATE"
    HASHTAG_DOES_NOT_EXISTS = "HASHTAG_DOES_NOT_EXISTS"
    POST_CONTENT_IS_REQUIRED = "POST_CONTENT_IS_REQUIRED"
    CONTENT_MUST_BE_100_LENGTH_OR_LESS = "CONTENT_MUST_BE_100_LENGTH_OR_LESS"
    LOGIN_FAILED = "LOGIN_FAILED"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"


class BusinessError(Exception):
    """A domain failure with a stable code and a human-readable message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"BusinessError(code={self.code.value!r}, message={self.message!r})"


__all__ = ["BusinessError", "ErrorCode"]
