"""Translate business errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from services import BusinessError, ErrorCode

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.MEMBER_DOES_NOT_EXISTS: status.HTTP_404_NOT_FOUND,
    ErrorCode.POST_DOES_NOT_EXISTS: status.HTTP_404_NOT_FOUND,
    ErrorCode.HASHTAG_DOES_NOT_EXISTS: status.HTTP_404_NOT_FOUND,
    ErrorCode.ID_IS_DUPLICATE: status.HTTP_409_CONFLICT,
    ErrorCode.POST_CONTENT_IS_REQUIRED: status.HTTP_422_UNPROCESSABLE_CONTENT,
    ErrorCode.CONTENT_MUST_BE_100_LENGTH_OR_LESS: status.HTTP_422_UNPROCESSABLE_CONTENT,
    ErrorCode.LOGIN_FAILED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AUTHENTICATION_REQUIRED: status.HTTP_401_UNAUTHORIZED,
}


def status_for(code: ErrorCode) -> int:
    return ERROR_STATUS.get(code, status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(BusinessError)
    async def business_error_handler(request: Request, exc: BusinessError) -> JSONResponse:
        logger.info(
            "Business error: %s",
            exc.message,
            extra={"error_code": exc.code.value, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status_for(exc.code),
            content={"code": exc.code.value, "detail": exc.message},
        )
