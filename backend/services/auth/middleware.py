"""Request middleware that attaches the bearer-token identity to request state."""

from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .tokens import AuthenticatedIdentity, build_identity, parse_subject, validate_token

AUTHORIZATION_HEADER = "authorization"
BEARER_PREFIX = "Bearer "
IDENTITY_STATE_KEY = "identity"

logger = logging.getLogger(__name__)


def resolve_identity(authorization: str | None) -> AuthenticatedIdentity | None:
    """Map an Authorization header value to an identity, or None when unusable."""
    if not authorization:
        return None
    if not authorization.startswith(BEARER_PREFIX):
        return None

    token = authorization[len(BEARER_PREFIX):]
    if not validate_token(token):
        logger.debug("Ignoring invalid bearer token")
        return None

    try:
        return build_identity(parse_subject(token))
    except ValueError as exc:
        logger.debug("Ignoring bearer token with unresolvable subject", exc_info=exc)
        return None


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Never rejects a request; operations decide whether they need an identity."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        identity = resolve_identity(request.headers.get(AUTHORIZATION_HEADER))
        setattr(request.state, IDENTITY_STATE_KEY, identity)
        return await call_next(request)


def identity_from_request(request: Request) -> AuthenticatedIdentity | None:
    return getattr(request.state, IDENTITY_STATE_KEY, None)
