"""Authentication domain services."""

from .middleware import (
    AuthenticationMiddleware,
    identity_from_request,
    resolve_identity,
)
from .tokens import (
    MEMBER_AUTHORITY,
    AuthenticatedIdentity,
    build_identity,
    parse_subject,
    validate_token,
)

__all__ = [
    "AuthenticationMiddleware",
    "identity_from_request",
    "resolve_identity",
    "MEMBER_AUTHORITY",
    "AuthenticatedIdentity",
    "build_identity",
    "parse_subject",
    "validate_token",
]
