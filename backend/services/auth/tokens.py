"""Bearer token verification and identity resolution."""

from __future__ import annotations

from dataclasses import dataclass

from core import decode_token
from core.security import ACCESS_TOKEN_TYPE

MEMBER_AUTHORITY = "ROLE_MEMBER"


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Caller identity attached to a single request."""

    member_id: int
    authorities: tuple[str, ...] = (MEMBER_AUTHORITY,)

    def has_authority(self, authority: str) -> bool:
        return authority in self.authorities


def validate_token(token: str) -> bool:
    """Return True when the token's signature and expiry check out."""
    try:
        payload = decode_token(token)
    except ValueError:
        return False
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        return False
    subject = payload.get("sub")
    return isinstance(subject, str) and subject.strip() != ""


def parse_subject(token: str) -> str:
    """Return the subject claim; callers must run validate_token first."""
    subject = decode_token(token).get("sub")
    if not isinstance(subject, str):
        raise ValueError("Token has no subject")
    return subject.strip()


def build_identity(subject: str) -> AuthenticatedIdentity:
    try:
        member_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Unsupported token subject: {subject!r}") from exc
    if member_id <= 0:
        raise ValueError(f"Unsupported token subject: {subject!r}")
    return AuthenticatedIdentity(member_id=member_id)
