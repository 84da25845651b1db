"""Request Dependencies — bearer authentication and per-request services.

Invariants:
    - get_current_caller never touches the database: the token is the identity
    - Every auth failure is an AuthenticationError (401 envelope), never a bare HTTPException
    - sub must parse as a UUID

Design Decisions:
    - Header parsing split from token decoding so both are testable in isolation
"""

from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.domain_types import Caller, UserId
from blog_api.core.errors import AuthenticationError
from blog_api.infrastructure import security
from blog_api.infrastructure.database import get_db
from blog_api.services.blog_service import BlogService


def extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise AuthenticationError("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise AuthenticationError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise AuthenticationError("Authorization must be: Bearer <token>.")
    return token


def caller_from_token(token: str) -> Caller:
    try:
        payload = security.decode_access_token(token)
    except security.AuthSecurityError as exc:
        raise AuthenticationError(str(exc)) from exc

    subject = str(payload.get("sub") or "").strip()
    try:
        user_id = UserId(UUID(subject))
    except ValueError as exc:
        raise AuthenticationError("Invalid access token subject.") from exc

    return Caller(id=user_id, username=str(payload.get("username") or ""))


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return extract_bearer_token(authorization)


async def get_current_caller(access_token: str = Depends(get_bearer_token)) -> Caller:
    return caller_from_token(access_token)


async def get_blog_service(db: AsyncSession = Depends(get_db)) -> BlogService:
    return BlogService(db)
