"""Access Tokens — JWT encode/decode for bearer authentication.

Invariants:
    - Only tokens with type == "access" are accepted
    - sub carries the user UUID as a string; username travels alongside
    - Every decode failure surfaces as AuthSecurityError (never a jwt.* exception)

Design Decisions:
    - PyJWT with a shared HMAC secret: the authentication service mints tokens,
      this API only verifies them
    - build_access_token kept here so the issuing contract lives next to the
      verifying one (tests and local tooling mint tokens through it)
"""

import time
from typing import Any
from uuid import UUID

import jwt

from blog_api.config import get_settings


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def build_access_token(
    *, user_id: UUID, username: str, expires_in_minutes: int | None = None,
) -> str:
    settings = get_settings()
    issued_at = now_epoch_s()
    minutes = (
        settings.access_token_expire_minutes
        if expires_in_minutes is None else expires_in_minutes
    )
    payload = {
        "sub": str(user_id),
        "username": username,
        "type": "access",
        "iat": issued_at,
        "exp": issued_at + minutes * 60,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    settings = get_settings()
    try:
        payload = jwt.decode(raw, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    token_type = str(payload.get("type") or "").strip().lower()
    if token_type != "access":
        raise AuthSecurityError("Token is not an access token.")

    return payload
