"""Bearer authentication — header parsing and token validation.

Invariants:
    - Missing header, wrong scheme, bad signature, expired, wrong type,
      non-UUID subject → 401 envelope
    - A valid token resolves to Caller(id, username) without a DB lookup
"""

import time
from uuid import uuid4

import jwt
import pytest

from blog_api.api.dependencies import caller_from_token, extract_bearer_token
from blog_api.config import get_settings
from blog_api.core.errors import AuthenticationError
from blog_api.infrastructure.security import build_access_token

OWN = "/api/v1/blogs/all"


def _sign(payload: dict, secret: str | None = None) -> str:
    settings = get_settings()
    return jwt.encode(
        payload, secret or settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("bearer   abc ") == "abc"


@pytest.mark.parametrize("header", [None, "", "Bearer", "Basic abc", "Bearer  "])
def test_extract_rejects_bad_headers(header):
    with pytest.raises(AuthenticationError):
        extract_bearer_token(header)


def test_caller_from_valid_token():
    uid = uuid4()
    caller = caller_from_token(build_access_token(user_id=uid, username="alice"))
    assert caller.id == uid
    assert caller.username == "alice"


def test_caller_from_expired_token():
    token = build_access_token(user_id=uuid4(), username="a", expires_in_minutes=-1)
    with pytest.raises(AuthenticationError) as exc_info:
        caller_from_token(token)
    assert "expired" in exc_info.value.message


def test_caller_from_wrong_signature():
    now = int(time.time())
    token = _sign(
        {"sub": str(uuid4()), "type": "access", "iat": now, "exp": now + 60},
        secret="some-other-secret",
    )
    with pytest.raises(AuthenticationError):
        caller_from_token(token)


def test_caller_from_refresh_type_token():
    now = int(time.time())
    token = _sign({"sub": str(uuid4()), "type": "refresh", "iat": now, "exp": now + 60})
    with pytest.raises(AuthenticationError):
        caller_from_token(token)


def test_caller_from_non_uuid_subject():
    now = int(time.time())
    token = _sign({"sub": "42", "type": "access", "iat": now, "exp": now + 60})
    with pytest.raises(AuthenticationError) as exc_info:
        caller_from_token(token)
    assert exc_info.value.message == "Invalid access token subject."


async def test_route_rejects_malformed_header(client):
    res = await client.get(OWN, headers={"Authorization": "Token abc"})
    assert res.status_code == 401
    body = res.json()
    assert body["success"] is False
    assert body["data"] is None


async def test_route_rejects_garbage_token(client):
    res = await client.get(OWN, headers={"Authorization": "Bearer garbage"})
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid access token."
