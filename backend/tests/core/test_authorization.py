"""Ownership Guard — only the stored author may delete."""

from uuid import uuid4

import pytest

from blog_api.core.authorization import ensure_can_delete, is_owner
from blog_api.core.domain_types import Caller, UserId
from blog_api.core.errors import ForbiddenError


def test_author_is_owner():
    uid = uuid4()
    assert is_owner(Caller(id=UserId(uid), username="u"), uid)


def test_other_user_is_not_owner():
    assert not is_owner(Caller(id=UserId(uuid4()), username="u"), uuid4())


def test_same_username_different_id_is_not_owner():
    author_id = uuid4()
    impostor = Caller(id=UserId(uuid4()), username="alice")
    assert not is_owner(impostor, author_id)


def test_ensure_can_delete_passes_for_author():
    uid = uuid4()
    ensure_can_delete(Caller(id=UserId(uid), username="u"), uuid4(), uid)


def test_ensure_can_delete_raises_forbidden_for_non_author():
    blog_id = uuid4()
    caller = Caller(id=UserId(uuid4()), username="u")
    with pytest.raises(ForbiddenError) as exc_info:
        ensure_can_delete(caller, blog_id, uuid4())
    assert exc_info.value.http_status == 403
    assert exc_info.value.context.blog_id == str(blog_id)
