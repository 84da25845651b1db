"""Identifier parsing — malformed ids become 400 errors before any query."""

from uuid import uuid4

import pytest

from blog_api.core.errors import InvalidIdentifierError
from blog_api.core.identifiers import parse_blog_id


def test_parses_valid_uuid():
    uid = uuid4()
    assert parse_blog_id(str(uid)) == uid


def test_parses_uuid_with_surrounding_whitespace():
    uid = uuid4()
    assert parse_blog_id(f" {uid} ") == uid


@pytest.mark.parametrize("raw", ["", "not-a-uuid", "64b7f0c2e1a4c3d2b1a09f8e", "123"])
def test_rejects_malformed_ids(raw):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_blog_id(raw)
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == "Invalid blog post ID"
