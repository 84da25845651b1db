"""Identifier parsing — path ids validated before any store access."""

from uuid import UUID

from blog_api.core.domain_types import BlogId
from blog_api.core.errors import ErrorContext, InvalidIdentifierError


def parse_blog_id(raw: str) -> BlogId:
    """Parse a path segment into a BlogId or raise InvalidIdentifierError (400)."""
    try:
        return BlogId(UUID(raw.strip()))
    except (ValueError, AttributeError):
        raise InvalidIdentifierError(
            "blog post", raw, ErrorContext(blog_id=raw),
        )
