"""Ownership Guard — decides whether a caller may mutate a blog post.

Invariants:
    - Only the stored author may delete a post
    - Comparison is UUID equality on ids, never on usernames
    - Pure: raises or returns, never touches the store
"""

from uuid import UUID

from blog_api.core.domain_types import Caller
from blog_api.core.errors import ErrorContext, ForbiddenError


def is_owner(caller: Caller, author_id: UUID) -> bool:
    return caller.id == author_id


def ensure_can_delete(caller: Caller, blog_id: UUID, author_id: UUID) -> None:
    """Raise ForbiddenError (403) unless caller authored the post."""
    if not is_owner(caller, author_id):
        raise ForbiddenError(
            "You are not authorized to delete this blog",
            ErrorContext(blog_id=str(blog_id), user_id=str(caller.id)),
        )
