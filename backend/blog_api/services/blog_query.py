"""Blog Query Builder — request parameters to filter, sort, and page statements.

Invariants:
    - Sort is always created_at DESC, then id DESC (deterministic across pages)
    - theme is an exact match; blank theme means "no theme filter"
    - search_text matches title OR description, case-insensitive literal substring
      (% and _ are escaped, never wildcards)
    - owner_id restricts to author_id == owner_id; None means public scope
    - Page and count statements share one filter list (count never drifts from page)

Design Decisions:
    - Builds SQLAlchemy Select objects but never executes them: BlogService owns IO
    - Author loaded with joinedload (many-to-one, single round trip, no unique() needed)
"""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.orm import joinedload

from blog_api.core.pagination import PageWindow, resolve_window
from blog_api.models.blog_post import BlogPost


@dataclass(frozen=True)
class BlogQuery:
    """Resolved listing/search parameters."""
    window: PageWindow
    theme: str | None = None
    search_text: str | None = None
    owner_id: UUID | None = None

    def filters(self) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if self.owner_id is not None:
            clauses.append(BlogPost.author_id == self.owner_id)
        if self.theme:
            clauses.append(BlogPost.theme == self.theme)
        if self.search_text:
            clauses.append(or_(
                BlogPost.title.icontains(self.search_text, autoescape=True),
                BlogPost.description.icontains(self.search_text, autoescape=True),
            ))
        return clauses

    def page_statement(self) -> Select[tuple[BlogPost]]:
        return (
            select(BlogPost)
            .options(joinedload(BlogPost.author))
            .where(*self.filters())
            .order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
            .offset(self.window.skip)
            .limit(self.window.limit)
        )

    def count_statement(self) -> Select[tuple[int]]:
        return (
            select(func.count())
            .select_from(BlogPost)
            .where(*self.filters())
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_blog_query(
    *,
    page: str | int | None,
    limit: str | int | None,
    default_limit: int,
    max_limit: int,
    theme: str | None = None,
    search_text: str | None = None,
    owner_id: UUID | None = None,
) -> BlogQuery:
    """Resolve raw query-string values into a BlogQuery."""
    return BlogQuery(
        window=resolve_window(page, limit, default_limit, max_limit),
        theme=_blank_to_none(theme),
        search_text=_blank_to_none(search_text),
        owner_id=owner_id,
    )
