"""Blog Service — create, list, fetch, share, and delete blog posts.

Invariants:
    - Every operation is all-or-nothing: commit on success, rollback on failure
    - share is incremented by one UPDATE ... SET share = share + 1 RETURNING share
      (no read-modify-write, concurrent increments never lose updates)
    - A window starting at or past the total returns an empty page without
      running the page query
    - create looks the author up explicitly; a dangling caller id is a 404
    - delete checks ownership (core/authorization.py) before touching the row
    - Returned objects are Pydantic schemas, never live ORM instances

Design Decisions:
    - One class per request (constructed with the request's AsyncSession)
    - synchronize_session=False on the share UPDATE: the service never reads
      the ORM instance after the statement, the RETURNING value is authoritative
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from blog_api.core.authorization import ensure_can_delete
from blog_api.core.domain_types import BlogId, Caller
from blog_api.core.errors import (
    ErrorContext, PersistenceError, ResourceNotFoundError,
)
from blog_api.models.blog_post import BlogPost
from blog_api.models.user import User
from blog_api.schemas.blog import (
    BlogCreate, BlogPage, BlogResponse, ShareResponse,
)
from blog_api.services.blog_query import BlogQuery

logger = logging.getLogger(__name__)


class BlogService:
    """Blog post operations bound to one database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_page(self, query: BlogQuery) -> BlogPage:
        """Run the page and count statements for a listing or search."""
        total = (await self.db.execute(query.count_statement())).scalar_one()
        blogs = []
        # Past the last row: skip the page query, its OFFSET may not fit a BIGINT
        if query.window.skip < total:
            result = await self.db.execute(query.page_statement())
            blogs = result.scalars().all()
        return BlogPage(
            blogs=[BlogResponse.model_validate(b) for b in blogs],
            total_blogs=total,
            total_pages=query.window.total_pages(total),
            current_page=query.window.page,
        )

    async def create(self, caller: Caller, body: BlogCreate) -> BlogResponse:
        """Create a post authored by caller."""
        author = await self.db.get(User, caller.id)
        if author is None:
            raise ResourceNotFoundError(
                "Author", str(caller.id), ErrorContext(user_id=str(caller.id)),
            )

        now = datetime.now(timezone.utc)
        blog = BlogPost(
            title=body.title,
            description=body.description,
            content=body.content,
            theme=body.theme,
            author_id=author.id,
            share=0,
            created_at=now,
            updated_at=now,
        )
        blog.author = author
        self.db.add(blog)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to create blog post: {e}",
                extra={"user_id": str(caller.id)},
            )
            raise PersistenceError(
                "Failed to create blog post",
                ErrorContext(user_id=str(caller.id)),
            ) from e

        logger.info(
            "Blog post created",
            extra={"blog_id": str(blog.id), "user_id": str(caller.id)},
        )
        return BlogResponse.model_validate(blog)

    async def get(self, blog_id: BlogId) -> BlogResponse:
        blog = await self._get_or_404(blog_id)
        return BlogResponse.model_validate(blog)

    async def share(self, blog_id: BlogId) -> ShareResponse:
        """Atomically increment the share counter by one."""
        stmt = (
            update(BlogPost)
            .where(BlogPost.id == blog_id)
            .values(
                share=BlogPost.share + 1,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(BlogPost.share)
            .execution_options(synchronize_session=False)
        )
        new_share = (await self.db.execute(stmt)).scalar_one_or_none()
        if new_share is None:
            await self.db.rollback()
            raise ResourceNotFoundError(
                "Blog post", str(blog_id), ErrorContext(blog_id=str(blog_id)),
            )
        await self.db.commit()
        logger.info("Blog post shared", extra={"blog_id": str(blog_id)})
        return ShareResponse(id=blog_id, share_count=new_share)

    async def delete(self, caller: Caller, blog_id: BlogId) -> BlogResponse:
        """Delete caller's own post and return its last state."""
        blog = await self._get_or_404(blog_id)
        ensure_can_delete(caller, blog.id, blog.author_id)

        snapshot = BlogResponse.model_validate(blog)
        await self.db.delete(blog)
        await self.db.commit()
        logger.info(
            "Blog post deleted",
            extra={"blog_id": str(blog_id), "user_id": str(caller.id)},
        )
        return snapshot

    async def _get_or_404(self, blog_id: UUID) -> BlogPost:
        result = await self.db.execute(
            select(BlogPost)
            .options(joinedload(BlogPost.author))
            .where(BlogPost.id == blog_id),
        )
        blog = result.scalar_one_or_none()
        if not blog:
            raise ResourceNotFoundError(
                "Blog post", str(blog_id), ErrorContext(blog_id=str(blog_id)),
            )
        return blog
