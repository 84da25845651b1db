"""BlogPost ORM — persists a single blog post and its share counter.

Invariants:
    - author_id is set at creation and never reassigned
    - share starts at 0 and is only ever incremented (in SQL, never in Python)
    - created_at is immutable; updated_at moves on share-increment
    - theme is a free-form tag (no CHECK constraint)

Design Decisions:
    - author relationship lazy="raise": every query states its own loading
      strategy (joinedload) so async code never triggers an implicit load
    - Indexes on author_id, theme, created_at: the three listing filters/sorts
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from blog_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BlogPost(Base):
    """Blog post entity."""
    __tablename__ = "blog_posts"
    __table_args__ = (
        CheckConstraint("share >= 0", name="ck_blog_posts_share_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    theme: Mapped[str] = mapped_column(
        String(50), nullable=False, index=True,
    )
    author_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    share: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )

    # Relationships
    author: Mapped["User"] = relationship(
        "User", lazy="raise",
    )
