"""User ORM — the author record referenced by blog posts.

Invariants:
    - id is UUID primary key
    - username is unique and non-nullable

Design Decisions:
    - No password or profile columns: the authentication service owns the
      user lifecycle, this table only backs author lookups and username expansion
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from blog_api.db.base import Base


class User(Base):
    """Blog author."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
