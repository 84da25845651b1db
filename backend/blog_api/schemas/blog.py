"""Blog Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - BlogCreate: title, description, content, theme required, stripped, non-empty
    - theme is free-form (max 50 chars, matches the column); no enum check
    - BlogResponse.author exposes only id and username
    - BlogPage.total_pages == ceil(total_blogs / limit), computed by the service

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
    - alias_generator=to_camel on responses: frontend reads totalBlogs/createdAt
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from blog_api.core.domain_types import KnownTheme


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class BlogCreate(BaseModel):
    """Blog creation — all four fields required and non-blank."""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    content: str = Field(min_length=1)
    theme: str = Field(
        min_length=1, max_length=50,
        examples=[t.value for t in KnownTheme],
    )

    @field_validator("title", "description", "content", "theme")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v


class AuthorSummary(_CamelModel):
    """Author expansion — username only, plus id for ownership checks client-side."""
    id: UUID
    username: str


class BlogResponse(_CamelModel):
    """Public-facing blog post."""
    id: UUID
    title: str
    description: str
    content: str
    theme: str
    author: AuthorSummary
    share: int
    created_at: datetime
    updated_at: datetime


class BlogPage(_CamelModel):
    """One page of a listing or search."""
    blogs: list[BlogResponse]
    total_blogs: int
    total_pages: int
    current_page: int


class ShareResponse(_CamelModel):
    """Share-increment result."""
    id: UUID
    share_count: int
