"""Blog Routes — listing, search, create, fetch, share, and delete endpoints.

Invariants:
    - Static paths (/public, /post, /all, /search) registered before /{blog_id}
    - page/limit accepted as raw strings: non-numeric values default, never 400
    - theme and query are free-form: no length cap, an unmatched value is an empty page
    - Owner-scoped routes (/all, /search, /post, DELETE) require a bearer token
    - GET /{blog_id} and PUT /{blog_id}/share are public
    - Path ids parsed by core/identifiers.py → 400 on malformed UUID

Design Decisions:
    - Envelope built here with ApiResponse.ok(message=..., data=...): keyword-only
      so message and payload can never trade places
    - Read-by-id and share stay unauthenticated; see DESIGN.md open questions
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from blog_api.config import Settings, get_settings
from blog_api.core.domain_types import Caller
from blog_api.core.errors import MissingSearchQueryError
from blog_api.core.identifiers import parse_blog_id
from blog_api.api.dependencies import get_blog_service, get_current_caller
from blog_api.schemas.blog import BlogCreate, BlogPage, BlogResponse, ShareResponse
from blog_api.schemas.envelope import ApiResponse
from blog_api.services.blog_query import build_blog_query
from blog_api.services.blog_service import BlogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/blogs", tags=["blogs"])


@router.get("/public", response_model=ApiResponse[BlogPage])
async def list_public_blogs(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    theme: str | None = Query(None),
    service: BlogService = Depends(get_blog_service),
    settings: Settings = Depends(get_settings),
):
    """List every post, newest first."""
    query = build_blog_query(
        page=page, limit=limit, theme=theme,
        default_limit=settings.public_page_size,
        max_limit=settings.max_page_size,
    )
    result = await service.list_page(query)
    return ApiResponse.ok(
        message="All public blogs fetched successfully", data=result,
    )


@router.post(
    "/post", response_model=ApiResponse[BlogResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    body: BlogCreate,
    caller: Caller = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
):
    """Create a post authored by the caller."""
    blog = await service.create(caller, body)
    return ApiResponse.ok(
        message="Blog post created successfully", data=blog,
        status=status.HTTP_201_CREATED,
    )


@router.get("/all", response_model=ApiResponse[BlogPage])
async def list_own_blogs(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    theme: str | None = Query(None),
    caller: Caller = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
    settings: Settings = Depends(get_settings),
):
    """List the caller's own posts."""
    query = build_blog_query(
        page=page, limit=limit, theme=theme, owner_id=caller.id,
        default_limit=settings.owner_page_size,
        max_limit=settings.max_page_size,
    )
    result = await service.list_page(query)
    return ApiResponse.ok(message="Blogs fetched successfully", data=result)


@router.get("/search", response_model=ApiResponse[BlogPage])
async def search_own_blogs(
    query: str | None = Query(None),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    theme: str | None = Query(None),
    caller: Caller = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
    settings: Settings = Depends(get_settings),
):
    """Search the caller's posts by title or description."""
    if not query or not query.strip():
        raise MissingSearchQueryError()
    blog_query = build_blog_query(
        page=page, limit=limit, theme=theme, search_text=query,
        owner_id=caller.id,
        default_limit=settings.public_page_size,
        max_limit=settings.max_page_size,
    )
    result = await service.list_page(blog_query)
    return ApiResponse.ok(message="Blogs fetched successfully", data=result)


@router.get("/{blog_id}", response_model=ApiResponse[BlogResponse])
async def get_blog(
    blog_id: str, service: BlogService = Depends(get_blog_service),
):
    """Fetch one post."""
    blog = await service.get(parse_blog_id(blog_id))
    return ApiResponse.ok(message="Blog post fetched successfully", data=blog)


@router.put("/{blog_id}/share", response_model=ApiResponse[ShareResponse])
async def share_blog(
    blog_id: str, service: BlogService = Depends(get_blog_service),
):
    """Increment a post's share counter."""
    shared = await service.share(parse_blog_id(blog_id))
    return ApiResponse.ok(message="Blog post shared successfully", data=shared)


@router.delete("/{blog_id}", response_model=ApiResponse[BlogResponse])
async def delete_blog(
    blog_id: str,
    caller: Caller = Depends(get_current_caller),
    service: BlogService = Depends(get_blog_service),
):
    """Delete one of the caller's own posts."""
    deleted = await service.delete(caller, parse_blog_id(blog_id))
    return ApiResponse.ok(message="Blog post deleted successfully", data=deleted)
