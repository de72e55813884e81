"""Blog routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.blog import (
    GetBlogRequest,
    GetBlogResponse,
    GetBlogUseCase,
    IsLikedRequest,
    IsLikedResponse,
    IsLikedUseCase,
    LikeBlogRequest,
    LikeBlogResponse,
    LikeBlogUseCase,
    ListBlogsRequest,
    ListBlogsResponse,
    ListBlogsUseCase,
    ListTrendingBlogsRequest,
    ListTrendingBlogsResponse,
    ListTrendingBlogsUseCase,
    PublishBlogRequest,
    PublishBlogResponse,
    PublishBlogUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.domain.value import BlogMode

router = APIRouter(prefix="/blogs", tags=["blogs"], route_class=DishkaRoute)


class PublishBlogAPIRequest(BaseModel):
    """API request for publishing or saving a blog."""

    title: str
    description: str = ""
    banner_url: str | None = None
    content: dict[str, Any] = Field(default_factory=lambda: {"blocks": []})
    tags: list[str] = Field(default_factory=list)
    draft: bool = False
    blog_id: UUID | None = None  # Existing blog to update


@router.post("", response_model=PublishBlogResponse)
async def publish_blog(
    request: PublishBlogAPIRequest,
    publish_blog_use_case: FromDishka[PublishBlogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PublishBlogResponse:
    """Publish a blog, save a draft, or update an existing blog.

    Requires authentication. Only the author can update a blog.

    Args:
        request: Blog data
        publish_blog_use_case: Publish blog use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Saved blog id, slug and publication state
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to publish blogs",
        )

    return await publish_blog_use_case.execute(
        PublishBlogRequest(author_id=user_id, **request.model_dump(mode="json"))
    )


@router.get("", response_model=ListBlogsResponse)
async def list_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
    page: int = Query(default=1, ge=1),
    tag: str | None = None,
    author_id: UUID | None = None,
) -> ListBlogsResponse:
    """List published blogs, newest first.

    Args:
        list_blogs_use_case: List blogs use case from DI
        page: 1-based page number
        tag: Filter by tag name (optional)
        author_id: Filter by author (optional)

    Returns:
        Page of blogs and the total number of matches
    """
    return await list_blogs_use_case.execute(
        ListBlogsRequest(
            page=page,
            tag=tag,
            author_id=str(author_id) if author_id else None,
        )
    )


@router.get("/trending", response_model=ListTrendingBlogsResponse)
async def list_trending_blogs(
    list_trending_blogs_use_case: FromDishka[ListTrendingBlogsUseCase],
) -> ListTrendingBlogsResponse:
    """List the most read published blogs.

    Declared before /{slug} so "trending" is not read as a slug.
    """
    return await list_trending_blogs_use_case.execute(ListTrendingBlogsRequest())


@router.get("/{slug}", response_model=GetBlogResponse)
async def get_blog(
    slug: str,
    get_blog_use_case: FromDishka[GetBlogUseCase],
    jwt_service: FromDishka[JWTService],
    mode: BlogMode = Query(default=BlogMode.READ),
    auth_token: str | None = Cookie(default=None),
) -> GetBlogResponse:
    """Get a blog by slug.

    Opening a published blog in read mode counts as a read. Drafts are
    visible to their author only.

    Args:
        slug: Blog slug
        get_blog_use_case: Get blog use case from DI
        jwt_service: JWT service for token verification (injected)
        mode: "read" or "edit"
        auth_token: JWT token from cookie (optional)

    Returns:
        Blog with author summary and activity counters
    """
    # None for anonymous callers and invalid tokens
    caller_id = jwt_service.get_user_id_from_token(auth_token)

    return await get_blog_use_case.execute(
        GetBlogRequest(slug=slug, caller_id=caller_id, mode=mode)
    )


@router.get("/{blog_id}/like", response_model=IsLikedResponse)
async def is_liked(
    blog_id: UUID,
    is_liked_use_case: FromDishka[IsLikedUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> IsLikedResponse:
    """Whether the caller likes a blog. Anonymous callers never do."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        return IsLikedResponse(liked_by_user=False)

    return await is_liked_use_case.execute(
        IsLikedRequest(blog_id=str(blog_id), actor_id=user_id)
    )


async def _set_like(
    blog_id: UUID,
    like: bool,
    like_blog_use_case: LikeBlogUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> LikeBlogResponse:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to like blogs",
        )

    return await like_blog_use_case.execute(
        LikeBlogRequest(blog_id=str(blog_id), actor_id=user_id, like=like)
    )


@router.post("/{blog_id}/like", response_model=LikeBlogResponse)
async def like_blog(
    blog_id: UUID,
    like_blog_use_case: FromDishka[LikeBlogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeBlogResponse:
    """Like a blog. Liking twice changes nothing."""
    return await _set_like(
        blog_id, True, like_blog_use_case, jwt_service, auth_token
    )


@router.delete("/{blog_id}/like", response_model=LikeBlogResponse)
async def unlike_blog(
    blog_id: UUID,
    like_blog_use_case: FromDishka[LikeBlogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeBlogResponse:
    """Remove the caller's like from a blog."""
    return await _set_like(
        blog_id, False, like_blog_use_case, jwt_service, auth_token
    )
