"""Blog use cases."""

from .get_blog import GetBlogRequest, GetBlogResponse, GetBlogUseCase
from .is_liked import IsLikedRequest, IsLikedResponse, IsLikedUseCase
from .like_blog import LikeBlogRequest, LikeBlogResponse, LikeBlogUseCase
from .list_blogs import (
    BlogListItem,
    ListBlogsRequest,
    ListBlogsResponse,
    ListBlogsUseCase,
)
from .list_trending_blogs import (
    ListTrendingBlogsRequest,
    ListTrendingBlogsResponse,
    ListTrendingBlogsUseCase,
    TrendingBlogItem,
)
from .publish_blog import (
    PublishBlogRequest,
    PublishBlogResponse,
    PublishBlogUseCase,
)

__all__ = [
    "BlogListItem",
    "GetBlogRequest",
    "GetBlogResponse",
    "GetBlogUseCase",
    "IsLikedRequest",
    "IsLikedResponse",
    "IsLikedUseCase",
    "LikeBlogRequest",
    "LikeBlogResponse",
    "LikeBlogUseCase",
    "ListBlogsRequest",
    "ListBlogsResponse",
    "ListBlogsUseCase",
    "ListTrendingBlogsRequest",
    "ListTrendingBlogsResponse",
    "ListTrendingBlogsUseCase",
    "PublishBlogRequest",
    "PublishBlogResponse",
    "PublishBlogUseCase",
    "TrendingBlogItem",
]
