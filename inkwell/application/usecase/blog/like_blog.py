"""Like / unlike blog use case."""

from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import (
    BlogService,
    FollowUpService,
    NotificationService,
    delta_follow_up,
)
from inkwell.domain.value import BlogId, CounterField, EntityRef, UserId


class LikeBlogRequest(BaseModel):
    """Like or unlike request."""

    blog_id: str  # UUID string
    actor_id: str  # User ID from authenticated user
    like: bool = True  # False to unlike


class LikeBlogResponse(BaseModel):
    """Like or unlike response."""

    liked_by_user: bool
    changed: bool


class LikeBlogUseCase(BaseUseCase):
    """Use case for liking and unliking a blog.

    Likes are a toggle: the like record is the primary write and only an
    actual change of state moves total_likes.
    """

    def __init__(
        self,
        blog_service: BlogService,
        notification_service: NotificationService,
        follow_up_service: FollowUpService,
    ) -> None:
        """Initialize like blog use case.

        Args:
            blog_service: Blog domain service
            notification_service: Notification domain service (like records)
            follow_up_service: Follow-up domain service
        """
        self.blog_service = blog_service
        self.notification_service = notification_service
        self.follow_up_service = follow_up_service

    async def execute(self, request: LikeBlogRequest) -> LikeBlogResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the blog is missing or a draft
        """
        blog_id = BlogId(UUID(request.blog_id))
        actor_id = UserId(UUID(request.actor_id))

        with logfire.span(
            "like_blog.execute",
            blog_id=request.blog_id,
            actor_id=request.actor_id,
            like=request.like,
        ):
            blog = await self.blog_service.get_published(blog_id)

            if request.like:
                changed = await self.notification_service.notify_like(
                    blog.id, blog.author_id, actor_id
                )
            else:
                changed = await self.notification_service.retract_like(
                    blog.id, actor_id
                )

            if changed:
                action = "like" if request.like else "unlike"
                await self.follow_up_service.record_and_dispatch(
                    [
                        delta_follow_up(
                            f"blog:{blog.id}:{action}:{actor_id}:{uuid4().hex}",
                            EntityRef.blog(blog.id),
                            CounterField.TOTAL_LIKES,
                            1 if request.like else -1,
                        )
                    ]
                )

            return LikeBlogResponse(liked_by_user=request.like, changed=changed)
