"""Get notifications use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.summaries import AuthorSummary
from inkwell.config import PaginationSettings
from inkwell.domain.repository import BlogRepository, CommentRepository
from inkwell.domain.service import NotificationService, UserService
from inkwell.domain.value import CommentId, NotificationFilter, NotificationType, UserId


class NotificationItem(BaseModel):
    """Notification item in response."""

    notification_id: str
    type: NotificationType
    seen: bool
    created_at: datetime
    actor: AuthorSummary
    blog_id: str
    blog_title: str | None = None
    blog_slug: str | None = None
    comment_id: str | None = None
    comment_body: str | None = None
    replied_on_comment_id: str | None = None
    replied_on_comment_body: str | None = None
    reply_id: str | None = None
    reply_body: str | None = None


class GetNotificationsRequest(BaseModel):
    """Get notifications request."""

    recipient_id: str  # User ID from authenticated user
    page: int = Field(default=1, ge=1)
    filter: NotificationFilter = NotificationFilter.ALL
    deleted_count: int = Field(default=0, ge=0)  # Records the client removed locally


class GetNotificationsResponse(BaseModel):
    """Get notifications response."""

    notifications: list[NotificationItem]
    page: int
    filter: NotificationFilter


class GetNotificationsUseCase(BaseUseCase):
    """Use case for reading a page of the notification feed.

    Reading marks the returned records as seen.
    """

    def __init__(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get notifications use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service for actor summaries
            comment_repository: Comment repository for comment bodies
            blog_repository: Blog repository for blog titles
            pagination: Page sizes
        """
        self.notification_service = notification_service
        self.user_service = user_service
        self.comment_repository = comment_repository
        self.blog_repository = blog_repository
        self.pagination = pagination

    async def execute(self, request: GetNotificationsRequest) -> GetNotificationsResponse:
        """Execute get notifications flow.

        The page offset is shifted back by deleted_count so records the client
        already removed do not push unseen ones off the page.

        Args:
            request: Page, filter and local deletion count

        Returns:
            Page of notifications, newest first
        """
        limit = self.pagination.notifications_page_size
        skip = max((request.page - 1) * limit - request.deleted_count, 0)

        with logfire.span(
            "get_notifications.execute",
            recipient_id=request.recipient_id,
            page=request.page,
            filter=request.filter.value,
            skip=skip,
        ):
            notifications = await self.notification_service.list_feed(
                UserId(UUID(request.recipient_id)),
                filter_type=request.filter,
                skip=skip,
                limit=limit,
            )

            comment_ids: set[CommentId] = set()
            for n in notifications:
                comment_ids.update(
                    cid
                    for cid in (n.comment_id, n.replied_on_comment_id, n.reply_id)
                    if cid is not None
                )
            comments = {
                c.id: c
                for c in await self.comment_repository.find_by_ids(list(comment_ids))
            }
            blogs = {
                b.id: b
                for b in await self.blog_repository.find_by_ids(
                    list({n.blog_id for n in notifications})
                )
            }
            actors = await self.user_service.get_by_ids(
                [n.actor_id for n in notifications]
            )

            def body_of(comment_id: CommentId | None) -> str | None:
                comment = comments.get(comment_id) if comment_id else None
                return comment.body if comment else None

            items = []
            for n in notifications:
                blog = blogs.get(n.blog_id)
                items.append(
                    NotificationItem(
                        notification_id=str(n.id),
                        type=n.type,
                        seen=n.seen,
                        created_at=n.created_at,
                        actor=AuthorSummary.of(n.actor_id, actors.get(n.actor_id)),
                        blog_id=str(n.blog_id),
                        blog_title=blog.title if blog else None,
                        blog_slug=blog.slug.root if blog else None,
                        comment_id=str(n.comment_id) if n.comment_id else None,
                        comment_body=body_of(n.comment_id),
                        replied_on_comment_id=(
                            str(n.replied_on_comment_id)
                            if n.replied_on_comment_id
                            else None
                        ),
                        replied_on_comment_body=body_of(n.replied_on_comment_id),
                        reply_id=str(n.reply_id) if n.reply_id else None,
                        reply_body=body_of(n.reply_id),
                    )
                )

            return GetNotificationsResponse(
                notifications=items, page=request.page, filter=request.filter
            )
