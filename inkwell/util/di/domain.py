"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings, FollowUpSettings
from inkwell.domain.repository import (
    BlogRepository,
    CommentRepository,
    FollowUpRepository,
    NotificationRepository,
    UserRepository,
)
from inkwell.domain.service import (
    BlogService,
    CommentService,
    FollowUpService,
    JWTService,
    LedgerService,
    NotificationService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_blog_service(self, blog_repository: BlogRepository) -> BlogService:
        """Provide blog domain service."""
        return BlogService(blog_repository=blog_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_ledger_service(
        self, blog_repository: BlogRepository, user_repository: UserRepository
    ) -> LedgerService:
        """Provide counter ledger domain service."""
        return LedgerService(
            blog_repository=blog_repository, user_repository=user_repository
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification fan-out domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_follow_up_service(
        self,
        follow_up_repository: FollowUpRepository,
        ledger_service: LedgerService,
        notification_service: NotificationService,
        follow_up_settings: FollowUpSettings,
    ) -> FollowUpService:
        """Provide follow-up domain service."""
        return FollowUpService(
            follow_up_repository=follow_up_repository,
            ledger_service=ledger_service,
            notification_service=notification_service,
            settings=follow_up_settings,
        )
