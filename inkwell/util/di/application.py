"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.blog import (
    GetBlogUseCase,
    IsLikedUseCase,
    LikeBlogUseCase,
    ListBlogsUseCase,
    ListTrendingBlogsUseCase,
    PublishBlogUseCase,
)
from inkwell.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
)
from inkwell.application.usecase.follow_up import DrainFollowUpsUseCase
from inkwell.application.usecase.notification import (
    CountNotificationsUseCase,
    GetNotificationsUseCase,
    HasUnseenUseCase,
)
from inkwell.application.usecase.user import (
    GetUserProfileUseCase,
    SearchUsersUseCase,
)
from inkwell.config import PaginationSettings
from inkwell.domain.repository import BlogRepository, CommentRepository
from inkwell.domain.service import (
    BlogService,
    CommentService,
    FollowUpService,
    NotificationService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        follow_up_service: FollowUpService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            follow_up_service=follow_up_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, follow_up_service: FollowUpService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, follow_up_service=follow_up_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            user_service=user_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            comment_service=comment_service,
            user_service=user_service,
            pagination=pagination,
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_get_notifications_use_case(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        pagination: PaginationSettings,
    ) -> GetNotificationsUseCase:
        """Provide get notifications use case."""
        return GetNotificationsUseCase(
            notification_service=notification_service,
            user_service=user_service,
            comment_repository=comment_repository,
            blog_repository=blog_repository,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_has_unseen_use_case(
        self, notification_service: NotificationService
    ) -> HasUnseenUseCase:
        """Provide unseen notifications check use case."""
        return HasUnseenUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_count_notifications_use_case(
        self, notification_service: NotificationService
    ) -> CountNotificationsUseCase:
        """Provide count notifications use case."""
        return CountNotificationsUseCase(notification_service=notification_service)

    # Blog use cases
    @provide(scope=Scope.REQUEST)
    def get_publish_blog_use_case(
        self, blog_service: BlogService, follow_up_service: FollowUpService
    ) -> PublishBlogUseCase:
        """Provide publish blog use case."""
        return PublishBlogUseCase(
            blog_service=blog_service, follow_up_service=follow_up_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_blog_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        follow_up_service: FollowUpService,
    ) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(
            blog_service=blog_service,
            user_service=user_service,
            follow_up_service=follow_up_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_blogs_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(
            blog_service=blog_service, user_service=user_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_list_trending_blogs_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> ListTrendingBlogsUseCase:
        """Provide list trending blogs use case."""
        return ListTrendingBlogsUseCase(
            blog_service=blog_service, user_service=user_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_like_blog_use_case(
        self,
        blog_service: BlogService,
        notification_service: NotificationService,
        follow_up_service: FollowUpService,
    ) -> LikeBlogUseCase:
        """Provide like blog use case."""
        return LikeBlogUseCase(
            blog_service=blog_service,
            notification_service=notification_service,
            follow_up_service=follow_up_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_is_liked_use_case(
        self, notification_service: NotificationService
    ) -> IsLikedUseCase:
        """Provide is-liked use case."""
        return IsLikedUseCase(notification_service=notification_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_search_users_use_case(
        self, user_service: UserService, pagination: PaginationSettings
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(user_service=user_service, pagination=pagination)

    # Follow-up use cases
    @provide(scope=Scope.REQUEST)
    def get_drain_follow_ups_use_case(
        self, follow_up_service: FollowUpService
    ) -> DrainFollowUpsUseCase:
        """Provide drain follow-ups use case."""
        return DrainFollowUpsUseCase(follow_up_service=follow_up_service)
