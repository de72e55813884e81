"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from inkwell.config import (
    AuthSettings,
    FollowUpSettings,
    PaginationSettings,
    Settings,
)
from inkwell.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide page sizes."""
        return settings.pagination

    @provide(scope=Scope.APP)
    def provide_follow_up_settings(self, settings: Settings) -> FollowUpSettings:
        """Provide follow-up retry settings."""
        return settings.follow_ups
