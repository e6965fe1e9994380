"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from pawprint.config import FeedSettings, MediaSettings, Settings
from pawprint.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Provide feed settings."""
        return settings.feed

    @provide(scope=Scope.APP)
    def provide_media_settings(self, settings: Settings) -> MediaSettings:
        """Provide media settings."""
        return settings.media
