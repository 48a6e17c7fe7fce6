"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from logus.config import AuthSettings, Settings
from logus.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider.

    Settings are loaded once per container from the environment and .env.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
