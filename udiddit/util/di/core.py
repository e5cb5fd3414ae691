"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from udiddit.config import MigrationSettings, Settings
from udiddit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_migration_settings(self, settings: Settings) -> MigrationSettings:
        """Provide migration settings."""
        return settings.migration
