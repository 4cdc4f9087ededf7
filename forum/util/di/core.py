"""Settings provider."""

from dishka import Scope, provide

from forum.config import Settings
from forum.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Reads settings once per container from the environment and .env."""

    @provide(scope=Scope.APP)
    def get_settings(self) -> Settings:
        return Settings()
