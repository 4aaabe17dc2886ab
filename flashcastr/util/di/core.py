"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from flashcastr.config import (
    AuthSettings,
    CacheSettings,
    IpfsSettings,
    SecuritySettings,
    Settings,
    SignupSettings,
)
from flashcastr.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and their sections, loaded once from the environment."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_security_settings(self, settings: Settings) -> SecuritySettings:
        return settings.security

    @provide
    def provide_signup_settings(self, settings: Settings) -> SignupSettings:
        return settings.signup

    @provide
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        return settings.cache

    @provide
    def provide_ipfs_settings(self, settings: Settings) -> IpfsSettings:
        return settings.ipfs
