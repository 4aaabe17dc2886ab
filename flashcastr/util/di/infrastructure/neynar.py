"""Neynar infrastructure providers."""

from dishka import Scope, provide

from flashcastr.adapter.neynar import NeynarClient, RealNeynarClient
from flashcastr.config import Settings
from flashcastr.util.di.base import ProviderBase
from flashcastr.util.error import ConfigurationError


class NeynarProvider(ProviderBase):
    """Neynar component base."""

    __mock_component__ = "neynar"


class ProdNeynarProvider(NeynarProvider):
    """Production Neynar provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_neynar_client(self, settings: Settings) -> NeynarClient:
        """Provide Neynar client.

        Raises:
            ConfigurationError: If the app mnemonic is not configured
        """
        if not settings.neynar.app_mnemonic:
            raise ConfigurationError(
                "Neynar app mnemonic is not configured",
                setting="NEYNAR__APP_MNEMONIC",
            )

        return RealNeynarClient(
            api_key=settings.neynar.api_key,
            app_mnemonic=settings.neynar.app_mnemonic,
            app_fid=settings.neynar.app_fid,
            base_url=settings.neynar.base_url,
            signed_key_ttl=settings.neynar.signed_key_ttl,
            timeout=settings.neynar.timeout,
        )
