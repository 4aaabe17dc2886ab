"""Invaders infrastructure providers."""

from dishka import Scope, provide

from flashcastr.adapter.invaders import InvadersClient, RealInvadersClient
from flashcastr.config import Settings
from flashcastr.util.di.base import ProviderBase


class InvadersProvider(ProviderBase):
    """Invaders component base."""

    __mock_component__ = "invaders"


class ProdInvadersProvider(InvadersProvider):
    """Production Invaders provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invaders_client(self, settings: Settings) -> InvadersClient:
        return RealInvadersClient(
            base_url=settings.invaders.base_url,
            timeout=settings.invaders.timeout,
        )
