"""Mock Invaders providers for testing."""

from dishka import Scope, provide

from flashcastr.adapter.invaders import InvadersClient, MockInvadersClient
from flashcastr.util.di.infrastructure.invaders import InvadersProvider


class MockInvadersProvider(InvadersProvider):
    """Mock Invaders provider with an empty flash catalog."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invaders_client(self) -> InvadersClient:
        return MockInvadersClient()
