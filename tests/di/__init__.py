"""Mock providers for testing."""

from .invaders import MockInvadersProvider
from .neynar import MockNeynarProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockInvadersProvider",
    "MockNeynarProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
