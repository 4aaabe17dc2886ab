"""Infrastructure providers."""

# Bases
from .invaders import InvadersProvider
from .neynar import NeynarProvider
from .persistence import PersistenceProvider

# Implementations (needed for __subclasses__())
from .invaders import ProdInvadersProvider  # noqa: F401
from .neynar import ProdNeynarProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "InvadersProvider",
    "NeynarProvider",
    "PersistenceProvider",
    "ProdInvadersProvider",
    "ProdNeynarProvider",
    "ProdPersistenceProvider",
]
