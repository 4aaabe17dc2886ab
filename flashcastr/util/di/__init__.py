"""Dependency injection module."""

from typing import Type

from flashcastr.util.di.application import ProdApplicationProvider
from flashcastr.util.di.base import Component, ProviderBase
from flashcastr.util.di.core import ProdConfigProvider
from flashcastr.util.di.domain import ProdDomainProvider
from flashcastr.util.di.infrastructure import (
    InvadersProvider,
    NeynarProvider,
    PersistenceProvider,
    ProdInvadersProvider,
    ProdNeynarProvider,
    ProdPersistenceProvider,
)
from flashcastr.util.error import DependencyInjectionError

# Concrete providers are used as-is; mockable components are resolved by
# get_provider to their production or mock subclass
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    NeynarProvider,
    InvadersProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for ``base``.

    - No subclasses: concrete provider, used directly
    - Has subclasses: mockable component, picked by its ``__is_mock__`` flag

    Raises:
        DependencyInjectionError: If the requested implementation is missing
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise DependencyInjectionError(f"No {kind} implementation for {component_name}")

    return impl

__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "get_provider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "InvadersProvider",
    "NeynarProvider",
    "PersistenceProvider",
    "ProdInvadersProvider",
    "ProdNeynarProvider",
    "ProdPersistenceProvider",
]
