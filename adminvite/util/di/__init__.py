"""Dependency injection module."""

from typing import Type

from adminvite.util.di.application import ProdApplicationProvider
from adminvite.util.di.base import Component, ProviderBase
from adminvite.util.di.core import ProdConfigProvider
from adminvite.util.di.domain import ProdDomainProvider
from adminvite.util.di.infrastructure import (
    EmailProvider,
    MockEmailProvider,
    MockPersistenceProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    EmailProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry of PROVIDERS to the class to instantiate.

    Concrete providers are returned as they are. For a mockable component
    the subclass whose ``__is_mock__`` matches ``use_mock`` is returned.

    Raises:
        ValueError: If the component has no such implementation
    """
    if not base.is_mockable():
        return base

    for impl in base.implementations():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "EmailProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "MockEmailProvider",
    "MockPersistenceProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]
