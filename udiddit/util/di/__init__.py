"""Dependency injection module."""

from typing import Type

from udiddit.util.di.application import ProdApplicationProvider
from udiddit.util.di.base import Component, ProviderBase
from udiddit.util.di.core import ProdConfigProvider
from udiddit.util.di.domain import ProdDomainProvider
from udiddit.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from udiddit.util.error import DependencyInjectionError

# Order matters only for readability; dishka resolves by type
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # mockable
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry of PROVIDERS to the class to instantiate.

    A base without subclasses is concrete and returned as-is. A mockable
    component base is replaced by its subclass whose ``__is_mock__`` matches
    ``use_mock``.

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
