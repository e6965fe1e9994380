"""Dependency injection wiring.

``PROVIDERS`` lists provider bases. Plain providers are used as they are.
A base with subclasses is a swappable component (only persistence today):
production code picks the subclass with ``__is_mock__ = False``, tests may
pick the in-memory one from ``tests.di``.
"""

from typing import Type

from pawprint.util.di.application import ProdApplicationProvider
from pawprint.util.di.base import Component, ProviderBase
from pawprint.util.di.core import ProdConfigProvider
from pawprint.util.di.domain import ProdDomainProvider
from pawprint.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the mock implementation of a swappable component

    Returns:
        Provider class

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
