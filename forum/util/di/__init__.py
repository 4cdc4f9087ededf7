"""Dependency wiring.

``PROVIDERS`` lists one entry per concern. Plain entries are used as they
are; swappable entries (``PersistenceProvider``) are resolved to their
production or mock subclass by :func:`get_provider`.
"""

from typing import Type

from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ConfigProvider
from forum.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from forum.util.di.repository import RepositoryProvider

PROVIDERS: tuple[Type[ProviderBase], ...] = (
    ConfigProvider,
    RepositoryProvider,
    PersistenceProvider,
)


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Whether a swappable component should use its mock

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if not base.is_swappable():
        return base

    for impl in base.implementations():
        if impl.__is_mock__ is use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


def swappable_components() -> set[Component]:
    """Names of the components that can be replaced by mocks."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_swappable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "swappable_components",
    "ConfigProvider",
    "RepositoryProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
