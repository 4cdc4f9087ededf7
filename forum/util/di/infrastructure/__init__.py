"""Swappable infrastructure components.

Importing this package registers the production implementations as
subclasses of their component bases.
"""

from forum.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
