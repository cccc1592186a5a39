"""Mock providers for testing."""

from .persistence import MockPersistenceProvider, SwappablePersistenceProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "SwappablePersistenceProvider",
    "build_test_container",
]
