"""Storage backends for KingdomForge."""

from .base import CatalogStore, ConfigurationStore, SelectionStore
from .memory import InMemoryCatalogStore, InMemoryConfigurationStore, InMemorySelectionStore

__all__ = [
    "CatalogStore",
    "ConfigurationStore",
    "SelectionStore",
    "InMemoryCatalogStore",
    "InMemoryConfigurationStore",
    "InMemorySelectionStore",
]
