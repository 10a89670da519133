"""Top level application object for KingdomForge randomizers."""

from __future__ import annotations

from random import Random
from typing import Any

from .config import KingdomForgeConfig
from .domain.draw import DrawStrategy, WeightedDraw
from .domain.engine import SelectionEngine
from .domain.events import EventBus
from .domain.shuffle import ShuffleService
from .registry import CardRegistry
from .storage.base import CatalogStore, ConfigurationStore, SelectionStore
from .storage.memory import InMemoryCatalogStore, InMemoryConfigurationStore, InMemorySelectionStore


class RandomizerApp:
    """Central dependency container used by front-ends and tooling."""

    def __init__(
        self,
        config: KingdomForgeConfig,
        *,
        catalog_store: CatalogStore | None = None,
        configuration_store: ConfigurationStore | None = None,
        selection_store: SelectionStore | None = None,
        event_bus: EventBus | None = None,
        rng: Random | None = None,
        draw: DrawStrategy | None = None,
    ) -> None:
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.cards = CardRegistry()

        self._rng = rng or (Random(config.rng_seed) if config.rng_seed is not None else Random())

        self.catalog_store = catalog_store or InMemoryCatalogStore(self.cards.catalog)
        self.configuration_store = configuration_store or InMemoryConfigurationStore(
            config.shuffle.to_configuration()
        )
        self.selection_store = selection_store or InMemorySelectionStore()

        self.engine = SelectionEngine(draw or WeightedDraw(self._rng))
        self.shuffle_service = ShuffleService(
            engine=self.engine,
            catalog_store=self.catalog_store,
            configuration_store=self.configuration_store,
            selection_store=self.selection_store,
            event_bus=self.event_bus,
        )

    @property
    def rng(self) -> Random:
        return self._rng

    def snapshot(self) -> dict[str, Any]:
        """Export current configuration for debugging."""
        shuffle = self.config.shuffle
        return {
            "catalog_path": self.config.catalog_path,
            "expansions": [exp.expansion_id for exp in self.cards.catalog.iter_expansions()],
            "cards": [card.card_id for card in self.cards.catalog.iter_cards()],
            "enabled_expansions": list(shuffle.expansions),
            "special_cards": {
                "events": shuffle.events,
                "landmarks": shuffle.landmarks,
                "projects": shuffle.projects,
                "ways": shuffle.ways,
            },
            "cost_distribution": dict(shuffle.cost_distribution),
        }
