"""In-memory storage backend for KingdomForge."""

from __future__ import annotations

from collections import deque
from typing import Deque, Sequence

from ..domain.cards import Card, CardCatalog, CardType, Expansion
from ..domain.configuration import Configuration
from ..domain.selection import Selection
from .base import CatalogStore, ConfigurationStore, SelectionStore


class InMemoryCatalogStore(CatalogStore):
    """Serve card pools straight from a registered ``CardCatalog``."""

    def __init__(self, catalog: CardCatalog) -> None:
        self._catalog = catalog

    async def find_randomizable_kingdom_cards(self) -> Sequence[Card]:
        return self._catalog.randomizable_kingdom_cards()

    async def find_by_card_type(self, card_type: CardType) -> Sequence[Card]:
        return self._catalog.cards_of_type(card_type)

    async def find_expansions(self) -> Sequence[Expansion]:
        return list(self._catalog.iter_expansions())


class InMemoryConfigurationStore(ConfigurationStore):
    def __init__(self, configuration: Configuration | None = None) -> None:
        self._configuration = configuration or Configuration()

    async def get(self) -> Configuration:
        return self._configuration

    async def save(self, configuration: Configuration) -> None:
        self._configuration = configuration


class InMemorySelectionStore(SelectionStore):
    def __init__(self, *, maxlen: int = 50) -> None:
        self._current = Selection.empty()
        self._history: Deque[Selection] = deque(maxlen=maxlen)

    async def get(self) -> Selection:
        return self._current

    async def replace(self, selection: Selection) -> None:
        self._history.append(self._current)
        self._current = selection

    async def replace_card(self, old_card: Card, new_card: Card) -> Selection:
        updated = self._current.replace_card(old_card, new_card)
        self._history.append(self._current)
        self._current = updated
        return updated

    def history(self) -> list[Selection]:
        """Previous selections, oldest first."""
        return list(self._history)
