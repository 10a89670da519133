"""Storage abstractions used by the KingdomForge services."""

from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.cards import Card, CardType, Expansion
from ..domain.configuration import Configuration
from ..domain.selection import Selection


class CatalogStore(Protocol):
    async def find_randomizable_kingdom_cards(self) -> Sequence[Card]:
        ...

    async def find_by_card_type(self, card_type: CardType) -> Sequence[Card]:
        ...

    async def find_expansions(self) -> Sequence[Expansion]:
        ...


class ConfigurationStore(Protocol):
    async def get(self) -> Configuration:
        ...

    async def save(self, configuration: Configuration) -> None:
        ...


class SelectionStore(Protocol):
    async def get(self) -> Selection:
        ...

    async def replace(self, selection: Selection) -> None:
        ...

    async def replace_card(self, old_card: Card, new_card: Card) -> Selection:
        ...
