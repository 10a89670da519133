"""Runtime registry for cards and expansions."""

from __future__ import annotations

from typing import Iterable

from .domain.cards import Card, CardCatalog, Expansion


class CardRegistry:
    """Facade around CardCatalog with chainable API."""

    def __init__(self, catalog: CardCatalog | None = None) -> None:
        self.catalog = catalog or CardCatalog()

    def card(self, card: Card) -> "CardRegistry":
        self.catalog.register_card(card)
        return self

    def cards(self, cards: Iterable[Card]) -> "CardRegistry":
        self.catalog.register_cards(cards)
        return self

    def expansion(self, expansion: Expansion) -> "CardRegistry":
        self.catalog.register_expansion(expansion)
        return self


__all__ = ["CardRegistry"]
