"""The dealt kingdom."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .cards import Card
from .exceptions import CardNotInSelection


@dataclass(frozen=True, slots=True)
class Selection:
    """Ten kingdom cards plus the special cards, grouped by type in draw order."""

    kingdom_cards: tuple[Card, ...] = ()
    special_cards: tuple[Card, ...] = ()

    @classmethod
    def empty(cls) -> "Selection":
        return cls()

    def __iter__(self) -> Iterator[Card]:
        yield from self.kingdom_cards
        yield from self.special_cards

    def card_ids(self) -> list[str]:
        return [card.card_id for card in self]

    def replace_card(self, old_card: Card, new_card: Card) -> "Selection":
        """Return a copy with ``old_card`` swapped for ``new_card`` at the same position."""
        for group in ("kingdom_cards", "special_cards"):
            cards = list(getattr(self, group))
            for index, card in enumerate(cards):
                if card.card_id == old_card.card_id:
                    cards[index] = new_card
                    if group == "kingdom_cards":
                        return Selection(kingdom_cards=tuple(cards), special_cards=self.special_cards)
                    return Selection(kingdom_cards=self.kingdom_cards, special_cards=tuple(cards))
        raise CardNotInSelection(f"Card {old_card.card_id} is not part of the selection")
