"""Selection engine: candidate filtering, cost weighting and card dispatch.

The engine is a pure transformation over snapshots. Callers fetch the current
card pools, configuration and selection, hand them in, and apply the result
themselves. The only side effect is the call to the injected draw strategy.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Collection, Iterable, Mapping, Sequence

from .cards import SPECIAL_CARD_TYPES, Card, CardType, RandomizableCards
from .configuration import Configuration
from .draw import DrawStrategy
from .exceptions import CardNotInSelection, NoCardsAvailable
from .selection import Selection

logger = logging.getLogger(__name__)

KINGDOM_SIZE = 10


def filter_by_expansions(cards: Iterable[Card], expansion_ids: Collection[str]) -> list[Card]:
    """Keep cards printed in at least one of the given expansions."""
    return [card for card in cards if card.belongs_to_any(expansion_ids)]


def exclude_cards(cards: Iterable[Card], cards_to_ignore: Iterable[Card]) -> list[Card]:
    """Drop every card whose id appears in ``cards_to_ignore``."""
    ignored_ids = {card.card_id for card in cards_to_ignore}
    return [card for card in cards if card.card_id not in ignored_ids]


def cost_weights(
    cards: Sequence[Card], cost_distribution: Mapping[int, float] | None
) -> list[float] | None:
    """Spread each cost tier's weight evenly over the candidates with that cost.

    Returns ``None`` for an empty distribution so the draw stays uniform. Costs
    missing from a non-empty distribution get weight 0.
    """
    if not cost_distribution:
        return None
    cards_per_cost = Counter(card.cost for card in cards)
    return [
        float(cost_distribution.get(card.cost, 0)) / cards_per_cost[card.cost]
        for card in cards
    ]


def special_type_of(card: Card) -> CardType | None:
    """Return the special pool a card is replaced from, or ``None`` for kingdom cards.

    A card tagged with several special types resolves to the first one in
    ``SPECIAL_CARD_TYPES`` order.
    """
    for card_type in SPECIAL_CARD_TYPES:
        if card_type in card.types:
            return card_type
    return None


class SelectionEngine:
    """Derive candidate pools and weights, then delegate the pick to a draw strategy."""

    def __init__(self, draw: DrawStrategy, *, kingdom_size: int = KINGDOM_SIZE) -> None:
        self._draw = draw
        self._kingdom_size = kingdom_size

    def produce_set(self, cards: RandomizableCards, configuration: Configuration) -> Selection:
        kingdom_cards = self._pick(
            cards.kingdom_cards,
            configuration,
            self._kingdom_size,
            label="kingdom",
        )

        special_cards: list[Card] = []
        for card_type in SPECIAL_CARD_TYPES:
            special_cards.extend(
                self._pick(
                    cards.pool_for(card_type),
                    configuration,
                    configuration.special_cards_count.for_type(card_type),
                    label=card_type.value,
                )
            )

        return Selection(kingdom_cards=tuple(kingdom_cards), special_cards=tuple(special_cards))

    def produce_replacement(
        self,
        old_card: Card,
        cards: RandomizableCards,
        configuration: Configuration,
        current: Selection,
    ) -> tuple[Card, Card]:
        if old_card.card_id not in current.card_ids():
            raise CardNotInSelection(f"Card {old_card.card_id} is not in the current selection")

        card_type = special_type_of(old_card)
        candidates = cards.pool_for(card_type)
        cards_to_ignore = current.kingdom_cards if card_type is None else current.special_cards

        drawn = self._pick(
            candidates,
            configuration,
            1,
            cards_to_ignore=cards_to_ignore,
            label=card_type.value if card_type else "kingdom",
        )
        if not drawn:
            raise NoCardsAvailable(
                f"No replacement available for card {old_card.card_id}",
                card_id=old_card.card_id,
            )
        return old_card, drawn[0]

    def _pick(
        self,
        candidates: Sequence[Card],
        configuration: Configuration,
        count: int,
        *,
        cards_to_ignore: Sequence[Card] = (),
        label: str,
    ) -> list[Card]:
        if count <= 0:
            return []

        eligible = filter_by_expansions(candidates, configuration.expansions)
        eligible = exclude_cards(eligible, cards_to_ignore)
        weights = cost_weights(eligible, configuration.cost_distribution)

        drawn = self._draw.draw(eligible, count, weights)
        if len(drawn) < count:
            logger.warning(
                "Requested %d %s cards but only %d could be drawn from %d candidates",
                count,
                label,
                len(drawn),
                len(eligible),
            )
        return drawn
