"""Card domain models and utilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Collection, Iterable, Sequence


class CardType(str, Enum):
    ACTION = "action"
    TREASURE = "treasure"
    VICTORY = "victory"
    CURSE = "curse"
    ATTACK = "attack"
    REACTION = "reaction"
    DURATION = "duration"
    RESERVE = "reserve"
    NIGHT = "night"
    LOOTER = "looter"
    RUINS = "ruins"
    SHELTER = "shelter"
    KNIGHT = "knight"
    TRAVELLER = "traveller"
    GATHERING = "gathering"
    CASTLE = "castle"
    FATE = "fate"
    DOOM = "doom"
    HEIRLOOM = "heirloom"
    SPIRIT = "spirit"
    ZOMBIE = "zombie"
    EVENT = "event"
    LANDMARK = "landmark"
    PROJECT = "project"
    WAY = "way"


# Order in which special cards are drawn and listed in a selection.
SPECIAL_CARD_TYPES: tuple[CardType, ...] = (
    CardType.EVENT,
    CardType.LANDMARK,
    CardType.PROJECT,
    CardType.WAY,
)


@dataclass(frozen=True, slots=True)
class Expansion:
    """A selectable source set that cards are printed in."""

    expansion_id: str
    name: str


@dataclass(frozen=True, slots=True)
class Card:
    """Definition of a randomizable card."""

    card_id: str
    name: str
    expansions: tuple[str, ...]
    types: tuple[CardType, ...]
    is_kingdom_card: bool = False
    cost: int = 0
    description: str = ""
    is_part_of_split_pile: bool = False
    is_on_top_of_split_pile: bool = False
    potion: bool = False
    debt: int | None = None
    points: int | None = None
    money: int | None = None
    draws: int | None = None
    actions: int | None = None
    purchases: int | None = None

    def belongs_to_any(self, expansion_ids: Collection[str]) -> bool:
        return any(expansion_id in expansion_ids for expansion_id in self.expansions)

    @property
    def special_types(self) -> tuple[CardType, ...]:
        return tuple(card_type for card_type in SPECIAL_CARD_TYPES if card_type in self.types)

    @property
    def is_randomizable(self) -> bool:
        """Kingdom cards that may be dealt; lower split-pile cards ride along with their top card."""
        if not self.is_kingdom_card:
            return False
        return not self.is_part_of_split_pile or self.is_on_top_of_split_pile


@dataclass(frozen=True, slots=True)
class RandomizableCards:
    """Snapshot of every pool a selection can be drawn from."""

    kingdom_cards: Sequence[Card] = ()
    events: Sequence[Card] = ()
    landmarks: Sequence[Card] = ()
    projects: Sequence[Card] = ()
    ways: Sequence[Card] = ()

    def pool_for(self, card_type: CardType | None) -> Sequence[Card]:
        """Return the pool for a special type, or the kingdom pool for ``None``."""
        if card_type is None:
            return self.kingdom_cards
        if card_type is CardType.EVENT:
            return self.events
        if card_type is CardType.LANDMARK:
            return self.landmarks
        if card_type is CardType.PROJECT:
            return self.projects
        if card_type is CardType.WAY:
            return self.ways
        raise ValueError(f"{card_type.value} is not a special card type")


class CardCatalog:
    """Registry of cards and expansions."""

    def __init__(self) -> None:
        self._cards: dict[str, Card] = {}
        self._expansions: dict[str, Expansion] = {}

    def register_card(self, card: Card) -> None:
        if card.card_id in self._cards:
            raise ValueError(f"Card {card.card_id} already registered")
        self._cards[card.card_id] = card

    def register_cards(self, cards: Iterable[Card]) -> None:
        for card in cards:
            self.register_card(card)

    def get_card(self, card_id: str) -> Card:
        try:
            return self._cards[card_id]
        except KeyError as exc:
            raise KeyError(f"Card {card_id} not found") from exc

    def register_expansion(self, expansion: Expansion) -> None:
        if expansion.expansion_id in self._expansions:
            raise ValueError(f"Expansion {expansion.expansion_id} already registered")
        self._expansions[expansion.expansion_id] = expansion

    def get_expansion(self, expansion_id: str) -> Expansion:
        try:
            return self._expansions[expansion_id]
        except KeyError as exc:
            raise KeyError(f"Expansion {expansion_id} not found") from exc

    def iter_cards(self) -> Iterable[Card]:
        return self._cards.values()

    def iter_expansions(self) -> Iterable[Expansion]:
        return self._expansions.values()

    def randomizable_kingdom_cards(self) -> list[Card]:
        return [card for card in self._cards.values() if card.is_randomizable]

    def cards_of_type(self, card_type: CardType) -> list[Card]:
        return [card for card in self._cards.values() if card_type in card.types]

    def randomizable_cards(self) -> RandomizableCards:
        return RandomizableCards(
            kingdom_cards=tuple(self.randomizable_kingdom_cards()),
            events=tuple(self.cards_of_type(CardType.EVENT)),
            landmarks=tuple(self.cards_of_type(CardType.LANDMARK)),
            projects=tuple(self.cards_of_type(CardType.PROJECT)),
            ways=tuple(self.cards_of_type(CardType.WAY)),
        )
