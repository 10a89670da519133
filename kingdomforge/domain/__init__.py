"""Domain models and services."""

from .cards import SPECIAL_CARD_TYPES, Card, CardCatalog, CardType, Expansion, RandomizableCards
from .configuration import Configuration, SpecialCardsCount
from .selection import Selection
from .draw import DrawStrategy, WeightedDraw
from .engine import KINGDOM_SIZE, SelectionEngine, cost_weights, special_type_of
from .events import EventBus, SelectionChanged
from .exceptions import CardNotInSelection, KingdomForgeError, NoCardsAvailable
from .shuffle import ShuffleService

__all__ = [
    "SPECIAL_CARD_TYPES",
    "Card",
    "CardCatalog",
    "CardType",
    "Expansion",
    "RandomizableCards",
    "Configuration",
    "SpecialCardsCount",
    "Selection",
    "DrawStrategy",
    "WeightedDraw",
    "KINGDOM_SIZE",
    "SelectionEngine",
    "cost_weights",
    "special_type_of",
    "EventBus",
    "SelectionChanged",
    "CardNotInSelection",
    "KingdomForgeError",
    "NoCardsAvailable",
    "ShuffleService",
]
