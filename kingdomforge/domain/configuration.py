"""User-facing shuffle configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .cards import CardType


@dataclass(frozen=True, slots=True)
class SpecialCardsCount:
    """How many cards of each special type a selection should contain."""

    events: int = 0
    landmarks: int = 0
    projects: int = 0
    ways: int = 0

    def for_type(self, card_type: CardType) -> int:
        if card_type is CardType.EVENT:
            count = self.events
        elif card_type is CardType.LANDMARK:
            count = self.landmarks
        elif card_type is CardType.PROJECT:
            count = self.projects
        elif card_type is CardType.WAY:
            count = self.ways
        else:
            return 0
        return max(0, int(count or 0))


@dataclass(frozen=True, slots=True)
class Configuration:
    """Enabled expansions, special card quotas and optional cost weighting."""

    expansions: frozenset[str] = frozenset()
    special_cards_count: SpecialCardsCount = field(default_factory=SpecialCardsCount)
    cost_distribution: Mapping[int, float] = field(default_factory=dict)
