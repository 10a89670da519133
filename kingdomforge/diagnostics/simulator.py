"""Shuffle simulation helpers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from random import Random
from typing import Dict

from ..app import RandomizerApp
from ..domain.configuration import Configuration
from ..domain.draw import WeightedDraw
from ..domain.engine import KINGDOM_SIZE, SelectionEngine
from ..domain.selection import Selection


@dataclass(slots=True)
class SimulationResult:
    shuffles: int
    kingdom_costs: Dict[int, int] = field(default_factory=dict)
    card_counts: Dict[str, int] = field(default_factory=dict)
    short_kingdoms: int = 0

    def merge(self, selection: Selection) -> None:
        if len(selection.kingdom_cards) < KINGDOM_SIZE:
            self.short_kingdoms += 1
        for card in selection.kingdom_cards:
            self.kingdom_costs[card.cost] = self.kingdom_costs.get(card.cost, 0) + 1
        for card in selection:
            self.card_counts[card.card_id] = self.card_counts.get(card.card_id, 0) + 1

    def cost_share(self) -> Dict[int, float]:
        """Fraction of dealt kingdom cards per cost."""
        total = sum(self.kingdom_costs.values())
        if not total:
            return {}
        return {cost: count / total for cost, count in sorted(self.kingdom_costs.items())}

    def most_common(self, limit: int = 10) -> list[tuple[str, int]]:
        return Counter(self.card_counts).most_common(limit)


class ShuffleSimulator:
    """Monte-Carlo simulation to evaluate how a configuration deals kingdoms."""

    def __init__(self, app: RandomizerApp, *, rng: Random | None = None) -> None:
        self._app = app
        self._engine = SelectionEngine(WeightedDraw(rng or Random()))

    async def simulate(
        self, configuration: Configuration | None = None, *, shuffles: int = 1000
    ) -> SimulationResult:
        if configuration is None:
            configuration = await self._app.configuration_store.get()
        cards = await self._app.shuffle_service.randomizable_cards()
        result = SimulationResult(shuffles=shuffles)
        for _ in range(shuffles):
            result.merge(self._engine.produce_set(cards, configuration))
        return result
