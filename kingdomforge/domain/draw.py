"""Random draw strategies used to pick cards from a candidate pool."""

from __future__ import annotations

from abc import ABC, abstractmethod
from random import Random
from typing import Sequence, TypeVar

T = TypeVar("T")


class DrawStrategy(ABC):
    """Define how items are picked from a pool."""

    @abstractmethod
    def draw(
        self,
        items: Sequence[T],
        count: int,
        weights: Sequence[float] | None = None,
    ) -> list[T]:
        """Return up to ``count`` distinct items, drawn without replacement.

        When ``weights`` is given it is aligned with ``items`` and each draw is
        proportional to the weight among the items not drawn yet.
        """


class WeightedDraw(DrawStrategy):
    """Default behaviour: weighted draw without replacement backed by ``random.Random``.

    Items with zero weight are only drawn once every positive-weight item has
    been taken, and then uniformly. Asking for more items than available
    returns the whole pool in random order.
    """

    def __init__(self, rng: Random | None = None) -> None:
        self._rng = rng or Random()

    def draw(
        self,
        items: Sequence[T],
        count: int,
        weights: Sequence[float] | None = None,
    ) -> list[T]:
        if count < 0:
            raise ValueError("Draw count cannot be negative")
        if weights is not None:
            if len(weights) != len(items):
                raise ValueError(
                    f"Got {len(weights)} weights for {len(items)} items"
                )
            if any(weight < 0 for weight in weights):
                raise ValueError("Weights cannot be negative")

        items_pool = list(items)
        weights_pool = list(weights) if weights is not None else None
        selections: list[T] = []
        for _ in range(min(count, len(items_pool))):
            if weights_pool is None:
                index = self._uniform_index(len(items_pool))
            else:
                index = self._weighted_index(weights_pool)
                weights_pool.pop(index)
            selections.append(items_pool.pop(index))
        return selections

    def _weighted_index(self, weights: Sequence[float]) -> int:
        total = sum(weights)
        if total <= 0:
            return self._uniform_index(len(weights))
        threshold = self._rng.random() * total
        cumulative = 0.0
        last_positive = 0
        for idx, weight in enumerate(weights):
            if weight <= 0:
                continue
            cumulative += weight
            last_positive = idx
            if threshold < cumulative:
                return idx
        # Float rounding can leave threshold a hair above the final sum.
        return last_positive

    def _uniform_index(self, size: int) -> int:
        return int(self._rng.random() * size)
