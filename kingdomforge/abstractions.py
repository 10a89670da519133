"""High-level helpers that simplify bootstrapping KingdomForge randomizers.

This module provides a straightforward, batteries-included API oriented towards
developers who do not want to wire stores and services by hand.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from rich.console import Console

from . import KingdomForgeConfig, RandomizerApp
from .config import ShuffleConfig
from .domain.selection import Selection
from .loaders import load_catalog_from_json, validate_catalog_dict

console = Console()


@dataclass(slots=True)
class QuickShuffleConfig:
    """Minimal settings required to deal a kingdom."""

    catalog_path: Path
    expansions: Sequence[str] = ()
    events: int = 0
    landmarks: int = 0
    projects: int = 0
    ways: int = 0
    cost_distribution: Mapping[int, float] = field(default_factory=dict)
    seed: int | None = None


async def quick_shuffle(config: QuickShuffleConfig) -> Selection:
    """Load a catalog, deal one kingdom and print it."""

    shuffle_config = ShuffleConfig(
        expansions=tuple(config.expansions),
        events=config.events,
        landmarks=config.landmarks,
        projects=config.projects,
        ways=config.ways,
        cost_distribution=dict(config.cost_distribution),
    )
    app = RandomizerApp(
        KingdomForgeConfig(
            catalog_path=str(config.catalog_path),
            shuffle=shuffle_config,
            rng_seed=config.seed,
        )
    )
    definition = load_catalog_from_json(app, config.catalog_path)
    if not shuffle_config.expansions:
        # Nothing enabled explicitly: deal from every expansion in the catalog.
        shuffle_config.expansions = tuple(exp.expansion_id for exp in definition.expansions)
        await app.configuration_store.save(shuffle_config.to_configuration())

    selection = await app.shuffle_service.shuffle_set()
    console.print(
        "[bold green]Kingdom:[/bold green] "
        + ", ".join(card.name for card in selection.kingdom_cards)
    )
    if selection.special_cards:
        console.print(
            "[bold]Special:[/bold] " + ", ".join(card.name for card in selection.special_cards)
        )
    return selection


def quick_shuffle_sync(config: QuickShuffleConfig) -> Selection:
    """Synchronous wrapper for quick_shuffle."""

    return asyncio.run(quick_shuffle(config))


@dataclass(slots=True)
class CatalogBuilder:
    """Imperative builder that produces JSON catalogs."""

    expansions: list[dict] = field(default_factory=list)
    cards: list[dict] = field(default_factory=list)

    def add_expansion(self, expansion_id: str, name: str) -> "CatalogBuilder":
        self.expansions.append({"id": expansion_id, "name": name})
        return self

    def add_card(
        self,
        card_id: str,
        name: str,
        *,
        expansions: Iterable[str],
        types: Iterable[str],
        cost: int = 0,
        is_kingdom_card: bool = False,
        description: str = "",
        potion: bool = False,
        debt: int | None = None,
        split_pile: str | None = None,
    ) -> "CatalogBuilder":
        """Append a card; ``split_pile`` is ``"top"`` or ``"bottom"`` for split-pile cards."""
        card: dict = {
            "id": card_id,
            "name": name,
            "expansions": list(expansions),
            "types": list(types),
            "cost": cost,
            "isKingdomCard": is_kingdom_card,
        }
        if description:
            card["description"] = description
        if potion:
            card["potion"] = True
        if debt is not None:
            card["debt"] = debt
        if split_pile is not None:
            card["isPartOfSplitPile"] = True
            card["isOnTopOfSplitPile"] = split_pile == "top"
        self.cards.append(card)
        return self

    def build(self) -> dict:
        catalog = {
            "expansions": self.expansions,
            "cards": self.cards,
        }
        errors = validate_catalog_dict(catalog)
        if errors:
            raise ValueError("Catalog validation failed:\n" + "\n".join(f"- {err}" for err in errors))
        return catalog

    def save(self, path: Path) -> None:
        catalog = self.build()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(catalog, ensure_ascii=False, indent=2), encoding="utf-8")


__all__ = [
    "QuickShuffleConfig",
    "CatalogBuilder",
    "quick_shuffle",
    "quick_shuffle_sync",
]
