"""Example KingdomForge setup: a base-game catalog with a few special cards."""

from __future__ import annotations

import asyncio
from pathlib import Path

from kingdomforge import KingdomForgeConfig, RandomizerApp
from kingdomforge.config import ShuffleConfig
from kingdomforge.loaders import load_catalog_from_json


def register(app: RandomizerApp) -> None:
    """Register the example catalog."""
    catalog_path = Path(__file__).with_name("catalog") / "cards.json"
    load_catalog_from_json(app, catalog_path)


async def main() -> None:
    config = KingdomForgeConfig(
        shuffle=ShuffleConfig(
            expansions=("dominion", "intrigue", "adventures", "renaissance"),
            events=1,
            projects=1,
            # Favour 4 and 5 cost cards, keep a couple of cheap ones in play.
            cost_distribution={2: 1, 3: 2, 4: 3, 5: 3, 6: 1},
        ),
    )
    app = RandomizerApp(config)
    register(app)

    selection = await app.shuffle_service.shuffle_set()
    print("Kingdom:", ", ".join(card.name for card in selection.kingdom_cards))
    print("Special:", ", ".join(card.name for card in selection.special_cards))

    old_card, new_card = await app.shuffle_service.shuffle_single_card(selection.kingdom_cards[0])
    print(f"Swapped {old_card.name} for {new_card.name}")


if __name__ == "__main__":
    asyncio.run(main())
