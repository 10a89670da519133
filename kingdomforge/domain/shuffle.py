"""Shuffle orchestration: combine the latest snapshots and publish the result."""

from __future__ import annotations

import asyncio
import logging

from .cards import Card, CardType, RandomizableCards
from .engine import SelectionEngine
from .events import CARD_REPLACED, SET_SHUFFLED, EventBus, SelectionChanged
from .selection import Selection
from ..storage.base import CatalogStore, ConfigurationStore, SelectionStore

logger = logging.getLogger(__name__)


class ShuffleService:
    """Deal new kingdoms and swap single cards on the current one."""

    def __init__(
        self,
        engine: SelectionEngine,
        catalog_store: CatalogStore,
        configuration_store: ConfigurationStore,
        selection_store: SelectionStore,
        event_bus: EventBus,
    ) -> None:
        self._engine = engine
        self._catalog_store = catalog_store
        self._configuration_store = configuration_store
        self._selection_store = selection_store
        self._event_bus = event_bus
        self._cards_task: asyncio.Future[RandomizableCards] | None = None

    async def randomizable_cards(self) -> RandomizableCards:
        """Load the five card pools once and reuse the snapshot afterwards."""
        if self._cards_task is None:
            self._cards_task = asyncio.ensure_future(self._load_randomizable_cards())
        try:
            return await self._cards_task
        except Exception:
            self._cards_task = None
            raise

    async def shuffle_set(self) -> Selection:
        cards = await self.randomizable_cards()
        configuration = await self._configuration_store.get()

        selection = self._engine.produce_set(cards, configuration)
        await self._selection_store.replace(selection)
        logger.info(
            "Shuffled %d kingdom and %d special cards",
            len(selection.kingdom_cards),
            len(selection.special_cards),
        )

        await self._event_bus.publish(
            SET_SHUFFLED, SelectionChanged(card_ids=selection.card_ids())
        )
        return selection

    async def shuffle_single_card(self, card: Card) -> tuple[Card, Card]:
        cards = await self.randomizable_cards()
        configuration = await self._configuration_store.get()
        current = await self._selection_store.get()

        old_card, new_card = self._engine.produce_replacement(card, cards, configuration, current)
        updated = await self._selection_store.replace_card(old_card, new_card)
        logger.info("Replaced %s with %s", old_card.card_id, new_card.card_id)

        await self._event_bus.publish(
            CARD_REPLACED,
            SelectionChanged(
                card_ids=updated.card_ids(),
                removed=old_card.card_id,
                added=new_card.card_id,
            ),
        )
        return old_card, new_card

    async def _load_randomizable_cards(self) -> RandomizableCards:
        kingdom_cards, events, landmarks, projects, ways = await asyncio.gather(
            self._catalog_store.find_randomizable_kingdom_cards(),
            self._catalog_store.find_by_card_type(CardType.EVENT),
            self._catalog_store.find_by_card_type(CardType.LANDMARK),
            self._catalog_store.find_by_card_type(CardType.PROJECT),
            self._catalog_store.find_by_card_type(CardType.WAY),
        )
        logger.debug(
            "Loaded %d kingdom cards, %d events, %d landmarks, %d projects, %d ways",
            len(kingdom_cards),
            len(events),
            len(landmarks),
            len(projects),
            len(ways),
        )
        return RandomizableCards(
            kingdom_cards=tuple(kingdom_cards),
            events=tuple(events),
            landmarks=tuple(landmarks),
            projects=tuple(projects),
            ways=tuple(ways),
        )
