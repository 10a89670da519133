from random import Random

import pytest

from kingdomforge.app import RandomizerApp
from kingdomforge.config import KingdomForgeConfig, ShuffleConfig
from kingdomforge.domain.cards import Card, CardType, Expansion
from kingdomforge.domain.configuration import Configuration, SpecialCardsCount
from kingdomforge.domain.events import CARD_REPLACED, SET_SHUFFLED
from kingdomforge.domain.selection import Selection
from kingdomforge.registry import CardRegistry
from kingdomforge.storage.memory import InMemoryCatalogStore
from kingdomforge.testing import RecordingDraw


def _register_cards(registry: CardRegistry) -> None:
    registry.expansion(Expansion(expansion_id="base", name="Base"))
    registry.expansion(Expansion(expansion_id="extra", name="Extra"))
    for idx in range(15):
        registry.card(
            Card(
                card_id=f"kingdom-{idx}",
                name=f"Kingdom {idx}",
                expansions=("base",),
                types=(CardType.ACTION,),
                is_kingdom_card=True,
                cost=2 + idx % 5,
            )
        )
    for idx in range(5):
        registry.card(
            Card(
                card_id=f"extra-{idx}",
                name=f"Extra {idx}",
                expansions=("extra",),
                types=(CardType.ACTION,),
                is_kingdom_card=True,
                cost=4,
            )
        )
    for idx in range(4):
        registry.card(
            Card(
                card_id=f"event-{idx}",
                name=f"Event {idx}",
                expansions=("base",),
                types=(CardType.EVENT,),
                cost=idx,
            )
        )


def _config(**shuffle) -> KingdomForgeConfig:
    shuffle.setdefault("expansions", ("base",))
    return KingdomForgeConfig(rng_seed=11, shuffle=ShuffleConfig(**shuffle))


class CountingCatalogStore(InMemoryCatalogStore):
    def __init__(self, catalog, *, failures: int = 0) -> None:
        super().__init__(catalog)
        self.kingdom_calls = 0
        self._failures = failures

    async def find_randomizable_kingdom_cards(self):
        self.kingdom_calls += 1
        if self._failures:
            self._failures -= 1
            raise ConnectionError("catalog unavailable")
        return await super().find_randomizable_kingdom_cards()


@pytest.mark.asyncio()
async def test_shuffle_set_updates_selection_store():
    app = RandomizerApp(_config(events=2))
    _register_cards(app.cards)

    selection = await app.shuffle_service.shuffle_set()

    assert await app.selection_store.get() == selection
    assert len(selection.kingdom_cards) == 10
    assert len(selection.special_cards) == 2
    assert all(card.expansions == ("base",) for card in selection)


@pytest.mark.asyncio()
async def test_shuffle_set_publishes_event():
    app = RandomizerApp(_config())
    _register_cards(app.cards)
    received = []

    async def listener(payload):
        received.append(payload)

    app.event_bus.subscribe(SET_SHUFFLED, listener)
    selection = await app.shuffle_service.shuffle_set()

    assert len(received) == 1
    assert list(received[0].card_ids) == selection.card_ids()


@pytest.mark.asyncio()
async def test_shuffle_single_card_swaps_card_in_place():
    app = RandomizerApp(_config(events=1))
    _register_cards(app.cards)
    received = []

    async def listener(payload):
        received.append(payload)

    app.event_bus.subscribe(CARD_REPLACED, listener)
    selection = await app.shuffle_service.shuffle_set()
    old_card = selection.kingdom_cards[3]

    old, new = await app.shuffle_service.shuffle_single_card(old_card)

    current = await app.selection_store.get()
    assert old == old_card
    assert current.kingdom_cards[3] == new
    assert new.card_id not in {card.card_id for card in selection.kingdom_cards}
    assert new.expansions == ("base",)
    assert received[0].removed == old_card.card_id
    assert received[0].added == new.card_id


@pytest.mark.asyncio()
async def test_shuffle_single_special_card_stays_in_special_pool():
    app = RandomizerApp(_config(events=2))
    _register_cards(app.cards)
    selection = await app.shuffle_service.shuffle_set()

    _, new = await app.shuffle_service.shuffle_single_card(selection.special_cards[0])

    assert CardType.EVENT in new.types
    assert new.card_id not in {card.card_id for card in selection.special_cards}


@pytest.mark.asyncio()
async def test_card_pools_are_loaded_once():
    registry = CardRegistry()
    _register_cards(registry)
    store = CountingCatalogStore(registry.catalog)
    app = RandomizerApp(_config(), catalog_store=store)

    await app.shuffle_service.shuffle_set()
    await app.shuffle_service.shuffle_set()

    assert store.kingdom_calls == 1


@pytest.mark.asyncio()
async def test_failed_catalog_load_propagates_and_is_retried():
    registry = CardRegistry()
    _register_cards(registry)
    store = CountingCatalogStore(registry.catalog, failures=1)
    app = RandomizerApp(_config(), catalog_store=store)

    with pytest.raises(ConnectionError):
        await app.shuffle_service.shuffle_set()
    selection = await app.shuffle_service.shuffle_set()

    assert len(selection.kingdom_cards) == 10
    assert store.kingdom_calls == 2


@pytest.mark.asyncio()
async def test_shuffle_uses_latest_configuration():
    app = RandomizerApp(_config())
    _register_cards(app.cards)

    first = await app.shuffle_service.shuffle_set()
    await app.configuration_store.save(
        Configuration(
            expansions=frozenset({"extra", "base"}),
            special_cards_count=SpecialCardsCount(events=3),
        )
    )
    second = await app.shuffle_service.shuffle_set()

    assert first.special_cards == ()
    assert len(second.special_cards) == 3


@pytest.mark.asyncio()
async def test_shuffle_service_delegates_to_draw_strategy():
    draw = RecordingDraw()
    app = RandomizerApp(_config(cost_distribution={2: 1, 3: 1}), draw=draw)
    _register_cards(app.cards)

    await app.shuffle_service.shuffle_set()

    assert len(draw.calls) == 1
    call = draw.calls[0]
    assert [card.card_id for card in call.items] == [f"kingdom-{idx}" for idx in range(15)]
    assert call.count == 10
    # 3 cards per cost tier among the 15 base cards.
    assert call.weights == [1 / 3 if card.cost in (2, 3) else 0 for card in call.items]


@pytest.mark.asyncio()
async def test_repeated_single_card_shuffles_never_duplicate_cards():
    app = RandomizerApp(_config(), rng=Random(5))
    _register_cards(app.cards)
    selection = await app.shuffle_service.shuffle_set()

    for idx in range(5):
        current = await app.selection_store.get()
        await app.shuffle_service.shuffle_single_card(current.kingdom_cards[idx])
        updated = await app.selection_store.get()
        ids = updated.card_ids()
        assert len(ids) == len(set(ids)) == len(selection.card_ids())


@pytest.mark.asyncio()
async def test_unsubscribed_listener_stops_receiving_events():
    app = RandomizerApp(_config())
    _register_cards(app.cards)
    received = []

    async def listener(payload):
        received.append(payload)

    app.event_bus.subscribe(SET_SHUFFLED, listener)
    await app.shuffle_service.shuffle_set()
    app.event_bus.unsubscribe(SET_SHUFFLED, listener)
    await app.shuffle_service.shuffle_set()

    assert len(received) == 1
    assert app.event_bus.listeners(SET_SHUFFLED) == ()


@pytest.mark.asyncio()
async def test_selection_store_keeps_previous_selections():
    app = RandomizerApp(_config(), draw=RecordingDraw())
    _register_cards(app.cards)

    first = await app.shuffle_service.shuffle_set()
    _, new = await app.shuffle_service.shuffle_single_card(first.kingdom_cards[0])

    assert app.selection_store.history() == [Selection.empty(), first]
    current = await app.selection_store.get()
    assert current.kingdom_cards[0] == new
    assert new.card_id == "kingdom-10"


@pytest.mark.asyncio()
async def test_single_card_shuffle_uses_scripted_replacement():
    registry = CardRegistry()
    _register_cards(registry)
    replacement = registry.catalog.get_card("kingdom-14")
    kingdom = [registry.catalog.get_card(f"kingdom-{idx}") for idx in range(10)]
    draw = RecordingDraw().returns(kingdom, [replacement])
    app = RandomizerApp(
        _config(), catalog_store=InMemoryCatalogStore(registry.catalog), draw=draw
    )

    selection = await app.shuffle_service.shuffle_set()
    _, new = await app.shuffle_service.shuffle_single_card(selection.kingdom_cards[5])

    assert new == replacement
    assert [card.card_id for card in draw.calls[1].items] == [
        f"kingdom-{idx}" for idx in range(10, 15)
    ]
    assert (await app.selection_store.get()).kingdom_cards[5] == replacement
