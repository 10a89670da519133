"""Domain event dispatch."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Awaitable, Callable, DefaultDict, Iterable, Sequence

SET_SHUFFLED = "selection.set.shuffled"
CARD_REPLACED = "selection.card.replaced"


@dataclass(frozen=True, slots=True)
class SelectionChanged:
    """Payload published whenever the current selection is updated."""

    card_ids: Sequence[str]
    removed: str | None = None
    added: str | None = None


EventListener = Callable[[SelectionChanged], Awaitable[None]]


class EventBus:
    """Async pub-sub used to announce selection updates."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, list[EventListener]] = defaultdict(list)

    def subscribe(self, event_name: str, listener: EventListener) -> None:
        self._listeners[event_name].append(listener)

    def unsubscribe(self, event_name: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event_name)
        if listeners and listener in listeners:
            listeners.remove(listener)

    async def publish(self, event_name: str, payload: SelectionChanged) -> None:
        for listener in list(self._listeners.get(event_name, ())):
            await listener(payload)

    def listeners(self, event_name: str) -> Iterable[EventListener]:
        return tuple(self._listeners.get(event_name, ()))
