"""Exceptions raised by KingdomForge domain services."""


class KingdomForgeError(RuntimeError):
    """Base class for domain exceptions."""


class NoCardsAvailable(KingdomForgeError):
    """Raised when no eligible card is left to replace a card with."""

    def __init__(self, message: str, *, card_id: str | None = None) -> None:
        super().__init__(message)
        self.card_id = card_id


class CardNotInSelection(KingdomForgeError):
    """Raised when a replacement targets a card that is not in the selection."""
