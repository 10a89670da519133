"""Validation utilities for KingdomForge applications."""

from __future__ import annotations

from .app import RandomizerApp
from .domain.cards import SPECIAL_CARD_TYPES, CardCatalog
from .domain.configuration import Configuration


def validate_configuration(configuration: Configuration, catalog: CardCatalog) -> list[str]:
    """Return errors that make a configuration unusable against the catalog."""
    errors: list[str] = []

    known_expansions = {exp.expansion_id for exp in catalog.iter_expansions()}
    if not configuration.expansions:
        errors.append("Configuration does not enable any expansion.")
    for expansion_id in sorted(configuration.expansions):
        if expansion_id not in known_expansions:
            errors.append(f"Configuration enables unknown expansion '{expansion_id}'.")

    counts = configuration.special_cards_count
    for field_name in ("events", "landmarks", "projects", "ways"):
        value = getattr(counts, field_name)
        if not isinstance(value, int) or value < 0:
            errors.append(
                f"Configuration special card count '{field_name}' must be a non-negative integer."
            )

    for cost, weight in configuration.cost_distribution.items():
        if not isinstance(cost, int) or cost < 0:
            errors.append(f"Cost distribution contains invalid cost '{cost}'.")
        if not _is_number(weight):
            errors.append(f"Cost distribution weight for cost '{cost}' must be a number.")
        elif weight < 0:
            errors.append(f"Cost distribution weight for cost '{cost}' cannot be negative.")
    if configuration.cost_distribution and not any(
        _is_number(weight) and weight > 0
        for weight in configuration.cost_distribution.values()
    ):
        errors.append("Cost distribution must contain at least one positive weight.")

    return errors


async def validate_app(app: RandomizerApp) -> list[str]:
    """Return list of validation errors discovered in configured app."""
    errors: list[str] = []
    catalog = app.cards.catalog

    expansion_ids = {exp.expansion_id for exp in catalog.iter_expansions()}
    if not expansion_ids:
        errors.append("No expansions registered in application.")

    cards = list(catalog.iter_cards())
    if not cards:
        errors.append("No cards registered in application.")

    for card in cards:
        if not card.expansions:
            errors.append(f"Card '{card.card_id}' does not belong to any expansion.")
        for expansion_id in card.expansions:
            if expansion_id not in expansion_ids:
                errors.append(f"Card '{card.card_id}' references unknown expansion '{expansion_id}'.")
        if card.cost < 0:
            errors.append(f"Card '{card.card_id}' has negative cost '{card.cost}'.")
        if card.is_kingdom_card and any(t in card.types for t in SPECIAL_CARD_TYPES):
            errors.append(f"Card '{card.card_id}' is both a kingdom card and a special card.")
        if card.is_on_top_of_split_pile and not card.is_part_of_split_pile:
            errors.append(
                f"Card '{card.card_id}' is on top of a split pile but not part of one."
            )

    errors.extend(validate_configuration(await app.configuration_store.get(), catalog))
    return errors


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = ["validate_app", "validate_configuration"]
