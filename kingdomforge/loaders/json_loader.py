"""Load expansions and cards from JSON definitions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence, TYPE_CHECKING

from ..domain.cards import Card, CardType, Expansion

if TYPE_CHECKING:
    from ..app import RandomizerApp

_OPTIONAL_INT_FIELDS = ("debt", "points", "money", "draws", "actions", "purchases")


@dataclass(slots=True)
class CatalogDefinition:
    expansions: Sequence[Expansion]
    cards: Sequence[Card]


def load_catalog_from_json(app: "RandomizerApp", path: str | Path) -> CatalogDefinition:
    """Load expansions/cards from a JSON file and register them on the app."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    definition = parse_catalog_dict(data)
    for expansion in definition.expansions:
        app.cards.expansion(expansion)
    app.cards.cards(definition.cards)
    return definition


def parse_catalog_dict(data: dict[str, Any]) -> CatalogDefinition:
    """Parse a JSON dict (already decoded) into domain objects."""
    errors = validate_catalog_dict(data)
    if errors:
        raise ValueError(_format_errors("Catalog validation failed", errors))
    expansions = tuple(parse_expansion(entry) for entry in data.get("expansions", []))
    cards = tuple(parse_card(entry) for entry in data.get("cards", []))
    return CatalogDefinition(expansions=expansions, cards=cards)


def parse_expansion(entry: dict[str, Any]) -> Expansion:
    expansion_id = str(entry["id"])
    return Expansion(expansion_id=expansion_id, name=entry.get("name", expansion_id))


def parse_card(entry: dict[str, Any]) -> Card:
    optional = {
        key: int(entry[key])
        for key in _OPTIONAL_INT_FIELDS
        if entry.get(key) is not None
    }
    return Card(
        card_id=str(entry["id"]),
        name=entry["name"],
        expansions=tuple(str(exp) for exp in entry.get("expansions", ())),
        types=tuple(CardType(card_type) for card_type in entry.get("types", ())),
        is_kingdom_card=bool(entry.get("isKingdomCard", False)),
        cost=int(entry.get("cost", 0)),
        description=entry.get("description", ""),
        is_part_of_split_pile=bool(entry.get("isPartOfSplitPile", False)),
        is_on_top_of_split_pile=bool(entry.get("isOnTopOfSplitPile", False)),
        potion=bool(entry.get("potion", False)),
        **optional,
    )


def validate_catalog_file(path: str | Path) -> list[str]:
    """Validate catalog JSON file and return a list of errors."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return validate_catalog_dict(data)


def validate_catalog_dict(data: dict[str, Any]) -> list[str]:
    if not isinstance(data, dict):
        return ["Catalog must be a JSON object."]

    errors: list[str] = []

    expansions_raw = data.get("expansions")
    expansion_ids: set[str] = set()
    if not isinstance(expansions_raw, list) or not expansions_raw:
        errors.append("Catalog must contain non-empty 'expansions' array.")
    else:
        for idx, entry in enumerate(expansions_raw, start=1):
            if not isinstance(entry, dict):
                errors.append(f"Expansion #{idx} must be an object.")
                continue
            expansion_id = _identifier(entry.get("id"))
            if expansion_id is None:
                errors.append(f"Expansion #{idx} must define non-empty 'id'.")
                continue
            if expansion_id in expansion_ids:
                errors.append(f"Expansion id '{expansion_id}' defined multiple times.")
            expansion_ids.add(expansion_id)

    cards_raw = data.get("cards")
    if not isinstance(cards_raw, list) or not cards_raw:
        errors.append("Catalog must contain non-empty 'cards' array.")
        return errors

    card_ids: set[str] = set()
    for idx, entry in enumerate(cards_raw, start=1):
        if not isinstance(entry, dict):
            errors.append(f"Card #{idx} must be an object.")
            continue
        card_id = _identifier(entry.get("id"))
        if card_id is None:
            errors.append(f"Card #{idx} must define non-empty 'id'.")
            continue
        if card_id in card_ids:
            errors.append(f"Card id '{card_id}' defined multiple times.")
        card_ids.add(card_id)

        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"Card '{card_id}' must define non-empty 'name'.")

        cost = entry.get("cost", 0)
        if not isinstance(cost, int) or isinstance(cost, bool) or cost < 0:
            errors.append(f"Card '{card_id}' has invalid 'cost' value '{cost}'.")

        card_expansions = entry.get("expansions")
        if not isinstance(card_expansions, list) or not card_expansions:
            errors.append(f"Card '{card_id}' must define non-empty 'expansions' array.")
        elif expansion_ids:
            for expansion_id in card_expansions:
                if str(expansion_id) not in expansion_ids:
                    errors.append(
                        f"Card '{card_id}' references unknown expansion '{expansion_id}'."
                    )

        types = entry.get("types")
        if not isinstance(types, list) or not types:
            errors.append(f"Card '{card_id}' must define non-empty 'types' array.")
        else:
            for card_type in types:
                try:
                    CardType(card_type)
                except ValueError:
                    errors.append(f"Card '{card_id}' has invalid type '{card_type}'.")

        for key in _OPTIONAL_INT_FIELDS:
            value = entry.get(key)
            if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
                errors.append(f"Card '{card_id}' has invalid '{key}' value '{value}'.")

    return errors


def _identifier(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
