import json
from pathlib import Path

import pytest

from kingdomforge.app import RandomizerApp
from kingdomforge.config import KingdomForgeConfig
from kingdomforge.domain.cards import CardType
from kingdomforge.loaders import (
    load_catalog_from_json,
    parse_catalog_dict,
    validate_catalog_dict,
    validate_catalog_file,
)

EXAMPLE_CATALOG = Path(__file__).resolve().parents[1] / "examples" / "catalog" / "cards.json"


def _catalog(*cards: dict) -> dict:
    return {
        "expansions": [{"id": "empires", "name": "Empires"}, {"id": 2, "name": "Intrigue"}],
        "cards": list(cards),
    }


def test_parse_catalog_dict_supports_split_piles_and_extras():
    data = _catalog(
        {
            "id": "encampment",
            "name": "Encampment",
            "expansions": ["empires"],
            "types": ["action"],
            "isKingdomCard": True,
            "isPartOfSplitPile": True,
            "isOnTopOfSplitPile": True,
            "cost": 2,
            "draws": 2,
            "actions": 2,
        },
        {
            "id": "engineer",
            "name": "Engineer",
            "expansions": ["empires"],
            "types": ["action"],
            "isKingdomCard": True,
            "cost": 0,
            "debt": 4,
        },
    )
    definition = parse_catalog_dict(data)
    encampment, engineer = definition.cards
    assert encampment.is_part_of_split_pile
    assert encampment.is_on_top_of_split_pile
    assert encampment.draws == 2
    assert engineer.debt == 4
    assert engineer.points is None
    assert definition.expansions[1].expansion_id == "2"


def test_parse_catalog_dict_numeric_expansion_ids_become_strings():
    data = _catalog(
        {"id": 7, "name": "Courtyard", "expansions": [2], "types": ["action"], "isKingdomCard": True, "cost": 2}
    )
    card = parse_catalog_dict(data).cards[0]
    assert card.card_id == "7"
    assert card.expansions == ("2",)
    assert card.types == (CardType.ACTION,)


def test_parse_catalog_dict_invalid_type_raises():
    data = _catalog({"id": "odd", "name": "Odd", "expansions": ["empires"], "types": ["spell"]})
    with pytest.raises(ValueError):
        parse_catalog_dict(data)


def test_validate_catalog_dict_unknown_expansion():
    data = _catalog({"id": "lost", "name": "Lost", "expansions": ["seaside"], "types": ["action"]})
    errors = validate_catalog_dict(data)
    assert any("unknown expansion 'seaside'" in err for err in errors)


def test_validate_catalog_dict_rejects_negative_cost_and_duplicates():
    card = {"id": "dup", "name": "Dup", "expansions": ["empires"], "types": ["event"], "cost": -1}
    errors = validate_catalog_dict(_catalog(card, card))
    assert any("invalid 'cost'" in err for err in errors)
    assert any("defined multiple times" in err for err in errors)


def test_load_catalog_from_json_registers_entities(tmp_path: Path):
    payload = _catalog(
        {"id": "plunder", "name": "Plunder", "expansions": ["empires"], "types": ["treasure"],
         "isKingdomCard": True, "isPartOfSplitPile": True, "cost": 5},
        {"id": "banquet", "name": "Banquet", "expansions": ["empires"], "types": ["event"], "cost": 3},
    )
    json_path = tmp_path / "catalog.json"
    json_path.write_text(json.dumps(payload), encoding="utf-8")

    app = RandomizerApp(KingdomForgeConfig())
    load_catalog_from_json(app, json_path)

    card_ids = {card.card_id for card in app.cards.catalog.iter_cards()}
    assert card_ids == {"plunder", "banquet"}
    expansion_ids = {exp.expansion_id for exp in app.cards.catalog.iter_expansions()}
    assert expansion_ids == {"empires", "2"}
    # Plunder sits under Encampment and is never dealt on its own.
    assert app.cards.catalog.randomizable_kingdom_cards() == []
    assert [card.card_id for card in app.cards.catalog.cards_of_type(CardType.EVENT)] == ["banquet"]


def test_example_catalog_is_valid():
    assert validate_catalog_file(EXAMPLE_CATALOG) == []


def test_validate_catalog_file_rejects_top_level_array(tmp_path: Path):
    json_path = tmp_path / "catalog.json"
    json_path.write_text(json.dumps([{"id": "village"}]), encoding="utf-8")
    assert validate_catalog_file(json_path) == ["Catalog must be a JSON object."]
