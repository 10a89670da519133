"""Automated checks to highlight catalog and configuration issues."""

from __future__ import annotations

from dataclasses import dataclass

from ..app import RandomizerApp
from ..domain.cards import SPECIAL_CARD_TYPES
from ..domain.configuration import Configuration
from ..domain.engine import KINGDOM_SIZE, filter_by_expansions


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


async def run_checklist(
    app: RandomizerApp, configuration: Configuration | None = None
) -> list[ChecklistIssue]:
    """Check the catalog against ``configuration`` or, by default, the stored one."""
    issues: list[ChecklistIssue] = []
    if configuration is None:
        configuration = await app.configuration_store.get()
    catalog = app.cards.catalog

    expansion_ids = {exp.expansion_id for exp in await app.catalog_store.find_expansions()}
    if not expansion_ids:
        issues.append(ChecklistIssue("error", "No expansions registered."))
    if not list(catalog.iter_cards()):
        issues.append(ChecklistIssue("error", "No cards registered."))
        return issues

    for expansion_id in sorted(configuration.expansions - expansion_ids):
        issues.append(
            ChecklistIssue("warning", f"Enabled expansion '{expansion_id}' is not in the catalog.")
        )

    pools = catalog.randomizable_cards()
    kingdom = filter_by_expansions(pools.kingdom_cards, configuration.expansions)
    if len(kingdom) < KINGDOM_SIZE:
        issues.append(
            ChecklistIssue(
                "error",
                f"Enabled expansions provide {len(kingdom)} kingdom cards, "
                f"{KINGDOM_SIZE} are needed.",
            )
        )
    elif len(kingdom) == KINGDOM_SIZE:
        issues.append(
            ChecklistIssue("warning", "Enabled expansions always produce the same kingdom.")
        )

    for card_type in SPECIAL_CARD_TYPES:
        requested = configuration.special_cards_count.for_type(card_type)
        if not requested:
            continue
        available = len(filter_by_expansions(pools.pool_for(card_type), configuration.expansions))
        if available < requested:
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"{requested} {card_type.value} cards requested but only {available} available.",
                )
            )

    for card in catalog.iter_cards():
        if len(card.special_types) > 1:
            names = ", ".join(card_type.value for card_type in card.special_types)
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"Card {card.card_id} has several special types ({names}); "
                    f"it is replaced from the {card.special_types[0].value} pool.",
                )
            )

    distribution = configuration.cost_distribution
    if distribution:
        missing = sorted({card.cost for card in kingdom} - set(distribution))
        if missing:
            costs = ", ".join(str(cost) for cost in missing)
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"Cost distribution has no weight for costs {costs}; those cards are only "
                    "dealt when nothing else is left.",
                )
            )

    return issues
