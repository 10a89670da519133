"""Command line helpers for KingdomForge."""

from __future__ import annotations

import argparse
import asyncio
import importlib
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .app import RandomizerApp
from .config import KingdomForgeConfig
from .diagnostics.checklist import run_checklist as checklist_run
from .diagnostics.simulator import ShuffleSimulator
from .domain.selection import Selection
from .loaders import load_catalog_from_json, validate_catalog_file
from .validators import validate_app

console = Console()


def run_shuffle() -> None:
    parser = argparse.ArgumentParser(description="Deal a random kingdom")
    _add_catalog_arguments(parser)
    args = parser.parse_args()

    app = _build_app(args)
    selection = asyncio.run(app.shuffle_service.shuffle_set())
    console.print(render_selection(selection))


def run_simulator() -> None:
    parser = argparse.ArgumentParser(description="KingdomForge shuffle simulator")
    _add_catalog_arguments(parser)
    parser.add_argument("--shuffles", type=int, default=1000, help="Number of kingdoms to deal")
    args = parser.parse_args()

    app = _build_app(args)
    result = asyncio.run(ShuffleSimulator(app, rng=app.rng).simulate(shuffles=args.shuffles))

    table = Table(title=f"Kingdom cost share over {result.shuffles} shuffles")
    table.add_column("Cost", justify="right")
    table.add_column("Share", justify="right")
    for cost, share in result.cost_share().items():
        table.add_row(str(cost), f"{share:.1%}")
    console.print(table)
    if result.short_kingdoms:
        console.print(f"[yellow]{result.short_kingdoms} kingdoms had fewer than 10 cards.[/yellow]")
    console.print("Most dealt cards:")
    for card_id, count in result.most_common():
        console.print(f"  {card_id}: {count}")


def run_checklist() -> None:
    parser = argparse.ArgumentParser(description="KingdomForge sanity checks")
    _add_catalog_arguments(parser)
    args = parser.parse_args()

    app = _build_app(args)
    issues = asyncio.run(checklist_run(app))
    if not issues:
        console.print("No issues found ✅")
        return
    for issue in issues:
        console.print(f"[{issue.severity.upper()}] {issue.message}", markup=False)
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)


def run_validate() -> None:
    parser = argparse.ArgumentParser(description="KingdomForge validator")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--catalog",
        help="Path to catalog JSON file for validation",
    )
    group.add_argument(
        "--module",
        help="Python module with register(app) function to validate",
    )
    args = parser.parse_args()

    if args.catalog:
        errors = validate_catalog_file(Path(args.catalog))
        if errors:
            console.print("Catalog errors:")
            for err in errors:
                console.print(f"- {err}", markup=False)
            sys.exit(1)
        console.print("Catalog is valid ✅")
        return

    config = KingdomForgeConfig.from_env()
    _configure_logging(config.log_level)
    app = RandomizerApp(config)
    _load_module(args.module, app)
    issues = asyncio.run(validate_app(app))
    if issues:
        console.print("Configuration errors:")
        for issue in issues:
            console.print(f"- {issue}", markup=False)
        sys.exit(1)
    console.print("Randomizer configuration is valid ✅")


def render_selection(selection: Selection) -> Table:
    table = Table(title="Kingdom")
    table.add_column("Card")
    table.add_column("Types")
    table.add_column("Cost", justify="right")
    table.add_column("Expansions")
    for card in selection.kingdom_cards:
        table.add_row(*_card_row(card))
    if selection.special_cards:
        table.add_section()
        for card in selection.special_cards:
            table.add_row(*_card_row(card))
    return table


def _card_row(card) -> tuple[str, str, str, str]:
    cost = str(card.cost)
    if card.potion:
        cost += "P"
    if card.debt:
        cost += f" {card.debt}D"
    return (
        card.name,
        ", ".join(card_type.value for card_type in card.types),
        cost,
        ", ".join(card.expansions),
    )


def _add_catalog_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--catalog", help="Catalog JSON file (defaults to KINGDOMFORGE_CATALOG_PATH)")
    parser.add_argument("--expansions", help="Comma separated expansion ids to enable")
    parser.add_argument("--events", type=int, help="Number of events")
    parser.add_argument("--landmarks", type=int, help="Number of landmarks")
    parser.add_argument("--projects", type=int, help="Number of projects")
    parser.add_argument("--ways", type=int, help="Number of ways")
    parser.add_argument("--seed", type=int, help="Random seed")


def _build_app(args: argparse.Namespace) -> RandomizerApp:
    config = KingdomForgeConfig.from_env()
    _configure_logging(config.log_level)

    catalog_path = args.catalog or config.catalog_path
    if not catalog_path:
        raise SystemExit("A catalog path is required (--catalog or KINGDOMFORGE_CATALOG_PATH).")
    config.catalog_path = catalog_path
    if args.expansions:
        config.shuffle.expansions = tuple(
            exp.strip() for exp in args.expansions.split(",") if exp.strip()
        )
    for field_name in ("events", "landmarks", "projects", "ways"):
        value = getattr(args, field_name)
        if value is not None:
            setattr(config.shuffle, field_name, value)
    if args.seed is not None:
        config.rng_seed = args.seed

    app = RandomizerApp(config)
    load_catalog_from_json(app, catalog_path)
    if not config.shuffle.expansions:
        # Nothing enabled explicitly: deal from every expansion in the catalog.
        config.shuffle.expansions = tuple(
            exp.expansion_id for exp in app.cards.catalog.iter_expansions()
        )
        asyncio.run(app.configuration_store.save(config.shuffle.to_configuration()))
    return app


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_module(path: str, app: RandomizerApp) -> None:
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    module = importlib.import_module(path)
    if hasattr(module, "register"):
        module.register(app)
    else:
        raise RuntimeError(f"Module {path} does not define register(app).")
