"""Configuration models for KingdomForge."""

from __future__ import annotations

import os
import json
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from .domain.configuration import Configuration, SpecialCardsCount


@dataclass(slots=True)
class ShuffleConfig:
    """Initial shuffle settings handed to the configuration store."""

    expansions: Sequence[str] = ()
    events: int = 0
    landmarks: int = 0
    projects: int = 0
    ways: int = 0
    cost_distribution: Mapping[int, float] = field(default_factory=dict)

    def to_configuration(self) -> Configuration:
        return Configuration(
            expansions=frozenset(self.expansions),
            special_cards_count=SpecialCardsCount(
                events=self.events,
                landmarks=self.landmarks,
                projects=self.projects,
                ways=self.ways,
            ),
            cost_distribution=dict(self.cost_distribution),
        )


@dataclass(slots=True)
class KingdomForgeConfig:
    """Top-level configuration container."""

    catalog_path: str | None = None
    shuffle: ShuffleConfig = field(default_factory=ShuffleConfig)
    rng_seed: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "KingdomForgeConfig":
        """Create config from environment variables prefixed with KINGDOMFORGE_."""
        prefix = "KINGDOMFORGE_"

        expansions = tuple(
            exp.strip()
            for exp in os.getenv(f"{prefix}EXPANSIONS", "").split(",")
            if exp.strip()
        )

        shuffle_config = ShuffleConfig(
            expansions=expansions,
            events=int(os.getenv(f"{prefix}EVENTS", "0")),
            landmarks=int(os.getenv(f"{prefix}LANDMARKS", "0")),
            projects=int(os.getenv(f"{prefix}PROJECTS", "0")),
            ways=int(os.getenv(f"{prefix}WAYS", "0")),
            cost_distribution=_parse_cost_distribution(
                os.getenv(f"{prefix}COST_DISTRIBUTION")
            ),
        )

        return cls(
            catalog_path=os.getenv(f"{prefix}CATALOG_PATH") or None,
            shuffle=shuffle_config,
            rng_seed=(
                int(os.getenv(f"{prefix}RNG_SEED")) if os.getenv(f"{prefix}RNG_SEED") else None
            ),
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "WARNING").upper(),
        )


def _parse_cost_distribution(raw: str | None) -> Mapping[int, float]:
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid JSON for KINGDOMFORGE_COST_DISTRIBUTION") from exc
    if not isinstance(data, dict):
        raise ValueError("KINGDOMFORGE_COST_DISTRIBUTION must be a JSON object")
    try:
        return {int(k): float(v) for k, v in data.items()}
    except (TypeError, ValueError) as exc:
        raise ValueError(
            "KINGDOMFORGE_COST_DISTRIBUTION must map integer costs to numbers"
        ) from exc
