"""Pytest fixtures for KingdomForge."""

from __future__ import annotations

import pytest

from ..app import RandomizerApp
from ..config import KingdomForgeConfig


@pytest.fixture()
def memory_app() -> RandomizerApp:
    return RandomizerApp(KingdomForgeConfig(rng_seed=0))


def app_fixture(**kwargs) -> RandomizerApp:
    """Helper for ad-hoc tests where pytest is not available."""
    config = KingdomForgeConfig(**kwargs)
    return RandomizerApp(config)
