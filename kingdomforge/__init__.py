"""KingdomForge public API."""

from .app import RandomizerApp
from .config import KingdomForgeConfig, ShuffleConfig
from .registry import CardRegistry

__all__ = [
    "RandomizerApp",
    "KingdomForgeConfig",
    "ShuffleConfig",
    "CardRegistry",
]
