"""Testing utilities for KingdomForge."""

from .draw import DrawCall, RecordingDraw
from .factory import CardFactory, ExpansionFactory
from .fixtures import app_fixture, memory_app

__all__ = [
    "DrawCall",
    "RecordingDraw",
    "CardFactory",
    "ExpansionFactory",
    "app_fixture",
    "memory_app",
]
