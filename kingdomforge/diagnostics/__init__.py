"""Diagnostics for catalogs and shuffle configurations."""

from .checklist import ChecklistIssue, run_checklist
from .simulator import ShuffleSimulator, SimulationResult

__all__ = [
    "ChecklistIssue",
    "run_checklist",
    "ShuffleSimulator",
    "SimulationResult",
]
