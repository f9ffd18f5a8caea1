"""Service layer exports."""

from .scenario_service import ScenarioOutcome, run_demo_scenario

__all__ = [
    "ScenarioOutcome",
    "run_demo_scenario",
]
