from __future__ import annotations

import io

from skirmish.core.types import NO_STATUS, POISONED
from skirmish.presentation.cli.render import render_scenario
from skirmish.services import run_demo_scenario

EXPECTED_OUTPUT = (
    "Warrior :\n"
    "Weapon : Poisoned Sword\n"
    "Position : 10, 10\n"
    "Health : 500\n"
    "\n"
    "Mage :\n"
    "Spell : Spell\n"
    "Position : 5, 5\n"
    "Health : 150\n"
    "\n"
    "\n"
    "Warrior :\n"
    "Weapon : Poisoned Sword\n"
    "Position : 10, 10\n"
    "Health : 490\n"
    "\n"
    "Mage :\n"
    "Spell : Spell\n"
    "Position : 5, 5\n"
    "Poisoned\n"
    "Health : 50\n"
)


def test_scenario_final_state() -> None:
    outcome = run_demo_scenario()

    assert outcome.mage.health == 50
    assert outcome.mage.status == POISONED
    assert outcome.mage.mana == 40
    assert outcome.warrior.health == 490
    assert outcome.warrior.status == NO_STATUS


def test_scenario_captures_blocks_before_and_after_attacks() -> None:
    outcome = run_demo_scenario()

    assert len(outcome.opening) == 2
    assert len(outcome.closing) == 2
    assert outcome.opening[1].endswith("Health : 150\n")
    assert outcome.closing[0].endswith("Health : 490\n")


def test_scenario_service_does_not_depend_on_presentation() -> None:
    import skirmish.services.scenario_service as scenario_module

    with open(scenario_module.__file__, encoding="utf-8") as handle:
        source = handle.read()
    assert "skirmish.presentation" not in source


def test_scenario_output_reflects_attacks() -> None:
    stream = io.StringIO()
    render_scenario(stream, run_demo_scenario())

    assert stream.getvalue() == EXPECTED_OUTPUT
