"""Tests for description blocks and their rendering."""
import io

from skirmish.core.types import POISONED, Position
from skirmish.domain.entities import Mage, Warrior, WarriorMage
from skirmish.domain.equipment import PoisonedSword
from skirmish.presentation.cli.render import render_blocks, render_scenario
from skirmish.services import run_demo_scenario


def _describe(subject) -> str:
    stream = io.StringIO()
    subject.describe(stream)
    return stream.getvalue()


def test_warrior_description_lists_weapon_then_base_block() -> None:
    warrior = Warrior(Position(10, 10), weapon=PoisonedSword())

    assert _describe(warrior) == (
        "Warrior :\n"
        "Weapon : Poisoned Sword\n"
        "Position : 10, 10\n"
        "Health : 500\n"
    )


def test_unarmed_warrior_description() -> None:
    warrior = Warrior(Position(0, 0))

    assert "Weapon : Unarmed\n" in _describe(warrior)


def test_poisoned_line_only_when_poisoned() -> None:
    mage = Mage(Position(5, 5))
    assert "Poisoned" not in _describe(mage)

    mage.set_status(POISONED)
    assert _describe(mage) == (
        "Mage :\n"
        "Spell : Spell\n"
        "Position : 5, 5\n"
        "Poisoned\n"
        "Health : 150\n"
    )


def test_warrior_mage_description_lists_both_resources() -> None:
    hybrid = WarriorMage(Position(1, 2), weapon=PoisonedSword())

    assert _describe(hybrid) == (
        "Warrior-Mage :\n"
        "Weapon : Poisoned Sword\n"
        "Spell : Spell\n"
        "Position : 1, 2\n"
        "Health : 300\n"
    )


def test_render_blocks_separates_with_blank_line() -> None:
    stream = io.StringIO()
    render_blocks(stream, ["Mage :\nHealth : 1\n", "Mage :\nHealth : 2\n"])

    assert stream.getvalue() == "Mage :\nHealth : 1\n\nMage :\nHealth : 2\n"


def test_render_scenario_puts_two_blank_lines_between_rounds() -> None:
    outcome = run_demo_scenario()
    stream = io.StringIO()

    render_scenario(stream, outcome)

    opening, closing = stream.getvalue().split("\n\n\n")
    assert opening.count("Health :") == 2
    assert closing.endswith("Poisoned\nHealth : 50\n")
