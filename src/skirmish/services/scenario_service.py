"""Fixed demonstration scenario: a poisoned-sword warrior duels a mage."""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import List, Sequence

from skirmish.core.types import Position
from skirmish.domain.capabilities import Describable
from skirmish.domain.entities import Mage, Warrior
from skirmish.domain.equipment import PoisonedSword

LOG = logging.getLogger(__name__)

WARRIOR_START = Position(10, 10)
MAGE_START = Position(5, 5)


@dataclass(slots=True)
class ScenarioOutcome:
    """Data returned to the presentation layer for rendering.

    ``opening`` and ``closing`` hold one description block per character,
    captured before and after the exchange of attacks.
    """

    warrior: Warrior
    mage: Mage
    opening: List[str]
    closing: List[str]


def _snapshot(subjects: Sequence[Describable]) -> List[str]:
    blocks: List[str] = []
    for subject in subjects:
        buffer = io.StringIO()
        subject.describe(buffer)
        blocks.append(buffer.getvalue())
    return blocks


def run_demo_scenario() -> ScenarioOutcome:
    """Run the duel and return the characters with their descriptions."""
    warrior = Warrior(WARRIOR_START)
    mage = Mage(MAGE_START)
    warrior.change_weapon(PoisonedSword())

    opening = _snapshot([warrior, mage])

    LOG.info("Warrior attacks mage")
    warrior.attack(mage)
    LOG.info("Mage attacks warrior")
    mage.attack(warrior)

    closing = _snapshot([warrior, mage])
    return ScenarioOutcome(warrior=warrior, mage=mage, opening=opening, closing=closing)
