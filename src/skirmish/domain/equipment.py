"""Weapons and spells applied by attackers to their targets."""
from __future__ import annotations

import logging
from typing import ClassVar, TextIO

from skirmish.core.types import POISONED

from .capabilities import Damageable

LOG = logging.getLogger(__name__)


class Equipment:
    """Stateless effect applied to a damageable target.

    Subclasses set :attr:`label` and :attr:`damage`; :meth:`apply_to`
    inflicts the damage. Equipment never holds per-target state, so one
    instance can be applied any number of times.
    """

    label: ClassVar[str] = "Equipment"
    damage: ClassVar[int] = 0

    def apply_to(self, target: Damageable) -> None:
        LOG.debug("%s deals %d damage", self.label, self.damage)
        target.take_damage(self.damage)

    def describe(self, stream: TextIO) -> None:
        stream.write(f"{self.label}\n")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Spell(Equipment):
    """The basic spell every mage carries."""

    label = "Spell"
    damage = 10


class Weapon(Equipment):
    """Equipment that fits a warrior's weapon slot."""


class PoisonedSword(Weapon):
    """Heavy blade that leaves its target poisoned."""

    label = "Poisoned Sword"
    damage = 100

    def apply_to(self, target: Damageable) -> None:
        super().apply_to(target)
        target.set_status(POISONED)


__all__ = ["Equipment", "PoisonedSword", "Spell", "Weapon"]
