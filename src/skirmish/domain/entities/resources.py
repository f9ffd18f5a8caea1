"""Variant resources composed into characters."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from skirmish.domain.capabilities import Damageable
from skirmish.domain.equipment import Spell, Weapon
from skirmish.domain.errors import NoWeaponEquippedError

LOG = logging.getLogger(__name__)

STARTING_MANA = 50
SPELL_MANA_COST = 10


@dataclass(slots=True)
class WeaponSlot:
    """Holds the single weapon a warrior wields."""

    weapon: Weapon | None = None

    def equip(self, weapon: Weapon) -> Weapon | None:
        """Replace the held weapon and return the one released, if any."""
        previous = self.weapon
        self.weapon = weapon
        LOG.debug("Equipped %s (released %s)", weapon.label, previous.label if previous else "nothing")
        return previous

    def require(self) -> Weapon:
        """Return the held weapon or raise when the slot is empty."""
        if self.weapon is None:
            raise NoWeaponEquippedError("Cannot attack without an equipped weapon.")
        return self.weapon

    def strike(self, target: Damageable) -> None:
        self.require().apply_to(target)

    def describe(self, stream: TextIO) -> None:
        stream.write("Weapon : ")
        if self.weapon is None:
            stream.write("Unarmed\n")
        else:
            self.weapon.describe(stream)


@dataclass(slots=True)
class ManaPool:
    """Mana reserve plus the fixed spell it fuels."""

    mana: int = STARTING_MANA
    spell: Spell = field(default_factory=Spell)

    def restore(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Mana restored must be non-negative.")
        self.mana += amount

    def cast(self, target: Damageable) -> None:
        """Spend the spell's mana cost, then apply the spell to ``target``.

        Mana is not floored; casting on an empty pool leaves it negative.
        """
        self.mana -= SPELL_MANA_COST
        LOG.debug("Cast %s, %d mana left", self.spell.label, self.mana)
        self.spell.apply_to(target)

    def describe(self, stream: TextIO) -> None:
        stream.write("Spell : ")
        self.spell.describe(stream)
