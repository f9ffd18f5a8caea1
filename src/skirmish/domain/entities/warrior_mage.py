"""Warrior-Mage: a hybrid that carries both a weapon slot and a mana pool."""
from __future__ import annotations

import logging
from typing import TextIO

from skirmish.core.types import Position
from skirmish.domain.capabilities import Damageable
from skirmish.domain.consumables import Consumable
from skirmish.domain.equipment import Spell, Weapon

from .character import PlayerCharacter
from .resources import ManaPool, WeaponSlot

LOG = logging.getLogger(__name__)

WARRIOR_MAGE_HEALTH = 300


class WarriorMage(PlayerCharacter):
    """Hybrid character.

    An attack is a weapon strike followed by a spell cast. The weapon is
    checked before either effect is applied, so an unarmed attack leaves
    the target and the mana pool untouched.
    """

    label = "Warrior-Mage"

    def __init__(self, position: Position, weapon: Weapon | None = None) -> None:
        super().__init__(WARRIOR_MAGE_HEALTH, position)
        self.weapon_slot = WeaponSlot(weapon)
        self.mana_pool = ManaPool()

    @property
    def weapon(self) -> Weapon | None:
        return self.weapon_slot.weapon

    @property
    def mana(self) -> int:
        return self.mana_pool.mana

    @property
    def spell(self) -> Spell:
        return self.mana_pool.spell

    def change_weapon(self, weapon: Weapon) -> Weapon | None:
        return self.weapon_slot.equip(weapon)

    def increase_mana(self, amount: int) -> None:
        self.mana_pool.restore(amount)

    def attack(self, target: Damageable) -> None:
        weapon = self.weapon_slot.require()
        LOG.debug("%s attacks", self.label)
        weapon.apply_to(target)
        self.mana_pool.cast(target)

    def feed(self, item: Consumable) -> bool:
        return self._log_feed(item, item.apply_to_warrior_mage(self))

    def _describe_resources(self, stream: TextIO) -> None:
        self.weapon_slot.describe(stream)
        self.mana_pool.describe(stream)
