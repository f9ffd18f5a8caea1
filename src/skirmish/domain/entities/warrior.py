"""Warrior: a character that fights with one equipped weapon."""
from __future__ import annotations

import logging
from typing import TextIO

from skirmish.core.types import Position
from skirmish.domain.capabilities import Damageable
from skirmish.domain.consumables import Consumable
from skirmish.domain.equipment import Weapon

from .character import PlayerCharacter
from .resources import WeaponSlot

LOG = logging.getLogger(__name__)

WARRIOR_HEALTH = 500


class Warrior(PlayerCharacter):
    """Melee character. A weapon must be equipped before attacking."""

    label = "Warrior"

    def __init__(self, position: Position, weapon: Weapon | None = None) -> None:
        super().__init__(WARRIOR_HEALTH, position)
        self.weapon_slot = WeaponSlot(weapon)

    @property
    def weapon(self) -> Weapon | None:
        return self.weapon_slot.weapon

    def change_weapon(self, weapon: Weapon) -> Weapon | None:
        """Equip ``weapon`` and return the released one, if any."""
        return self.weapon_slot.equip(weapon)

    def attack(self, target: Damageable) -> None:
        LOG.debug("%s attacks", self.label)
        self.weapon_slot.strike(target)

    def feed(self, item: Consumable) -> bool:
        return self._log_feed(item, item.apply_to_warrior(self))

    def _describe_resources(self, stream: TextIO) -> None:
        self.weapon_slot.describe(stream)
