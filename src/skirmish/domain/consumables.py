"""Consumables resolved against characters by double dispatch.

A :class:`Consumable` exposes one entry point per character variant. The
base implementation of every entry point is a no-op that reports ``False``;
concrete consumables override only the entry points their effect supports.
A character's ``feed`` calls the entry point matching its own variant and
passes itself, so the pair (item type, character type) selects the effect
without any type inspection.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .entities import Mage, Warrior, WarriorMage

HEALTH_POTION_AMOUNT = 10
MANA_POTION_AMOUNT = 10


class Consumable:
    """Single-use item whose effect depends on who consumes it."""

    name: ClassVar[str] = "Consumable"

    def apply_to_warrior(self, warrior: Warrior) -> bool:
        return False

    def apply_to_mage(self, mage: Mage) -> bool:
        return False

    def apply_to_warrior_mage(self, warrior_mage: WarriorMage) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class HealthPotion(Consumable):
    """Restores health to any character."""

    name = "Health Potion"

    def apply_to_warrior(self, warrior: Warrior) -> bool:
        warrior.heal(HEALTH_POTION_AMOUNT)
        return True

    def apply_to_mage(self, mage: Mage) -> bool:
        mage.heal(HEALTH_POTION_AMOUNT)
        return True

    def apply_to_warrior_mage(self, warrior_mage: WarriorMage) -> bool:
        warrior_mage.heal(HEALTH_POTION_AMOUNT)
        return True


class ManaPotion(Consumable):
    """Restores mana; only characters with a mana pool can drink it."""

    name = "Mana Potion"

    def apply_to_mage(self, mage: Mage) -> bool:
        mage.increase_mana(MANA_POTION_AMOUNT)
        return True

    def apply_to_warrior_mage(self, warrior_mage: WarriorMage) -> bool:
        warrior_mage.increase_mana(MANA_POTION_AMOUNT)
        return True


__all__ = [
    "Consumable",
    "HEALTH_POTION_AMOUNT",
    "HealthPotion",
    "MANA_POTION_AMOUNT",
    "ManaPotion",
]
